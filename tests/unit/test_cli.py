"""Tests for feedloader.cli."""

from __future__ import annotations

import pytest
from rich.console import Console
from typer.testing import CliRunner

from feedloader import cli
from feedloader.testing import FakeTransport, StubConfiguration

runner = CliRunner()

FIXTURE_BODY = (
    b'{"items":[{"id":"73A7F70C-75DA-4C2E-B5A3-EED40DC53AA6",'
    b'"description":"Description 1","location":"Location 1",'
    b'"image":"https://url-1.com"}]}'
)


@pytest.fixture
def cli_stubs(monkeypatch: pytest.MonkeyPatch) -> StubConfiguration:
    """Route the CLI through a fake transport."""
    config = StubConfiguration()
    monkeypatch.setattr(cli, "_build_transport", lambda settings: FakeTransport(config))
    monkeypatch.setattr(cli, "console", Console(width=200))
    monkeypatch.delenv("FEEDLOADER_LOG_LEVEL", raising=False)
    return config


class TestLoadCommand:
    def test_prints_items(self, cli_stubs: StubConfiguration) -> None:
        cli_stubs.succeed_with(FIXTURE_BODY)

        result = runner.invoke(cli.app, ["load", "https://a-url.com/feed"])

        assert result.exit_code == 0
        assert "73a7f70c-75da-4c2e-b5a3-eed40dc53aa6" in result.stdout
        assert "Description 1" in result.stdout
        assert cli_stubs.requests[0].url == "https://a-url.com/feed"

    def test_defaults_to_configured_url(
        self, cli_stubs: StubConfiguration, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FEEDLOADER_FEED_URL", "https://configured.com/feed")
        cli_stubs.succeed_with(b'{"items": []}')

        result = runner.invoke(cli.app, ["load"])

        assert result.exit_code == 0
        assert cli_stubs.requests[0].url == "https://configured.com/feed"

    def test_connectivity_failure_exits_1(self, cli_stubs: StubConfiguration) -> None:
        cli_stubs.fail_with(OSError("offline"))

        result = runner.invoke(cli.app, ["load", "https://a-url.com/feed"])

        assert result.exit_code == 1
        assert "connectivity" in result.stdout

    def test_invalid_data_exits_1(self, cli_stubs: StubConfiguration) -> None:
        cli_stubs.succeed_with(FIXTURE_BODY, status_code=201)

        result = runner.invoke(cli.app, ["load", "https://a-url.com/feed"])

        assert result.exit_code == 1
        assert "invalid_data" in result.stdout

    def test_invalid_configuration_exits_2(
        self, cli_stubs: StubConfiguration, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FEEDLOADER_LOG_LEVEL", "chatty")

        result = runner.invoke(cli.app, ["load", "https://a-url.com/feed"])

        assert result.exit_code == 2
        assert cli_stubs.requests == []


class TestVersionCommand:
    def test_prints_version(self) -> None:
        from feedloader import __version__

        result = runner.invoke(cli.app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout
