#!/usr/bin/env python3
"""
FeedLoader Quickstart Example

Shows the basic flow: build a transport, load a feed, branch on the result.

Usage:
    python examples/01_quickstart.py [URL]
"""

import asyncio
import sys

from feedloader import HttpxTransport, LoadSuccess, RemoteFeedLoader, get_settings


async def main(url: str) -> None:
    """Load one feed and print what came back."""
    settings = get_settings()

    async with HttpxTransport.from_settings(settings) as transport:
        loader = RemoteFeedLoader(url, transport)
        result = await loader.load()

    if isinstance(result, LoadSuccess):
        print(f"Loaded {len(result.items)} items")
        for item in result.items:
            print(f"  {item.id}  {item.description or '-'}  {item.image_url}")
    else:
        print(f"Load failed: {result.error.value}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else get_settings().feed_url))
