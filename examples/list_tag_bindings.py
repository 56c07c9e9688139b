#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from resourcemanager.tags import ListTagBindingsRequest, TagBindingsClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List TagBindings for a resource")
    # Full resource name, e.g. //cloudresourcemanager.googleapis.com/projects/123
    p.add_argument("parent")
    p.add_argument("page_size", nargs="?", type=int, default=None)
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    request = ListTagBindingsRequest(parent=args.parent, page_size=args.page_size)

    async with TagBindingsClient() as client:
        pager = client.list_tag_bindings(request)
        async for binding in pager:
            print(binding)
        print(f"{pager.pages_fetched} page(s) fetched")


if __name__ == "__main__":
    asyncio.run(main())
