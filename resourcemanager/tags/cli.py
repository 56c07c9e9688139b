"""Command line entry point: list every tag binding under a parent resource.

Usage:
    list-tag-bindings //cloudresourcemanager.googleapis.com/projects/123
    list-tag-bindings PARENT --page-size 50 --log-level INFO

Each binding is printed to stdout as one JSON object per line using the
service's field names. Errors go to stderr and set a non-zero exit status.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import TextIO

from .clients import TagBindingsClient
from .models import ListTagBindingsRequest

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="list-tag-bindings",
        description="List the TagBindings attached to a cloud resource",
    )
    p.add_argument(
        "parent",
        help='Full resource name, e.g. "//cloudresourcemanager.googleapis.com/projects/123"',
    )
    p.add_argument("--page-size", type=int, default=None, help="Bindings per page (server max 300)")
    p.add_argument("--page-token", default=None, help="Resume from a previous page token")
    p.add_argument("--max-pages", type=int, default=None, help="Stop after this many pages")
    p.add_argument("--endpoint", default=None, help="Service base URL")
    p.add_argument("--access-token", default=None, help="OAuth2 bearer token")
    p.add_argument("--quota-project", default=None, help="Project billed for quota")
    p.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS)
    return p.parse_args(argv)


async def list_tag_bindings(args: argparse.Namespace, out: TextIO | None = None) -> int:
    """Print every binding under ``args.parent``; returns the number printed."""
    out = out or sys.stdout
    request = ListTagBindingsRequest(
        parent=args.parent,
        page_size=args.page_size,
        page_token=args.page_token,
    )

    count = 0
    async with TagBindingsClient(
        endpoint=args.endpoint,
        access_token=args.access_token,
        quota_project=args.quota_project,
    ) as client:
        pager = client.list_tag_bindings(request, max_pages=args.max_pages)
        async for binding in pager:
            print(binding.to_wire(), file=out)
            count += 1

        if pager.next_page_token:
            logger.info(
                "Stopped before the last page; resume with --page-token %s",
                pager.next_page_token,
            )

    return count


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        stream=sys.stderr,
        format=LOG_FORMAT,
    )

    try:
        count = asyncio.run(list_tag_bindings(args))
    except Exception as e:
        print(str(e) or type(e).__name__, file=sys.stderr)
        return 1

    logger.info("Listed %d tag bindings under %s", count, args.parent)
    return 0


if __name__ == "__main__":
    sys.exit(main())
