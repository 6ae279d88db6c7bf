"""
Command-line search client.

Usage:
    python -m usersearch.client --query Boyd --order-field Age --order-by 1
"""

import argparse
import json
import logging
import os
import sys

from usersearch.client import SearchClient
from usersearch.core.config import settings
from usersearch.exceptions import SearchClientError
from usersearch.schemas import SearchRequest


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Query a user search server",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--url", default=settings.SEARCH_URL, help="Search endpoint URL")
    parser.add_argument(
        "--token",
        default=os.getenv("SEARCH_ACCESS_TOKEN", ""),
        help="Access token (or SEARCH_ACCESS_TOKEN env)",
    )
    parser.add_argument("--limit", type=int, default=10, help="Maximum number of records")
    parser.add_argument("--offset", type=int, default=0, help="Number of records to skip")
    parser.add_argument("--query", default="", help="Substring filter on name and about")
    parser.add_argument(
        "--order-field",
        default="",
        help="Id, Name or Age; empty sorts by Name",
    )
    parser.add_argument(
        "--order-by",
        type=int,
        default=0,
        help="-1 descending, 0 as is, 1 ascending",
    )
    parser.add_argument("--timeout", type=float, default=settings.CLIENT_TIMEOUT, help="Timeout in seconds")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.LOG_LEVEL, stream=sys.stderr)

    request = SearchRequest(
        limit=args.limit,
        offset=args.offset,
        query=args.query,
        order_field=args.order_field,
        order_by=args.order_by,
    )

    with SearchClient(args.token, url=args.url, timeout=args.timeout) as client:
        try:
            result = client.find_users(request)
        except SearchClientError as e:
            print(f"error ({e.kind.value}): {e.message}", file=sys.stderr)
            return 1

    print(json.dumps(result.model_dump(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
