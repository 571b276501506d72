#!/usr/bin/env python3
"""Run a PSA query and print every record as JSON.

Usage:
    # Raw SOQL
    python scripts/run_query.py --soql "SELECT Name FROM pse__Proj__c"

    # Timecards of an opportunity within a date range
    python scripts/run_query.py --timecards OP-1234 --start 2024-01-01 --end 2024-03-31

    # Projects of an opportunity, export retry budget
    python scripts/run_query.py --projects OP-1234 --retry export

Credentials are read from PSA_INSTANCE_URL and PSA_ACCESS_TOKEN unless
given on the command line.
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from datetime import date

from psaquery import (
    DEFAULT_MAX_PAGES,
    EXPORT_RETRY,
    QUERY_RETRY,
    PSAQueryError,
    PSARESTConnector,
    Query,
    QueryAPI,
    RetrievalError,
)

logger = logging.getLogger("run_query")

RETRY_PRESETS = {"query": QUERY_RETRY, "export": EXPORT_RETRY}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Retrieve all records of a PSA query")
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--soql", help="Raw SOQL query text")
    target.add_argument("--timecards", metavar="OPPORTUNITY", help="Timecards of an opportunity")
    target.add_argument("--projects", metavar="OPPORTUNITY", help="Projects of an opportunity")
    parser.add_argument("--start", type=date.fromisoformat, help="Timecard start date (YYYY-MM-DD)")
    parser.add_argument("--end", type=date.fromisoformat, help="Timecard end date (YYYY-MM-DD)")
    parser.add_argument("--instance-url", default=os.environ.get("PSA_INSTANCE_URL"))
    parser.add_argument("--access-token", default=os.environ.get("PSA_ACCESS_TOKEN"))
    parser.add_argument("--api-version", default="59.0")
    parser.add_argument("--retry", choices=sorted(RETRY_PRESETS), default="query")
    parser.add_argument("--max-pages", type=int, default=DEFAULT_MAX_PAGES)
    parser.add_argument(
        "--timeout", type=float, default=None, help="Overall deadline in seconds (--soql only)"
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    if args.timecards and (args.start is None or args.end is None):
        parser.error("--timecards requires --start and --end")
    if not args.instance_url or not args.access_token:
        parser.error("instance URL and access token are required (flags or environment)")
    return args


async def run(args: argparse.Namespace) -> list:
    async with PSARESTConnector(
        args.instance_url, args.access_token, api_version=args.api_version
    ) as connector:
        api = QueryAPI(connector, retry_config=RETRY_PRESETS[args.retry], max_pages=args.max_pages)
        if args.timecards:
            return await api.query_timecards(args.timecards, args.start, args.end)
        if args.projects:
            return await api.query_projects(args.projects)
        return await api.retrieve(Query(text=args.soql), timeout=args.timeout)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        records = asyncio.run(run(args))
    except RetrievalError as e:
        logger.error(f"Query failed after {e.pages_completed} pages: {e}")
        return 1
    except PSAQueryError as e:
        logger.error(f"Query failed: {e}")
        return 1

    json.dump(records, sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")
    logger.info(f"Query completed. Total records retrieved: {len(records)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
