#!/usr/bin/env python3
"""Export a large query to JSON lines, stoppable with Ctrl+C between pages."""

from __future__ import annotations

import argparse
import asyncio
import json
import os
import signal

from psaquery import EXPORT_RETRY, PSARESTConnector, Query, RetrievalCancelled, retrieve


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Export all records of a SOQL query")
    p.add_argument("soql")
    p.add_argument("output")
    p.add_argument("--batch-size", type=int, default=2000)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    stop = asyncio.Event()
    asyncio.get_running_loop().add_signal_handler(signal.SIGINT, stop.set)

    async with PSARESTConnector(
        os.environ["PSA_INSTANCE_URL"],
        os.environ["PSA_ACCESS_TOKEN"],
        batch_size=args.batch_size,
    ) as connector:
        try:
            records = await retrieve(
                Query(text=args.soql, label="export"),
                EXPORT_RETRY,
                service=connector,
                cancel_event=stop,
            )
        except RetrievalCancelled as e:
            print(f"Export stopped after {e.pages_completed} pages; nothing written")
            return

    with open(args.output, "w", encoding="utf-8") as fh:
        for record in records:
            fh.write(json.dumps(record, default=str) + "\n")
    print(f"Wrote {len(records)} records to {args.output}")


if __name__ == "__main__":
    asyncio.run(main())
