#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os
from collections import defaultdict
from datetime import date

from psaquery import QueryAPI


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Sum billable timecard hours per resource")
    p.add_argument("opportunity")
    p.add_argument("start", type=date.fromisoformat)
    p.add_argument("end", type=date.fromisoformat)
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with QueryAPI(
        instance_url=os.environ["PSA_INSTANCE_URL"],
        access_token=os.environ["PSA_ACCESS_TOKEN"],
    ) as api:
        timecards = await api.query_timecards(args.opportunity, args.start, args.end)

    hours: dict[str, float] = defaultdict(float)
    for tc in timecards:
        resource = (tc.get("pse__Resource__r") or {}).get("Name") or "(unassigned)"
        hours[resource] += tc.get("pse__Total_Hours__c") or 0.0

    print("=" * 50)
    print(f"Opportunity : {args.opportunity}")
    print(f"Period      : {args.start} .. {args.end}")
    print(f"Timecards   : {len(timecards)}")
    print("=" * 50)
    print(f"{'Resource':36} | {'Hours':>10}")
    print("-" * 50)
    for resource, total in sorted(hours.items(), key=lambda kv: -kv[1]):
        print(f"{resource:36} | {total:>10.2f}")
    print("=" * 50)


if __name__ == "__main__":
    asyncio.run(main())
