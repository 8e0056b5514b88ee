"""
Command line entry point: print the schedule of a feed.

    python -m sony_schedules en-gb --date 2011-04-07
"""
import argparse
import asyncio
import sys
from datetime import date

from sony_schedules.config import setup_logging
from sony_schedules.exceptions import ScheduleError
from sony_schedules.locations import LOCATIONS
from sony_schedules.services import SonySchedule


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sony_schedules",
        description="Print the Sony TV programme schedule of a regional feed."
    )
    parser.add_argument("location", help=f"Feed location, one of: {', '.join(LOCATIONS)}")
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        help="Schedule date as YYYY-MM-DD (defaults to today)"
    )
    parser.add_argument("--url-only", action="store_true", help="Print the schedule page URL and exit")
    return parser


async def run(args: argparse.Namespace) -> str:
    params: dict = {"location": args.location}
    if args.date:
        params.update(yyyy=args.date.year, mm=args.date.month, dd=args.date.day)

    schedule = SonySchedule(params)
    if args.url_only:
        return schedule.get_url() + "\n"
    return await schedule.as_string()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()

    try:
        output = asyncio.run(run(args))
    except ScheduleError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
