from __future__ import annotations

import argparse
import logging
from datetime import date
from typing import Optional, Sequence

from .bootstrap import configure_logging
from .config import get_settings
from .core import expand_repeat_dates, format_month, month_grid
from .domain import RepeatRule, RepeatType


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Recurcal command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    api_parser = subparsers.add_parser("api", help="Start the HTTP server exposing the calendar functions.")
    api_parser.add_argument("--host", default="127.0.0.1")
    api_parser.add_argument("--port", type=int, default=8000)

    expand_parser = subparsers.add_parser("expand", help="Print the dates a repeat rule produces.")
    expand_parser.add_argument("start", type=date.fromisoformat, help="First occurrence, YYYY-MM-DD.")
    expand_parser.add_argument(
        "--type",
        dest="repeat_type",
        choices=[member.value for member in RepeatType],
        default=RepeatType.DAILY.value,
    )
    expand_parser.add_argument("--interval", type=int, default=1)
    expand_parser.add_argument("--end", type=date.fromisoformat, default=None, help="Last allowed date.")

    month_parser = subparsers.add_parser("month", help="Print the Sunday-first grid of a month.")
    month_parser.add_argument("day", type=date.fromisoformat, help="Any day in the month, YYYY-MM-DD.")

    return parser


def _render_month(day: date) -> str:
    lines = [format_month(day), "Su Mo Tu We Th Fr Sa"]
    for week in month_grid(day):
        lines.append(" ".join(f"{cell:2d}" if cell else "  " for cell in week))
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> None:
    configure_logging()
    logging.getLogger(__name__).info("Recurcal CLI starting")
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "api":
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)
    elif args.command == "expand":
        rule = RepeatRule(type=RepeatType(args.repeat_type), interval=args.interval, end_date=args.end)
        horizon = get_settings().recurrence.default_horizon
        for value in expand_repeat_dates(args.start, rule, horizon=horizon):
            print(value.isoformat())
    elif args.command == "month":
        print(_render_month(args.day))
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
