"""Command-line view of the request sheet.

USAGE:
  python -m src.cli                                   # All requests from $SHEET_CSV_URL
  python -m src.cli --status pending                  # Only unanswered requests
  python -m src.cli --query garcía --status answered  # Search + status filter
  python -m src.cli --url https://example.com/sheet.csv
"""

import argparse
import sys

import polars as pl

from src.config import AppConfig
from src.state import DatasetSession
from src.transform.filters import StatusFilter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m src.cli",
        description="Print the academic request table with elapsed days.",
    )
    parser.add_argument("--url", help="CSV export URL (default: $SHEET_CSV_URL)")
    parser.add_argument("--query", default="", help="Text to search for in any column")
    parser.add_argument(
        "--status",
        choices=[s.value for s in StatusFilter],
        default=StatusFilter.ALL.value,
        help="Filter by answered status",
    )
    return parser


def main(argv: list[str] = None) -> int:
    args = build_parser().parse_args(argv)

    config = AppConfig()
    if args.url:
        config.csv_url = args.url.strip()

    session = DatasetSession(config)
    if not session.reload():
        print(f"Error: {session.error}", file=sys.stderr)
        return 1

    session.set_query(args.query)
    session.set_status(StatusFilter(args.status))

    table = session.table()
    with pl.Config(tbl_rows=-1, fmt_str_lengths=80, tbl_hide_dataframe_shape=True):
        print(table)
    print(f"Total visible: {table.height}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
