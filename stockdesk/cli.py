from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, TextIO

from .config import Settings, load_settings
from .core.data import ReferenceTable, inspect_reference_data, load_reference_table
from .core.dispatcher import dispatch
from .core.errors import ReferenceDataError
from .core.formatting import WELCOME_MESSAGE, format_currency
from .core.types import ProfitAlgorithm

logger = logging.getLogger(__name__)

USAGE_TEXT = """\
Part 1: value a portfolio at the reference close prices
  Input:     -part1 [<TICKER>:<QUANTITY>]
  Test case: -part1 "FB:12,PLTR:5000"

Part 2: best single buy then sell over a list of daily prices
  Input:     -part2 [<PRICE>] OR -bonus [<PRICE>]
  Test case: -part2 "7,1,5,3,6,4" OR -bonus "7,1,5,3,6,4"

Other commands: help, reset, quit"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stockdesk",
        description="Stock portfolio and buy/sell profit calculator",
        epilog="Commands: -part1 \"FB:12,PLTR:5000\" | -part2 \"7,1,5,3,6,4\" | -bonus \"7,1,5,3,6,4\"",
        allow_abbrev=False,
    )
    parser.add_argument("--data", default=None, help="Path to reference stocks JSON")
    parser.add_argument(
        "--algorithm",
        choices=[a.value for a in ProfitAlgorithm],
        default=None,
        help="Profit search used by -part2/-bonus",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, ...)")
    parser.add_argument("--interactive", action="store_true", help="Read commands from a prompt")
    parser.add_argument("--list-tickers", action="store_true", help="Print the reference table and exit")
    parser.add_argument("--check-data", action="store_true", help="Validate the reference data, print a summary and exit")
    return parser


def run_interactive(
    table: ReferenceTable,
    algorithm: ProfitAlgorithm,
    read_line: Callable[[str], str] = input,
    out: Optional[TextIO] = None,
) -> None:
    out = out or sys.stdout
    print(WELCOME_MESSAGE, file=out)
    while True:
        try:
            line = read_line("> ").strip()
        except EOFError:
            break
        if not line:
            continue
        if line in ("quit", "exit"):
            break
        if line == "reset":
            print(WELCOME_MESSAGE, file=out)
        elif line == "help":
            print(USAGE_TEXT, file=out)
        else:
            print(dispatch(line, table, algorithm), file=out)


def print_tickers(table: ReferenceTable, out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    df = table.to_frame()
    df["close"] = df["close"].map(format_currency)
    df["date"] = df["date"].fillna("")
    print(df.to_string(index=False), file=out)


def print_data_summary(meta: dict, out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    print(f"Reference data: {meta['path']}", file=out)
    print(f"Rows: {meta['rows']}", file=out)
    print(f"As of: {meta['as_of'] or 'unknown'}", file=out)
    if meta["rows"]:
        print(f"Close range: {format_currency(meta['min_close'])} - {format_currency(meta['max_close'])}", file=out)
    print(f"Tickers: {', '.join(meta['tickers'])}", file=out)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args, command = parser.parse_known_args(argv)

    try:
        settings = load_settings()
    except ValueError as exc:
        parser.error(str(exc))

    if args.data:
        settings.data_path = Path(args.data)
    if args.algorithm:
        settings.profit_algorithm = ProfitAlgorithm(args.algorithm)
    if args.log_level:
        settings.log_level = args.log_level.upper()

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.check_data:
            print_data_summary(inspect_reference_data(settings.data_path))
            return 0
        table = load_reference_table(settings.data_path)
    except (FileNotFoundError, ReferenceDataError) as exc:
        logger.error("Could not load reference data: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.list_tickers:
        print_tickers(table)
        return 0

    if args.interactive:
        run_interactive(table, settings.profit_algorithm)
        return 0

    if not command:
        print(WELCOME_MESSAGE)
        print()
        print(USAGE_TEXT)
        return 0

    print(dispatch(" ".join(command), table, settings.profit_algorithm))
    return 0


if __name__ == "__main__":
    sys.exit(main())
