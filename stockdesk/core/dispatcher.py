from __future__ import annotations

import logging
from typing import Optional, Tuple

from .data import ReferenceTable
from .errors import InvalidInputError
from .formatting import INVALID_INPUT_MESSAGE, format_portfolio, format_profit
from .portfolio import get_portfolio_value
from .profit import get_profit_algorithm
from .types import CommandMode, ProfitAlgorithm

logger = logging.getLogger(__name__)


def parse_command(command: str) -> Tuple[str, Optional[str]]:
    """
    Split '<mode> <data>' on the first space. data is None when absent.
    """
    parts = command.strip().split(" ", 1)
    mode = parts[0]
    data = parts[1].strip() if len(parts) > 1 else None
    return mode, data


def handle_part1(data: str, table: ReferenceTable) -> str:
    return format_portfolio(get_portfolio_value(data, table))


def handle_part2(data: str, algorithm: str | ProfitAlgorithm = ProfitAlgorithm.GLOBAL_MIN) -> str:
    # shared by -part2 and -bonus
    return format_profit(get_profit_algorithm(algorithm)(data))


def dispatch(
    command: str,
    table: ReferenceTable,
    algorithm: str | ProfitAlgorithm = ProfitAlgorithm.GLOBAL_MIN,
) -> str:
    """
    Evaluate one command line and return the text to display.
    Never raises for bad user input; parse failures come back as a sentence.
    """
    mode, data = parse_command(command)
    try:
        parsed_mode = CommandMode(mode)
    except ValueError:
        logger.debug("Unrecognized mode %r", mode)
        return INVALID_INPUT_MESSAGE

    if data is None:
        logger.debug("Mode %s given without data", mode)
        return INVALID_INPUT_MESSAGE

    try:
        if parsed_mode == CommandMode.PART1:
            return handle_part1(data, table)
        return handle_part2(data, algorithm)
    except InvalidInputError as exc:
        logger.info("Rejected %s payload: %s", mode, exc)
        return str(exc)
