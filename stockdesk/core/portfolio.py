from __future__ import annotations

import math
from typing import List

from .data import ReferenceTable
from .errors import InvalidInputError, UnknownTickerError
from .types import Holding, PortfolioValue


def _parse_number(token: str, what: str) -> float:
    try:
        value = float(token)
    except ValueError:
        raise InvalidInputError(f"{token!r} is not a valid {what}.") from None
    if not math.isfinite(value):
        raise InvalidInputError(f"{token!r} is not a valid {what}.")
    return value


def parse_portfolio(text: str) -> List[Holding]:
    """
    Parse 'TICKER:QTY[,TICKER:QTY...]'. Double quotes are stripped first.
    """
    cleaned = text.replace('"', "")
    if not cleaned.strip():
        raise InvalidInputError("No portfolio given. Expected TICKER:QUANTITY pairs.")

    holdings: List[Holding] = []
    for token in cleaned.split(","):
        if ":" not in token:
            raise InvalidInputError(f"{token!r} is not a TICKER:QUANTITY pair.")
        ticker, qty = token.split(":", 1)
        holdings.append(Holding(ticker=ticker, quantity=_parse_number(qty, "quantity")))
    return holdings


def get_portfolio_value(text: str, table: ReferenceTable) -> PortfolioValue:
    """
    Total market value of a portfolio at reference close prices.

    An unknown ticker aborts the whole valuation: value is 0 and `error`
    names the ticker. Malformed input raises InvalidInputError.
    """
    holdings = parse_portfolio(text)
    total = 0.0
    try:
        for holding in holdings:
            total += holding.quantity * table.close_for(holding.ticker)
    except UnknownTickerError as exc:
        return PortfolioValue(value=0.0, error=str(exc))
    return PortfolioValue(value=total)
