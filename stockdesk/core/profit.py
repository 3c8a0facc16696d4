from __future__ import annotations

from typing import Callable, Dict, List, Sequence

import numpy as np

from .errors import InvalidInputError
from .types import ProfitAlgorithm, ProfitResult


def parse_prices(text: str) -> List[float]:
    """
    Parse 'PRICE[,PRICE...]' into a day-ordered list. Double quotes are stripped.
    """
    cleaned = text.replace('"', "")
    if not cleaned.strip():
        raise InvalidInputError("No prices given. Expected a comma-separated list.")

    prices: List[float] = []
    for token in cleaned.split(","):
        try:
            price = float(token)
        except ValueError:
            raise InvalidInputError(f"{token!r} is not a valid price.") from None
        if not np.isfinite(price):
            raise InvalidInputError(f"{token!r} is not a valid price.")
        prices.append(price)
    return prices


def _global_min_trade(prices: Sequence[float]) -> ProfitResult:
    arr = np.asarray(prices, dtype=float)
    min_index = int(np.argmin(arr))  # first occurrence

    best_profit = 0.0
    sell_index = None
    for i in range(min_index + 1, len(arr)):
        potential = float(arr[i] - arr[min_index])
        if potential > best_profit:
            best_profit = potential
            sell_index = i

    if sell_index is None:
        return ProfitResult(profit=0.0)
    return ProfitResult(profit=best_profit, day_to_buy=min_index + 1, day_to_sell=sell_index + 1)


def _linear_scan_trade(prices: Sequence[float]) -> ProfitResult:
    arr = np.asarray(prices, dtype=float)
    if arr.size == 0:
        return ProfitResult(profit=0.0)

    # index of the lowest price seen up to and including each day
    running_min = np.minimum.accumulate(arr)
    new_low = np.concatenate(([True], running_min[1:] < running_min[:-1]))
    low_index = np.maximum.accumulate(np.where(new_low, np.arange(arr.size), 0))

    gains = arr - running_min
    sell_index = int(np.argmax(gains))  # first occurrence
    best_profit = float(gains[sell_index])
    if best_profit <= 0:
        return ProfitResult(profit=0.0)
    return ProfitResult(
        profit=best_profit,
        day_to_buy=int(low_index[sell_index]) + 1,
        day_to_sell=sell_index + 1,
    )


def maximize_profit(text: str) -> ProfitResult:
    """
    Best single buy/sell where the buy is pinned to the global minimum.

    Only days after the cheapest day are considered as sell days, so a
    profitable run that ends before the global low is never reported.
    Use best_single_trade for the unrestricted search.
    """
    return _global_min_trade(parse_prices(text))


def best_single_trade(text: str) -> ProfitResult:
    """
    Best single buy/sell over all day pairs (buy strictly before sell),
    found in one pass against the lowest price seen so far.
    """
    return _linear_scan_trade(parse_prices(text))


PROFIT_ALGORITHMS: Dict[ProfitAlgorithm, Callable[[str], ProfitResult]] = {
    ProfitAlgorithm.GLOBAL_MIN: maximize_profit,
    ProfitAlgorithm.LINEAR_SCAN: best_single_trade,
}


def get_profit_algorithm(name: str | ProfitAlgorithm) -> Callable[[str], ProfitResult]:
    try:
        return PROFIT_ALGORITHMS[ProfitAlgorithm(name)]
    except ValueError:
        choices = ", ".join(a.value for a in ProfitAlgorithm)
        raise ValueError(f"Unknown profit algorithm {name!r}. Choose one of: {choices}") from None
