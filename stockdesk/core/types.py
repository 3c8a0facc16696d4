from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CommandMode(str, Enum):
    PART1 = "-part1"
    PART2 = "-part2"
    BONUS = "-bonus"  # same as PART2


class ProfitAlgorithm(str, Enum):
    GLOBAL_MIN = "global-min"
    LINEAR_SCAN = "linear-scan"


@dataclass(frozen=True)
class StockQuote:
    """
    One row of the reference table.
    """
    ticker: str
    close: float
    date: Optional[str] = None  # YYYY-MM-DD of the close, when the feed has it


@dataclass(frozen=True)
class Holding:
    ticker: str
    quantity: float


@dataclass
class PortfolioValue:
    value: float
    error: Optional[str] = None


@dataclass
class ProfitResult:
    """
    Outcome of a single buy/sell search. Days are 1-based.
    """
    profit: float
    day_to_buy: Optional[int] = None
    day_to_sell: Optional[int] = None
    error: Optional[str] = None

    @property
    def is_profitable(self) -> bool:
        return self.profit > 0
