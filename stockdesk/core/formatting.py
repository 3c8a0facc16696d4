from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from .types import PortfolioValue, ProfitResult

WELCOME_MESSAGE = "Welcome! This was made for an interview with ProNVest."
INVALID_INPUT_MESSAGE = "Invalid input. See the options and test cases below."
NO_PROFIT_MESSAGE = "No profitable buy/sell options listed."

CENTS = Decimal("0.01")


def format_currency(value: float) -> str:
    """
    en-US dollar formatting: $1,234.56 and -$1,234.56.
    Cents round half away from zero.
    """
    cents = Decimal(abs(value)).quantize(CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 and cents != 0 else ""
    return f"{sign}${cents:,.2f}"


def format_portfolio(result: PortfolioValue) -> str:
    if result.error:
        return f"Error: {result.error}"
    return f"The queried portfolio is worth {format_currency(result.value)}."


def format_profit(result: ProfitResult) -> str:
    if result.error:
        return result.error
    if result.is_profitable:
        return (
            f"Buy on day {result.day_to_buy} and sell on day {result.day_to_sell} "
            f"for a profit of {format_currency(result.profit)}."
        )
    return NO_PROFIT_MESSAGE
