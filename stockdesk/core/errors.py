from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when a command payload cannot be parsed."""


class UnknownTickerError(KeyError):
    """Raised when a ticker is missing from the reference table; a failed lookup, hence KeyError."""

    def __init__(self, ticker: str):
        super().__init__(ticker)
        self.ticker = ticker

    def __str__(self) -> str:
        return f"{self.ticker} is not a valid stock, please try again."


class ReferenceDataError(ValueError):
    """Raised when the reference price file fails validation."""
