from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Optional, Tuple

import pandas as pd
from pydantic import ValidationError

from .errors import ReferenceDataError, UnknownTickerError
from .schemas import StockRecord
from .types import StockQuote

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).resolve().parents[1] / "data" / "stocks.json"

REQUIRED_COLUMNS = ["ticker", "close"]


class ReferenceTable:
    """
    Read-only ticker -> close lookup, in file order.
    Lookups are exact string matches; the first row for a ticker wins.
    """

    __slots__ = ("_quotes", "_index")

    def __init__(self, quotes: Iterable[StockQuote]):
        self._quotes: Tuple[StockQuote, ...] = tuple(quotes)
        index = {}
        for quote in self._quotes:
            index.setdefault(quote.ticker, quote)
        self._index: Mapping[str, StockQuote] = MappingProxyType(index)

    def __len__(self) -> int:
        return len(self._quotes)

    def __iter__(self) -> Iterator[StockQuote]:
        return iter(self._quotes)

    def __contains__(self, ticker: object) -> bool:
        return ticker in self._index

    def __repr__(self) -> str:
        return f"ReferenceTable({len(self)} tickers)"

    @property
    def quotes(self) -> Tuple[StockQuote, ...]:
        return self._quotes

    @property
    def tickers(self) -> List[str]:
        return [q.ticker for q in self._quotes]

    def get(self, ticker: str) -> Optional[StockQuote]:
        return self._index.get(ticker)

    def close_for(self, ticker: str) -> float:
        quote = self._index.get(ticker)
        if quote is None:
            raise UnknownTickerError(ticker)
        return quote.close

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "ticker": [q.ticker for q in self._quotes],
                "close": [q.close for q in self._quotes],
                "date": [q.date for q in self._quotes],
            }
        )


def _read_frame(json_path: Path) -> pd.DataFrame:
    if not json_path.exists():
        raise FileNotFoundError(f"Reference data not found: {json_path}")
    try:
        df = pd.read_json(json_path, orient="records", convert_dates=False)
    except ValueError as exc:
        raise ReferenceDataError(f"Could not parse reference data {json_path}: {exc}") from exc

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ReferenceDataError(f"Missing required columns: {missing}")

    subset = df[REQUIRED_COLUMNS].copy()
    if subset.isnull().any().any():
        raise ReferenceDataError("Reference data contains nulls in required columns")

    subset["close"] = pd.to_numeric(subset["close"], errors="coerce")
    if subset["close"].isnull().any():
        raise ReferenceDataError("Non-numeric values in column: close")

    subset["ticker"] = subset["ticker"].astype(str)
    dupes = subset["ticker"][subset["ticker"].duplicated()].unique().tolist()
    if dupes:
        raise ReferenceDataError(f"Duplicate tickers in reference data: {dupes}")

    if "date" in df.columns:
        subset["date"] = [None if pd.isna(d) else str(d) for d in df["date"]]
    else:
        subset["date"] = None
    return subset


def load_reference_table(path: str | Path | None = None) -> ReferenceTable:
    """
    Load and validate the reference price feed.
    Expected: a JSON array of records with at least `ticker` and `close`.
    """
    json_path = Path(path) if path is not None else DEFAULT_DATA_PATH
    df = _read_frame(json_path)

    quotes: List[StockQuote] = []
    for row in df.itertuples(index=False):
        try:
            record = StockRecord(
                ticker=getattr(row, "ticker"),
                close=float(getattr(row, "close")),
                date=getattr(row, "date"),
            )
        except ValidationError as exc:
            raise ReferenceDataError(f"Invalid reference row {row.ticker!r}: {exc}") from exc
        quotes.append(StockQuote(ticker=record.ticker, close=record.close, date=record.date))

    logger.info("Loaded %d reference prices from %s", len(quotes), json_path)
    return ReferenceTable(quotes)


def inspect_reference_data(path: str | Path | None = None) -> dict:
    """
    Validate a reference file and return metadata about it.
    Backs `stockdesk --check-data`.
    """
    json_path = Path(path) if path is not None else DEFAULT_DATA_PATH
    df = _read_frame(json_path)
    dates = df["date"].dropna()
    return {
        "rows": int(len(df)),
        "tickers": df["ticker"].tolist(),
        "min_close": float(df["close"].min()) if len(df) else None,
        "max_close": float(df["close"].max()) if len(df) else None,
        "as_of": str(dates.max()) if len(dates) else None,
        "path": str(json_path.resolve()),
    }
