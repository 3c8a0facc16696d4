"""
Record models for the static reference price feed.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class StockRecord(BaseModel):
    """One row of stocks.json. Unknown columns are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    ticker: str = Field(..., min_length=1, description="Exchange ticker symbol")
    close: float = Field(..., ge=0, description="Closing price in USD")
    date: Optional[str] = Field(None, description="Trading date of the close, YYYY-MM-DD")
