from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .core.data import DEFAULT_DATA_PATH
from .core.types import ProfitAlgorithm


@dataclass
class Settings:
    data_path: Path = DEFAULT_DATA_PATH
    profit_algorithm: ProfitAlgorithm = ProfitAlgorithm.GLOBAL_MIN
    log_level: str = "WARNING"


def load_settings() -> Settings:
    """
    Read settings from STOCKDESK_* environment variables, falling back to defaults.
    """
    data_path = os.getenv("STOCKDESK_DATA_PATH")
    algorithm = os.getenv("STOCKDESK_PROFIT_ALGORITHM", ProfitAlgorithm.GLOBAL_MIN.value)
    log_level = os.getenv("STOCKDESK_LOG_LEVEL", "WARNING")

    try:
        profit_algorithm = ProfitAlgorithm(algorithm.strip().lower())
    except ValueError:
        raise ValueError(f"Invalid STOCKDESK_PROFIT_ALGORITHM: {algorithm!r}") from None

    return Settings(
        data_path=Path(data_path) if data_path else DEFAULT_DATA_PATH,
        profit_algorithm=profit_algorithm,
        log_level=log_level.strip().upper(),
    )
