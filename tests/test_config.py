from pathlib import Path

import pytest

from stockdesk.config import load_settings
from stockdesk.core.data import DEFAULT_DATA_PATH
from stockdesk.core.types import ProfitAlgorithm


def test_defaults(monkeypatch):
    for name in ("STOCKDESK_DATA_PATH", "STOCKDESK_PROFIT_ALGORITHM", "STOCKDESK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings()
    assert settings.data_path == DEFAULT_DATA_PATH
    assert settings.profit_algorithm == ProfitAlgorithm.GLOBAL_MIN
    assert settings.log_level == "WARNING"


def test_env_overrides(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("STOCKDESK_DATA_PATH", str(tmp_path / "s.json"))
    monkeypatch.setenv("STOCKDESK_PROFIT_ALGORITHM", "Linear-Scan")
    monkeypatch.setenv("STOCKDESK_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.data_path == tmp_path / "s.json"
    assert settings.profit_algorithm == ProfitAlgorithm.LINEAR_SCAN
    assert settings.log_level == "DEBUG"


def test_bad_algorithm(monkeypatch):
    monkeypatch.setenv("STOCKDESK_PROFIT_ALGORITHM", "magic")
    with pytest.raises(ValueError, match="STOCKDESK_PROFIT_ALGORITHM"):
        load_settings()
