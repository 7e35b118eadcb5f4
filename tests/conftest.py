import copy

import pytest

from config import DEFAULT_CFG
from persistence import TradeRepository, SettingsStore, make_trade


@pytest.fixture
def trade():
    """Factory for trades built through the same coercion path as stored records"""
    def _make(**fields):
        fields.setdefault("id", "t1")
        fields.setdefault("underlying", "SPY")
        fields.setdefault("open_date", "2024-01-02")
        return make_trade(fields)
    return _make


@pytest.fixture
def repo(tmp_path):
    return TradeRepository(tmp_path / "trades.json")


@pytest.fixture
def settings_store(tmp_path):
    return SettingsStore(tmp_path / "settings.json")


@pytest.fixture
def cfg(tmp_path):
    config = copy.deepcopy(DEFAULT_CFG)
    config["storage"]["trades_file"] = str(tmp_path / "trades.json")
    config["storage"]["settings_file"] = str(tmp_path / "settings.json")
    return config
