"""Tests for trade entry validation and lifecycle transitions."""

import datetime as dt
from decimal import Decimal

import pytest

from persistence import TradeNotFoundError
from trade_operations import TradeOperations, TradeInputError, build_trade


def spread(**overrides):
    data = {
        "underlying": "spy",
        "strategy": "Bull Put Spread",
        "open_date": "2024-04-01",
        "expiration_date": "2024-04-19",
        "short_strike": "500",
        "long_strike": "495",
        "premium_received": "1.25",
        "commission": "2.60",
        "contracts": "2",
    }
    data.update(overrides)
    return data


@pytest.fixture
def ops(repo):
    return TradeOperations(repo)


class TestBuildTrade:
    def test_derives_max_loss_and_zero_pnl_when_open(self):
        t = build_trade(spread())
        assert t.underlying == "SPY"
        assert t.max_loss == Decimal("750")
        assert t.realized_pnl == 0

    def test_closed_on_entry_books_realized_pnl(self):
        t = build_trade(spread(status="closed", close_price="0.25", close_date="2024-04-10"))
        assert t.realized_pnl == Decimal("197.40")

    def test_requires_underlying(self):
        with pytest.raises(TradeInputError, match="Underlying"):
            build_trade(spread(underlying="  "))

    def test_requires_open_date(self):
        with pytest.raises(TradeInputError, match="Open date"):
            build_trade(spread(open_date="not a date"))

    def test_rejects_unknown_strategy_and_status(self):
        with pytest.raises(TradeInputError):
            build_trade(spread(strategy="Butterfly"))
        with pytest.raises(TradeInputError):
            build_trade(spread(status="pending"))


class TestLifecycle:
    def test_open_trade_persists(self, ops, repo):
        trade = ops.open_trade(spread())
        assert repo.get(trade.id).max_loss == Decimal("750")

    def test_close_trade(self, ops):
        trade = ops.open_trade(spread())
        closed = ops.close_trade(trade.id, "0.25", "2024-04-12")
        assert closed.status == "closed"
        assert closed.close_date == dt.date(2024, 4, 12)
        assert closed.realized_pnl == Decimal("197.40")

    def test_close_defaults_to_today(self, ops):
        trade = ops.open_trade(spread())
        assert ops.close_trade(trade.id, "0.10").close_date == dt.date.today()

    def test_close_rejects_unreadable_date(self, ops, repo):
        trade = ops.open_trade(spread())
        with pytest.raises(TradeInputError):
            ops.close_trade(trade.id, "0.20", "2024-13-45")
        stored = repo.get(trade.id)
        assert stored.status == "open"
        assert stored.close_date is None

    def test_expire_rejects_unreadable_date(self, ops, repo):
        trade = ops.open_trade(spread())
        with pytest.raises(TradeInputError):
            ops.expire_trade(trade.id, "someday")
        assert repo.get(trade.id).status == "open"

    def test_blank_close_date_means_today(self, ops):
        trade = ops.open_trade(spread())
        assert ops.close_trade(trade.id, "0.10", "  ").close_date == dt.date.today()

    def test_expire_uses_expiration_date_and_keeps_full_premium(self, ops):
        trade = ops.open_trade(spread(close_price="0.80"))
        expired = ops.expire_trade(trade.id)
        assert expired.status == "expired"
        assert expired.close_date == dt.date(2024, 4, 19)
        assert expired.close_price == 0
        assert expired.realized_pnl == Decimal("247.40")

    def test_mark_open_trade(self, ops, repo):
        trade = ops.open_trade(spread())
        marked = ops.mark_trade(trade.id, "0.60")
        assert marked.current_price == Decimal("0.60")
        assert marked.realized_pnl == 0

    def test_mark_closed_trade_is_rejected(self, ops):
        trade = ops.open_trade(spread(status="closed", close_price="0.1", close_date="2024-04-05"))
        with pytest.raises(TradeInputError):
            ops.mark_trade(trade.id, "1")

    def test_edit_recomputes_derived_fields(self, ops):
        trade = ops.open_trade(spread())
        edited = ops.edit_trade(trade.id, {"long_strike": "490"})
        assert edited.max_loss == Decimal("1750")

    def test_reopening_clears_realized_pnl(self, ops):
        trade = ops.open_trade(spread(status="closed", close_price="0.25", close_date="2024-04-10"))
        reopened = ops.edit_trade(trade.id, {"status": "open"})
        assert reopened.realized_pnl == 0

    def test_delete_trade(self, ops, repo):
        trade = ops.open_trade(spread())
        ops.delete_trade(trade.id)
        with pytest.raises(TradeNotFoundError):
            repo.get(trade.id)
