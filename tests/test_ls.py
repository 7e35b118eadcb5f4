from decimal import Decimal

from ls import filter_trades, sort_trades, list_trades


def test_filter_by_status_and_search(trade):
    trades = [
        trade(id="1", underlying="SPY", status="open", notes="earnings week"),
        trade(id="2", underlying="QQQ", status="closed", tags="hedge"),
        trade(id="3", underlying="IWM", status="open", strategy="Iron Condor"),
    ]
    assert [t.id for t in filter_trades(trades, "open")] == ["1", "3"]
    assert [t.id for t in filter_trades(trades, search="EARN")] == ["1"]
    assert [t.id for t in filter_trades(trades, search="condor")] == ["3"]
    assert [t.id for t in filter_trades(trades, "closed", "hedge")] == ["2"]
    assert len(filter_trades(trades)) == 3


def test_sort_by_dates_and_numbers(trade):
    trades = [
        trade(id="a", open_date="2024-02-01", max_loss="300"),
        trade(id="b", open_date="2024-03-01", max_loss="abc"),
        trade(id="c", open_date="2024-01-01", max_loss="900"),
    ]
    assert [t.id for t in sort_trades(trades)] == ["b", "a", "c"]
    assert [t.id for t in sort_trades(trades, "max_loss", descending=False)] == ["b", "a", "c"]
    assert [t.id for t in sort_trades(trades, "expiration_date", descending=False)] == ["a", "b", "c"]


def test_sort_by_pnl_mixes_realized_and_unrealized(trade):
    trades = [
        trade(id="closed", status="closed", realized_pnl="40"),
        trade(id="open", status="open", premium_received="1", current_price="0.2"),
    ]
    assert [t.id for t in sort_trades(trades, "pnl")] == ["open", "closed"]
    assert sort_trades(trades, "pnl")[0].premium_received == Decimal("1")


def test_list_trades_renders(trade, cfg, capsys):
    list_trades([trade(id="abcdef123456", strategy="Wheel", collateral="5000")], cfg)
    assert "Trades" in capsys.readouterr().out
