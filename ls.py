# ═══════════════════════════════════════════════════════════════════
# ls.py - List trades functionality
# ═══════════════════════════════════════════════════════════════════
import datetime as dt
from rich.table import Table
import rich

from calculations import trade_pnl
from config import get_strategy_color
from constants import STATUS_COLORS
from utils import format_currency, format_date, pnl_style, to_number

DATE_SORT_FIELDS = ("open_date", "expiration_date", "close_date")

def filter_trades(trades, status: str = "all", search: str = ""):
    """Positions filter: by status, then case-insensitive match on symbol/strategy/notes/tags"""
    result = list(trades)

    if status != "all":
        result = [t for t in result if t.status == status]

    query = search.strip().lower()
    if query:
        result = [
            t for t in result
            if any(query in (text or "").lower() for text in (t.underlying, t.strategy, t.notes, t.tags))
        ]
    return result

def sort_trades(trades, field: str = "open_date", descending: bool = True):
    """Sort by a date field (missing dates first ascending) or a numeric field (missing as 0)"""
    if field in DATE_SORT_FIELDS:
        def key(t):
            return getattr(t, field) or dt.date.min
    elif field == "pnl":
        key = trade_pnl
    else:
        def key(t):
            return to_number(getattr(t, field, None))
    return sorted(trades, key=key, reverse=descending)

def list_trades(trades, cfg):
    """Render trades as a table, P&L realized for closed and live for open"""
    decimals = cfg["display"]["currency_decimals"]

    tbl = Table(title="Trades")
    for col, justify in [("id", "left"), ("opened", "left"), ("symbol", None), ("strategy", None),
                         ("strikes", None), ("qty", "right"), ("expires", "left"), ("status", None),
                         ("max loss", "right"), ("P&L", "right")]:
        tbl.add_column(col, justify=justify)

    for t in trades:
        strikes = "/".join(
            f"{s:g}" for s in (t.long_strike, t.short_strike, t.short_call_strike, t.long_call_strike)
            if s is not None
        )
        pnl = trade_pnl(t)
        strat_color = get_strategy_color(t.strategy, cfg)
        status_color = STATUS_COLORS.get(t.status, "white")

        tbl.add_row(
            t.id[:8],
            format_date(t.open_date),
            t.underlying,
            f"[{strat_color}]{t.strategy}[/]",
            strikes or "-",
            str(t.contracts),
            format_date(t.expiration_date),
            f"[{status_color}]{t.status}[/]",
            format_currency(t.max_loss, decimals),
            f"[{pnl_style(pnl)}]{format_currency(pnl, decimals)}[/]",
        )

    rich.print(tbl)
    if not trades:
        rich.print("[dim]No trades match[/]")

def show_trade(trade, cfg):
    """Print every field of a single trade"""
    tbl = Table(title=f"Trade {trade.id}", show_header=False)
    tbl.add_column("field", style="cyan")
    tbl.add_column("value")
    for name, value in trade.to_dict().items():
        tbl.add_row(name, "-" if value in (None, "") else str(value))
    pnl = trade_pnl(trade)
    label = "realized P&L" if trade.is_closed else "unrealized P&L"
    tbl.add_row(label, f"[{pnl_style(pnl)}]{format_currency(pnl, cfg['display']['currency_decimals'])}[/]")
    rich.print(tbl)
