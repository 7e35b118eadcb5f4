# ═══════════════════════════════════════════════════════════════════
# trade_operations.py - Trade lifecycle: open, close, expire, mark, edit
# ═══════════════════════════════════════════════════════════════════

import datetime as dt
import rich

from models import Trade
from constants import STRATEGIES, STATUS_OPTIONS, CLOSED, EXPIRED, ZERO
from calculations import max_loss, realized_pnl
from persistence import TradeRepository, make_trade
from utils import to_number, parse_date, format_currency

class TradeInputError(ValueError):
    """Raised when submitted trade data cannot be saved"""

def apply_derived_fields(trade: Trade) -> Trade:
    """Recompute the stored max_loss and realized_pnl from the other fields"""
    trade.max_loss = max_loss(trade)
    trade.realized_pnl = realized_pnl(trade) if trade.is_closed else ZERO
    return trade

def build_trade(data: dict) -> Trade:
    """Validate form-style input and return a Trade with derived fields filled in"""
    trade = make_trade(data)

    if not trade.underlying:
        raise TradeInputError("Underlying symbol is required")
    if trade.open_date is None:
        raise TradeInputError("Open date is required")
    if trade.strategy not in STRATEGIES:
        raise TradeInputError(f"Unknown strategy: {trade.strategy!r}")
    if trade.status not in STATUS_OPTIONS:
        raise TradeInputError(f"Unknown status: {trade.status!r}")

    return apply_derived_fields(trade)

def given_date(value) -> dt.date | None:
    """Date typed by the user; None when left out, TradeInputError when unreadable"""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    parsed = parse_date(value)
    if parsed is None:
        raise TradeInputError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")
    return parsed

class TradeOperations:
    def __init__(self, repo: TradeRepository):
        self.repo = repo

    def open_trade(self, data: dict) -> Trade:
        """Save a new trade entered by the user"""
        trade = self.repo.create(build_trade(data))
        rich.print(f"[green]✓ Saved {trade.strategy} on {trade.underlying} ({trade.status})[/]")
        rich.print(f"[dim]  ID: {trade.id}  Max loss: {format_currency(trade.max_loss)}[/]")
        return trade

    def edit_trade(self, trade_id: str, changes: dict) -> Trade:
        """Apply edits and recompute derived fields, as the entry form does on save"""
        current = self.repo.get(trade_id)
        trade = build_trade({**current.to_dict(), **changes})
        return self.repo.update(trade_id, trade.to_dict())

    def close_trade(self, trade_id: str, close_price, close_date=None) -> Trade:
        """Close a position at the per-share price paid to buy it back"""
        trade = self.edit_trade(trade_id, {
            "status": CLOSED,
            "close_price": to_number(close_price),
            "close_date": given_date(close_date) or dt.date.today(),
        })
        self._report_close(trade)
        return trade

    def expire_trade(self, trade_id: str, close_date=None) -> Trade:
        """Let a position expire worthless: nothing paid to close"""
        current = self.repo.get(trade_id)
        when = given_date(close_date) or current.expiration_date or dt.date.today()
        trade = self.edit_trade(trade_id, {
            "status": EXPIRED,
            "close_price": ZERO,
            "close_date": when,
        })
        self._report_close(trade)
        return trade

    def mark_trade(self, trade_id: str, current_price) -> Trade:
        """Update the mark price used for unrealized P&L"""
        trade = self.repo.get(trade_id)
        if not trade.is_open:
            raise TradeInputError(f"Trade {trade_id} is {trade.status}; only open trades can be marked")
        return self.edit_trade(trade_id, {"current_price": to_number(current_price)})

    def delete_trade(self, trade_id: str):
        self.repo.delete(trade_id)
        rich.print(f"[yellow]✓ Deleted trade {trade_id}[/]")

    def _report_close(self, trade: Trade):
        pnl = trade.realized_pnl
        color = "green" if pnl > 0 else "red"
        rich.print(f"[cyan]{trade.underlying} {trade.strategy} {trade.status} on {trade.close_date}[/]")
        rich.print(f"  Realized P&L: [{color}]{format_currency(pnl)}[/]")
