# ═══════════════════════════════════════════════════════════════════
# models.py - Core data models
# ═══════════════════════════════════════════════════════════════════

from __future__ import annotations
import datetime as dt
import decimal as dec
from dataclasses import dataclass, field

from constants import BULL_PUT_SPREAD, OPEN, CLOSED_STATUSES, ZERO

@dataclass
class Trade:
    id: str
    underlying: str
    strategy: str = BULL_PUT_SPREAD
    status: str = OPEN
    open_date: dt.date | None = None
    expiration_date: dt.date | None = None
    close_date: dt.date | None = None
    contracts: int = 1
    short_strike: dec.Decimal | None = None
    long_strike: dec.Decimal | None = None
    short_call_strike: dec.Decimal | None = None
    long_call_strike: dec.Decimal | None = None
    premium_received: dec.Decimal = ZERO
    premium_paid: dec.Decimal = ZERO
    commission: dec.Decimal = ZERO
    close_price: dec.Decimal = ZERO
    current_price: dec.Decimal = ZERO
    collateral: dec.Decimal = ZERO
    max_loss: dec.Decimal = ZERO
    realized_pnl: dec.Decimal = ZERO
    notes: str = ""
    tags: str = ""
    created_at: str | None = None
    updated_at: str | None = None

    @property
    def is_open(self) -> bool:
        return self.status == OPEN

    @property
    def is_closed(self) -> bool:
        """Closed and expired trades both carry realized P&L"""
        return self.status in CLOSED_STATUSES

    def to_dict(self) -> dict:
        """Plain JSON-ready representation (Decimals as strings, dates as ISO)"""
        out = {}
        for name in self.__dataclass_fields__:
            value = getattr(self, name)
            if isinstance(value, dec.Decimal):
                value = str(value)
            elif isinstance(value, dt.date):
                value = value.isoformat()
            out[name] = value
        return out

# ─── Engine results ─────────────────────────────────────────────────

@dataclass(frozen=True)
class PortfolioMetrics:
    """Snapshot of portfolio-level statistics, recomputed on every call"""
    total_trades: int
    open_trades: int
    closed_trades: int
    wins: int
    losses: int
    win_rate: dec.Decimal
    profit_factor: dec.Decimal
    avg_win: dec.Decimal
    avg_loss: dec.Decimal
    total_wins: dec.Decimal
    total_losses: dec.Decimal
    total_realized_pnl: dec.Decimal
    total_unrealized_pnl: dec.Decimal
    total_pnl: dec.Decimal
    return_on_capital: dec.Decimal
    base_capital: dec.Decimal
    current_capital: dec.Decimal
    total_collateral: dec.Decimal
    available_capital: dec.Decimal

@dataclass(frozen=True)
class EquityPoint:
    label: str
    equity: dec.Decimal
    pnl: dec.Decimal
    underlying: str | None = None
    strategy: str | None = None

@dataclass(frozen=True)
class GroupStats:
    key: str
    count: int
    total_pnl: dec.Decimal
    wins: int
    losses: int
    win_rate: dec.Decimal
    trades: tuple[Trade, ...] = field(default_factory=tuple)

@dataclass(frozen=True)
class MonthlyPnL:
    month: str  # YYYY-MM
    pnl: dec.Decimal
    count: int

@dataclass(frozen=True)
class HoldingPeriod:
    days: int
    pnl: dec.Decimal
    underlying: str
    strategy: str
