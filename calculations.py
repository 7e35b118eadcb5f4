# ═══════════════════════════════════════════════════════════════════
# calculations.py - P&L, portfolio metrics, equity curve, breakdowns
# ═══════════════════════════════════════════════════════════════════
"""
Pure metrics engine.

Every function here takes already-parsed `Trade` records and returns fresh
values; nothing is printed, stored or mutated. Permissive coercion of user
input happens when trades are built (see `persistence.make_trade`), so the
formulas below work on typed Decimal fields.
"""

from decimal import Decimal
from typing import Callable, Dict, Iterable, List

from constants import (
    BULL_PUT_SPREAD, BEAR_CALL_SPREAD, IRON_CONDOR, WHEEL, COVERED_CALL,
    CONTRACT_MULTIPLIER, DEFAULT_BASE_CAPITAL, INFINITY, ZERO,
)
from models import (
    Trade, PortfolioMetrics, EquityPoint, GroupStats, MonthlyPnL, HoldingPeriod,
)
from utils import to_number

# ─── Per-trade P&L ──────────────────────────────────────────────────

def realized_pnl(trade: Trade) -> Decimal:
    """(premium received - cost to close) * 100 * contracts - commission"""
    return (trade.premium_received - trade.close_price) * CONTRACT_MULTIPLIER * trade.contracts - trade.commission

def unrealized_pnl(trade: Trade) -> Decimal:
    """Mark-to-market P&L of an open trade at its current price"""
    return (trade.premium_received - trade.current_price) * CONTRACT_MULTIPLIER * trade.contracts - trade.commission

def trade_pnl(trade: Trade) -> Decimal:
    """Stored realized P&L for closed/expired trades, live unrealized P&L otherwise"""
    if trade.is_closed:
        return trade.realized_pnl
    return unrealized_pnl(trade)

def _width(a: Decimal | None, b: Decimal | None) -> Decimal:
    return abs((a or ZERO) - (b or ZERO))

def _spread_loss(width: Decimal, trade: Trade) -> Decimal:
    # Not clamped: a credit wider than the spread gives a negative max loss
    return (width - trade.premium_received) * CONTRACT_MULTIPLIER * trade.contracts

def _bull_put_max_loss(trade: Trade) -> Decimal:
    return _spread_loss(_width(trade.short_strike, trade.long_strike), trade)

def _bear_call_max_loss(trade: Trade) -> Decimal:
    return _spread_loss(_width(trade.long_strike, trade.short_strike), trade)

def _iron_condor_max_loss(trade: Trade) -> Decimal:
    put_width = _width(trade.short_strike, trade.long_strike)
    call_width = _width(trade.long_call_strike, trade.short_call_strike)
    return _spread_loss(max(put_width, call_width), trade)

def _collateral_max_loss(trade: Trade) -> Decimal:
    return trade.collateral

MAX_LOSS_FORMULAS: Dict[str, Callable[[Trade], Decimal]] = {
    BULL_PUT_SPREAD: _bull_put_max_loss,
    BEAR_CALL_SPREAD: _bear_call_max_loss,
    IRON_CONDOR: _iron_condor_max_loss,
    WHEEL: _collateral_max_loss,
    COVERED_CALL: _collateral_max_loss,
}

def max_loss(trade: Trade) -> Decimal:
    """Worst-case loss: spread width for spreads, collateral for Wheel/Covered Call"""
    formula = MAX_LOSS_FORMULAS.get(trade.strategy)
    if formula is None:
        return trade.max_loss
    return formula(trade)

# ─── Portfolio metrics ──────────────────────────────────────────────

def _base_capital(value) -> Decimal:
    return to_number(value, default=DEFAULT_BASE_CAPITAL)

def _is_win(trade: Trade) -> bool:
    # Break-even counts as a loss
    return trade.realized_pnl > 0

def calculate_metrics(trades: Iterable[Trade], base_capital=DEFAULT_BASE_CAPITAL) -> PortfolioMetrics:
    """Aggregate win/loss, P&L and capital statistics over a trade list"""
    trades = list(trades)
    capital = _base_capital(base_capital)

    closed = [t for t in trades if t.is_closed]
    open_ = [t for t in trades if t.is_open]

    wins = [t for t in closed if _is_win(t)]
    losses = [t for t in closed if not _is_win(t)]

    total_wins = sum((t.realized_pnl for t in wins), ZERO)
    total_losses = abs(sum((t.realized_pnl for t in losses), ZERO))

    total_realized = sum((t.realized_pnl for t in closed), ZERO)
    total_unrealized = sum((unrealized_pnl(t) for t in open_), ZERO)

    win_rate = Decimal(len(wins)) / len(closed) * 100 if closed else ZERO

    if total_losses > 0:
        profit_factor = total_wins / total_losses
    else:
        profit_factor = INFINITY if total_wins > 0 else ZERO

    avg_win = total_wins / len(wins) if wins else ZERO
    avg_loss = total_losses / len(losses) if losses else ZERO

    return_on_capital = total_realized / capital * 100 if capital > 0 else ZERO
    current_capital = capital + total_realized
    total_collateral = sum((t.collateral for t in open_), ZERO)

    return PortfolioMetrics(
        total_trades=len(trades),
        open_trades=len(open_),
        closed_trades=len(closed),
        wins=len(wins),
        losses=len(losses),
        win_rate=win_rate,
        profit_factor=profit_factor,
        avg_win=avg_win,
        avg_loss=avg_loss,
        total_wins=total_wins,
        total_losses=total_losses,
        total_realized_pnl=total_realized,
        total_unrealized_pnl=total_unrealized,
        total_pnl=total_realized + total_unrealized,
        return_on_capital=return_on_capital,
        base_capital=capital,
        current_capital=current_capital,
        total_collateral=total_collateral,
        available_capital=current_capital - total_collateral,
    )

# ─── Equity curve ───────────────────────────────────────────────────

def _settled(trades: Iterable[Trade]) -> List[Trade]:
    """Closed/expired trades that have a close date"""
    return [t for t in trades if t.is_closed and t.close_date is not None]

def build_equity_curve(trades: Iterable[Trade], base_capital=DEFAULT_BASE_CAPITAL) -> List[EquityPoint]:
    """Running account equity as closed trades settle, oldest first"""
    capital = _base_capital(base_capital)
    # sorted() is stable, so same-day closes keep their input order
    settled = sorted(_settled(trades), key=lambda t: t.close_date)

    equity = capital
    curve = [EquityPoint(label="Start", equity=capital, pnl=ZERO)]
    for trade in settled:
        equity += trade.realized_pnl
        curve.append(EquityPoint(
            label=trade.close_date.isoformat(),
            equity=equity,
            pnl=trade.realized_pnl,
            underlying=trade.underlying,
            strategy=trade.strategy,
        ))
    return curve

# ─── Group-by analysis ──────────────────────────────────────────────

def _group_by(trades: Iterable[Trade], key: Callable[[Trade], str]) -> List[GroupStats]:
    groups: Dict[str, dict] = {}
    for trade in trades:
        name = key(trade)
        g = groups.setdefault(name, {"trades": [], "total_pnl": ZERO, "wins": 0, "losses": 0})
        g["trades"].append(trade)

        if trade.is_closed:
            g["total_pnl"] += trade.realized_pnl
            if _is_win(trade):
                g["wins"] += 1
            else:
                g["losses"] += 1

    stats = []
    for name, g in groups.items():
        decided = g["wins"] + g["losses"]
        stats.append(GroupStats(
            key=name,
            count=len(g["trades"]),
            total_pnl=g["total_pnl"],
            wins=g["wins"],
            losses=g["losses"],
            win_rate=Decimal(g["wins"]) / decided * 100 if decided else ZERO,
            trades=tuple(g["trades"]),
        ))

    return sorted(stats, key=lambda s: s.total_pnl, reverse=True)

def analyze_by_underlying(trades: Iterable[Trade]) -> List[GroupStats]:
    return _group_by(trades, lambda t: t.underlying)

def analyze_by_strategy(trades: Iterable[Trade]) -> List[GroupStats]:
    return _group_by(trades, lambda t: t.strategy)

def monthly_pnl(trades: Iterable[Trade]) -> List[MonthlyPnL]:
    """Realized P&L per calendar month of close, ascending by month"""
    months: Dict[str, list] = {}
    for trade in _settled(trades):
        month = trade.close_date.strftime("%Y-%m")
        bucket = months.setdefault(month, [ZERO, 0])
        bucket[0] += trade.realized_pnl
        bucket[1] += 1

    return [MonthlyPnL(month=m, pnl=pnl, count=count) for m, (pnl, count) in sorted(months.items())]

def days_held(trades: Iterable[Trade]) -> List[HoldingPeriod]:
    """Holding period of every trade with both an open and a close date"""
    return [
        HoldingPeriod(
            days=(t.close_date - t.open_date).days,
            pnl=t.realized_pnl,
            underlying=t.underlying,
            strategy=t.strategy,
        )
        for t in trades
        if t.open_date is not None and t.close_date is not None
    ]
