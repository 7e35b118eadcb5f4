# ═══════════════════════════════════════════════════════════════════
# dashboard.py - Portfolio dashboard and analysis tables
# ═══════════════════════════════════════════════════════════════════

import rich
from rich.table import Table

from calculations import (
    calculate_metrics, build_equity_curve, analyze_by_underlying,
    analyze_by_strategy, monthly_pnl, days_held,
)
from config import get_strategy_color
from utils import (
    format_currency, format_percent, format_number, format_profit_factor, pnl_style,
)

def _money(value, cfg, decimals=None):
    if decimals is None:
        decimals = cfg["display"]["currency_decimals"]
    return f"[{pnl_style(value)}]{format_currency(value, decimals)}[/]"

def show_dashboard(trades, base_capital, cfg):
    """Headline metrics, strategy mix and the most recent settled trades"""
    m = calculate_metrics(trades, base_capital)
    pct = cfg["display"]["percent_decimals"]

    tbl = Table(title="📊 Portfolio Dashboard", show_header=False)
    tbl.add_column("Metric", style="bold")
    tbl.add_column("Value", justify="right")
    tbl.add_column("Detail", style="dim")

    win_style = "green" if m.win_rate >= 50 else "red" if m.win_rate > 0 else "dim"
    pf_style = "green" if m.profit_factor >= 1 else "red"

    tbl.add_row("Realized P&L", _money(m.total_realized_pnl, cfg),
                f"Unrealized: {format_currency(m.total_unrealized_pnl)}")
    tbl.add_row("Win Rate", f"[{win_style}]{m.win_rate:.{pct}f}%[/]", f"{m.wins}W / {m.losses}L")
    tbl.add_row("Profit Factor", f"[{pf_style}]{format_profit_factor(m.profit_factor)}[/]",
                f"Wins {format_currency(m.total_wins)} / Losses {format_currency(m.total_losses)}")
    tbl.add_row("Return on Capital", f"[{pnl_style(m.return_on_capital)}]{format_percent(m.return_on_capital, pct)}[/]",
                f"Base: {format_currency(m.base_capital, 0)}")
    tbl.add_row("Current Capital", _money(m.current_capital, cfg, 0),
                f"Available: {format_currency(m.available_capital, 0)}")
    tbl.add_row("Open Positions", format_number(m.open_trades),
                f"Collateral: {format_currency(m.total_collateral, 0)}")
    tbl.add_row("Avg Win", _money(m.avg_win, cfg), "")
    tbl.add_row("Avg Loss", f"[red]{format_currency(m.avg_loss)}[/]" if m.avg_loss else format_currency(0), "")
    tbl.add_row("Total Trades", format_number(m.total_trades), f"{m.closed_trades} closed")
    rich.print(tbl)

    strategies = analyze_by_strategy(trades)
    if strategies:
        rich.print("\n[bold]Strategy mix:[/]")
        for s in strategies:
            share = s.count / m.total_trades * 100
            rich.print(f"  [{get_strategy_color(s.key, cfg)}]{s.key:<17}[/] {s.count:>4}  ({share:.0f}%)")

    limit = cfg["display"]["recent_trades"]
    recent = build_equity_curve(trades, base_capital)[1:][-limit:] if limit else []
    if recent:
        rich.print("\n[bold]Recent closes:[/]")
        for point in reversed(recent):
            rich.print(f"  {point.label}  {point.underlying:<6} {point.strategy:<17} {_money(point.pnl, cfg)}")

def show_breakdown(groups, title, cfg):
    """Table for by-underlying / by-strategy group stats"""
    pct = cfg["display"]["percent_decimals"]

    tbl = Table(title=title)
    tbl.add_column("Name", justify="left")
    tbl.add_column("Trades", justify="right")
    tbl.add_column("W/L", justify="right")
    tbl.add_column("Win Rate", justify="right")
    tbl.add_column("P&L", justify="right")

    for g in groups:
        tbl.add_row(g.key, str(g.count), f"{g.wins}/{g.losses}", f"{g.win_rate:.{pct}f}%", _money(g.total_pnl, cfg))

    rich.print(tbl)

def show_by_underlying(trades, cfg):
    show_breakdown(analyze_by_underlying(trades), "By Underlying", cfg)

def show_by_strategy(trades, cfg):
    show_breakdown(analyze_by_strategy(trades), "By Strategy", cfg)

def show_monthly(trades, cfg):
    rows = monthly_pnl(trades)
    if not rows:
        rich.print("[dim]Close trades to see monthly performance[/]")
        return

    tbl = Table(title="Monthly P&L")
    tbl.add_column("Month", justify="left")
    tbl.add_column("Trades", justify="right")
    tbl.add_column("P&L", justify="right")
    for row in rows:
        tbl.add_row(row.month, str(row.count), _money(row.pnl, cfg))
    rich.print(tbl)

def show_equity_curve(trades, base_capital, cfg):
    curve = build_equity_curve(trades, base_capital)

    tbl = Table(title="Equity Curve")
    tbl.add_column("Date", justify="left")
    tbl.add_column("Trade", justify="left")
    tbl.add_column("P&L", justify="right")
    tbl.add_column("Equity", justify="right")
    for point in curve:
        trade = f"{point.underlying} {point.strategy}" if point.underlying else ""
        tbl.add_row(point.label, trade, _money(point.pnl, cfg), format_currency(point.equity))
    rich.print(tbl)

def show_days_held(trades, cfg):
    periods = days_held(trades)
    if not periods:
        rich.print("[dim]No trades with both an open and close date[/]")
        return

    tbl = Table(title="Days Held")
    tbl.add_column("Days", justify="right")
    tbl.add_column("Symbol", justify="left")
    tbl.add_column("Strategy", justify="left")
    tbl.add_column("P&L", justify="right")
    for p in sorted(periods, key=lambda p: p.days):
        tbl.add_row(str(p.days), p.underlying, p.strategy, _money(p.pnl, cfg))
    rich.print(tbl)
