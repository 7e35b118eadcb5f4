# ═══════════════════════════════════════════════════════════════════
# commands/trade_commands.py - Trade entry and lifecycle commands
# ═══════════════════════════════════════════════════════════════════

import typer
import rich
import datetime as dt

from commands import cfg, repo, trade_ops
from commands.trade_utils import (
    fail, choose_strategy, choose_underlying, choose_trade,
    prompt_missing_fields, resolve_trade_id,
)
from constants import OPEN, STATUS_OPTIONS, STRATEGIES
from ls import list_trades, show_trade, filter_trades, sort_trades
from models import Trade
from persistence import TradeNotFoundError
from trade_operations import TradeInputError

trade_app = typer.Typer()

# Derived and bookkeeping fields are maintained by the journal itself
READ_ONLY_FIELDS = ("id", "max_loss", "realized_pnl", "created_at", "updated_at")
EDITABLE_FIELDS = [name for name in Trade.__dataclass_fields__ if name not in READ_ONLY_FIELDS]

@trade_app.command("open")
def open_trade(
    strategy: str = typer.Option(None, "--strategy", "-s", help="Bull Put Spread, Bear Call Spread, Iron Condor, Wheel, Covered Call"),
    underlying: str = typer.Option(None, "--underlying", "-u", help="Ticker symbol"),
    status: str = typer.Option(OPEN, help="open, closed or expired"),
    open_date: str = typer.Option(None, help="YYYY-MM-DD (default today)"),
    expiration: str = typer.Option(None, help="Expiration date YYYY-MM-DD"),
    close_date: str = typer.Option(None, help="Close date YYYY-MM-DD"),
    contracts: int = typer.Option(1, "--contracts", "-n", help="Contracts"),
    short_strike: str = typer.Option(None, help="Short (put) strike"),
    long_strike: str = typer.Option(None, help="Long (put) strike"),
    short_call_strike: str = typer.Option(None, help="Short call strike (Iron Condor)"),
    long_call_strike: str = typer.Option(None, help="Long call strike (Iron Condor)"),
    premium: str = typer.Option(None, "--premium", "-p", help="Premium received per share"),
    premium_paid: str = typer.Option(None, help="Premium paid per share"),
    commission: str = typer.Option(None, help="Total commission for the trade"),
    close_price: str = typer.Option(None, help="Price paid to close per share"),
    current_price: str = typer.Option(None, help="Current mark per share"),
    collateral: str = typer.Option(None, help="Capital reserved against the position"),
    notes: str = typer.Option("", help="Free-text notes"),
    tags: str = typer.Option("", help="Comma-separated tags"),
):
    """Record a new trade"""
    if not strategy:
        strategy = choose_strategy()
    if strategy not in STRATEGIES:
        fail(f"Unknown strategy: {strategy!r}")
    if not underlying:
        underlying = choose_underlying(repo.list(), cfg)

    data = {
        "strategy": strategy,
        "underlying": underlying,
        "status": status,
        "open_date": open_date or dt.date.today(),
        "expiration_date": expiration,
        "close_date": close_date,
        "contracts": contracts,
        "short_strike": short_strike,
        "long_strike": long_strike,
        "short_call_strike": short_call_strike,
        "long_call_strike": long_call_strike,
        "premium_received": premium,
        "premium_paid": premium_paid,
        "commission": commission,
        "close_price": close_price,
        "current_price": current_price,
        "collateral": collateral,
        "notes": notes,
        "tags": tags,
    }
    prompt_missing_fields(data, cfg)

    try:
        trade_ops.open_trade(data)
    except TradeInputError as e:
        fail(str(e))

@trade_app.command("close")
def close_trade(
    trade_id: str = typer.Argument(None, help="Trade ID (or unique prefix)"),
    price: str = typer.Option(None, "--price", help="Price paid to close per share"),
    date: str = typer.Option(None, "--date", help="Close date YYYY-MM-DD (default today)"),
):
    """Close an open trade and book its realized P&L"""
    open_trades = repo.list_by_status(OPEN)
    trade_id = resolve_trade_id(trade_id or choose_trade(open_trades), repo.list())
    if price is None:
        price = typer.prompt("Close price (per share)", default="0")

    try:
        trade_ops.close_trade(trade_id, price, date)
    except (TradeInputError, TradeNotFoundError) as e:
        fail(str(e.args[0]))

@trade_app.command("expire")
def expire_trade(
    trade_id: str = typer.Argument(None, help="Trade ID (or unique prefix)"),
    date: str = typer.Option(None, "--date", help="Close date (default expiration date)"),
):
    """Mark a trade as expired worthless"""
    trade_id = resolve_trade_id(trade_id or choose_trade(repo.list_by_status(OPEN)), repo.list())
    try:
        trade_ops.expire_trade(trade_id, date)
    except (TradeInputError, TradeNotFoundError) as e:
        fail(str(e.args[0]))

@trade_app.command("mark")
def mark_trade(
    trade_id: str = typer.Argument(..., help="Trade ID (or unique prefix)"),
    price: str = typer.Argument(..., help="Current price per share"),
):
    """Update the current price of an open trade"""
    trade_id = resolve_trade_id(trade_id, repo.list())
    try:
        trade = trade_ops.mark_trade(trade_id, price)
    except (TradeInputError, TradeNotFoundError) as e:
        fail(str(e.args[0]))
    rich.print(f"[green]✓ Marked {trade.underlying} at {trade.current_price}[/]")

@trade_app.command("edit")
def edit_trade(
    trade_id: str = typer.Argument(..., help="Trade ID (or unique prefix)"),
    field: list[str] = typer.Option([], "--set", help="field=value, repeatable"),
):
    """Edit stored fields; max loss and realized P&L are recomputed"""
    trade_id = resolve_trade_id(trade_id, repo.list())

    changes = {}
    for item in field:
        if "=" not in item:
            fail(f"Expected field=value, got {item!r}")
        name, value = item.split("=", 1)
        name = name.strip()
        if name not in EDITABLE_FIELDS:
            fail(f"{name} cannot be edited")
        changes[name] = value

    if not changes:
        rich.print("[yellow]Nothing to change[/]")
        return

    try:
        trade = trade_ops.edit_trade(trade_id, changes)
    except (TradeInputError, TradeNotFoundError) as e:
        fail(str(e.args[0]))
    rich.print(f"[green]✓ Trade {trade.id} updated[/]")

@trade_app.command("delete")
def delete_trade(
    trade_id: str = typer.Argument(..., help="Trade ID (or unique prefix)"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
):
    """Delete a trade"""
    trade_id = resolve_trade_id(trade_id, repo.list())
    if not force and not typer.confirm(f"Delete trade {trade_id}? This cannot be undone"):
        rich.print("[yellow]Cancelled[/]")
        return
    try:
        trade_ops.delete_trade(trade_id)
    except TradeNotFoundError as e:
        fail(e.args[0])

@trade_app.command("ls")
def ls_command(
    status: str = typer.Option("all", "--status", help="all, open, closed, expired"),
    search: str = typer.Option("", "--search", "-q", help="Match symbol, strategy, notes or tags"),
    sort: str = typer.Option("open_date", "--sort", help="open_date, expiration_date, close_date, pnl, realized_pnl, max_loss"),
    ascending: bool = typer.Option(False, "--asc", help="Ascending order"),
):
    """List trades"""
    if status != "all" and status not in STATUS_OPTIONS:
        fail(f"Unknown status {status!r}")
    trades = sort_trades(filter_trades(repo.list(), status, search), sort, descending=not ascending)
    list_trades(trades, cfg)

@trade_app.command("show")
def show_command(trade_id: str = typer.Argument(..., help="Trade ID (or unique prefix)")):
    """Show every field of one trade"""
    trade_id = resolve_trade_id(trade_id, repo.list())
    show_trade(repo.get(trade_id), cfg)
