# ═══════════════════════════════════════════════════════════════════
# commands/trade_utils.py - Prompts and error reporting for trade commands
# ═══════════════════════════════════════════════════════════════════

import typer
import rich

from config import get_strategy_type
from constants import STRATEGIES
from fzf_helper import select_strategy, select_underlying, select_trade

# Fields asked for when missing, per strategy type
PROMPTED_FIELDS = {
    "credit_spread": [("short_strike", "Short strike"), ("long_strike", "Long strike")],
    "iron_condor": [
        ("short_strike", "Short put strike"), ("long_strike", "Long put strike"),
        ("short_call_strike", "Short call strike"), ("long_call_strike", "Long call strike"),
    ],
    "collateral": [("collateral", "Collateral")],
}

def fail(message: str):
    """Print an error and stop the command with a non-zero exit"""
    rich.print(f"[red]❌ {message}[/]")
    raise typer.Exit(code=1)

def choose_strategy() -> str:
    strategy = select_strategy()
    if strategy:
        rich.print(f"[green]✓ Selected strategy via FZF: '{strategy}'[/]")
        return strategy
    rich.print(f"[green]Available strategies:[/] {', '.join(STRATEGIES)}")
    return typer.prompt("Strategy")

def choose_underlying(book, cfg) -> str:
    symbol = select_underlying(book, cfg)
    if symbol:
        return symbol
    return typer.prompt("Underlying")

def choose_trade(trades) -> str:
    """Trade id via fzf, falling back to a prompt"""
    trade_id = select_trade(trades)
    if trade_id:
        return trade_id
    return typer.prompt("Trade ID")

def prompt_missing_fields(data: dict, cfg) -> dict:
    """Ask for the strategy-specific fields the command line left out"""
    strategy_type = get_strategy_type(data["strategy"], cfg)
    for name, label in PROMPTED_FIELDS.get(strategy_type, []):
        if data.get(name) is None:
            data[name] = typer.prompt(label, default="", show_default=False)
    if data.get("premium_received") is None:
        data["premium_received"] = typer.prompt("Premium received (per share)", default="0")
    return data

def resolve_trade_id(trade_id, trades) -> str:
    """Accept a full id or a unique prefix of one (as shown by `ls`)"""
    matches = [t.id for t in trades if t.id.startswith(trade_id)]
    if trade_id in matches:
        return trade_id
    if len(matches) == 1:
        return matches[0]
    if not matches:
        fail(f"Trade ID {trade_id} not found")
    fail(f"Trade ID prefix {trade_id} is ambiguous: {', '.join(matches)}")
