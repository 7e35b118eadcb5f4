#═══════════════════════════════════════════════════════════════════
# commands/management_commands.py - Data management and utility commands
# ═══════════════════════════════════════════════════════════════════

import typer
import rich

from commands import cfg, repo
from commands.trade_utils import fail, resolve_trade_id
from config import validate_config, list_strategies
from persistence import TradeNotFoundError
from recalc import recalc_trade, recalc_all_trades

mgmt_app = typer.Typer()

@mgmt_app.command("recalc")
def recalc_command(
    trade_id: str = typer.Option(None, help="Trade ID to recalculate (leave empty for all trades)"),
    details: bool = typer.Option(False, "--details", "-d", help="Show detailed breakdown"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation for all trades"),
):
    """Recalculate stored max loss and realized P&L"""
    if trade_id:
        trade_id = resolve_trade_id(trade_id, repo.list())
        try:
            recalc_trade(trade_id, repo, show_details=details)
        except TradeNotFoundError as e:
            fail(e.args[0])
    elif yes or typer.confirm("Recalculate ALL trades?"):
        recalc_all_trades(repo)

@mgmt_app.command("validate")
def validate_command():
    """Check config.yaml for problems"""
    if not validate_config(cfg):
        raise typer.Exit(code=1)

@mgmt_app.command("strategies")
def strategies_command():
    """List configured strategies"""
    list_strategies(cfg)
    rich.print(f"\n[dim]{len(repo.list())} trades in {repo.path}[/]")
