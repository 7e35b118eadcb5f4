# ═══════════════════════════════════════════════════════════════════
# recalc.py - Recompute stored max loss / realized P&L
# ═══════════════════════════════════════════════════════════════════

import rich
from rich.table import Table

from persistence import TradeRepository, load_book, save_book
from trade_operations import apply_derived_fields
from utils import format_currency

def recalc_trade(trade_id: str, repo: TradeRepository, show_details: bool = False):
    """Recalculate derived fields for a single trade"""
    trade = repo.get(trade_id)
    old_max_loss, old_pnl = trade.max_loss, trade.realized_pnl

    apply_derived_fields(trade)
    repo.update(trade_id, {"max_loss": trade.max_loss, "realized_pnl": trade.realized_pnl})

    rich.print(f"[cyan]Recalculated trade {trade_id}[/]")

    if show_details:
        tbl = Table(title=f"Recalculation Details - {trade_id}")
        tbl.add_column("Metric", justify="left")
        tbl.add_column("Old Value", justify="right")
        tbl.add_column("New Value", justify="right")
        tbl.add_column("Change", justify="right")
        tbl.add_row("Max Loss", format_currency(old_max_loss), format_currency(trade.max_loss),
                    format_currency(trade.max_loss - old_max_loss))
        tbl.add_row("Realized P&L", format_currency(old_pnl), format_currency(trade.realized_pnl),
                    format_currency(trade.realized_pnl - old_pnl))
        rich.print(tbl)
    else:
        change = trade.realized_pnl - old_pnl
        change_color = "green" if change >= 0 else "red"
        rich.print(f"  Old P&L: {format_currency(old_pnl)}")
        rich.print(f"  New P&L: {format_currency(trade.realized_pnl)}")
        rich.print(f"  Change: [{change_color}]{format_currency(change)}[/]")

    return trade

def recalc_all_trades(repo: TradeRepository) -> int:
    """Recalculate derived fields for every trade, returns the number changed"""
    book = load_book(repo.path)
    if not book:
        rich.print("[yellow]No trades found to recalculate[/]")
        return 0

    rich.print(f"[cyan]Recalculating {len(book)} trades...[/]")

    updated_count = 0
    for trade in book:
        old = (trade.max_loss, trade.realized_pnl)
        apply_derived_fields(trade)
        if old != (trade.max_loss, trade.realized_pnl):
            updated_count += 1
            rich.print(f"  {trade.id}: {format_currency(old[1])} → {format_currency(trade.realized_pnl)}")

    if updated_count > 0:
        save_book(book, repo.path)
        rich.print(f"[green]✓ Updated {updated_count} trades and saved[/]")
    else:
        rich.print("[dim]All stored values were already correct[/]")
    return updated_count
