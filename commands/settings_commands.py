# ═══════════════════════════════════════════════════════════════════
# commands/settings_commands.py - Base capital and stored settings
# ═══════════════════════════════════════════════════════════════════

import typer
import rich

from commands import settings
from commands.trade_utils import fail
from constants import BASE_CAPITAL_KEY
from utils import format_currency, parse_base_capital, to_number

settings_app = typer.Typer()

@settings_app.command("capital")
def capital_command(
    value: str = typer.Argument(None, help="New base capital (leave empty to show)"),
):
    """Show or set the base capital used for returns and available capital"""
    if value is None:
        capital = parse_base_capital(settings.get(BASE_CAPITAL_KEY))
        rich.print(f"Base capital: [bold]{format_currency(capital, 0)}[/]")
        return

    amount = to_number(value, default=None)
    if amount is None or amount <= 0:
        fail(f"Base capital must be a positive number, got {value!r}")

    settings.set(BASE_CAPITAL_KEY, amount)
    rich.print(f"[green]✓ Base capital set to {format_currency(amount, 0)}[/]")

@settings_app.command("show")
def show_settings():
    """Print every stored setting"""
    for key, value in sorted(settings.all().items()):
        rich.print(f"  [cyan]{key}[/] = {value}")
