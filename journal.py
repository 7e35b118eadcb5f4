# ═══════════════════════════════════════════════════════════════════
# journal.py - Main application entry point
# ═══════════════════════════════════════════════════════════════════
import typer

from config import load_config, CONFIG_FILE
from commands import set_globals

from commands.trade_commands import trade_app
from commands.analysis_commands import analysis_app
from commands.management_commands import mgmt_app
from commands.settings_commands import settings_app
from commands.trade_commands import open_trade, close_trade, ls_command
from commands.analysis_commands import dashboard_command

# Create main app and add sub-apps
app = typer.Typer(help="Options trading journal")
app.add_typer(trade_app, name="trade", help="Trade operations")
app.add_typer(analysis_app, name="analysis", help="Metrics and breakdowns")
app.add_typer(mgmt_app, name="mgmt", help="Management operations")
app.add_typer(settings_app, name="settings", help="Base capital and settings")

@app.callback()
def main(
    config: str = typer.Option(str(CONFIG_FILE), "--config", "-c", help="Path to config.yaml"),
):
    """Load configuration and wire up the trade/settings stores"""
    set_globals(load_config(config))

# Shortcuts for the most used commands
app.command("open", help="Record a new trade (alias for 'trade open')")(open_trade)
app.command("close", help="Close an open trade (alias for 'trade close')")(close_trade)
app.command("ls", help="List trades (alias for 'trade ls')")(ls_command)
app.command("dashboard", help="Portfolio overview (alias for 'analysis dashboard')")(dashboard_command)

if __name__ == "__main__":
    app()
