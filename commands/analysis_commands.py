# ═══════════════════════════════════════════════════════════════════
# commands/analysis_commands.py - Dashboard and breakdown commands
# ═══════════════════════════════════════════════════════════════════

import typer

from commands import cfg, repo, settings
from constants import BASE_CAPITAL_KEY
from dashboard import (
    show_dashboard, show_by_underlying, show_by_strategy,
    show_monthly, show_equity_curve, show_days_held,
)
from utils import parse_base_capital

analysis_app = typer.Typer()

def current_base_capital():
    return parse_base_capital(settings.get(BASE_CAPITAL_KEY))

@analysis_app.command("dashboard")
def dashboard_command():
    """Portfolio metrics overview"""
    show_dashboard(repo.list(), current_base_capital(), cfg)

@analysis_app.command("underlying")
def underlying_command():
    """P&L and win rate per underlying"""
    show_by_underlying(repo.list(), cfg)

@analysis_app.command("strategy")
def strategy_command():
    """P&L and win rate per strategy"""
    show_by_strategy(repo.list(), cfg)

@analysis_app.command("monthly")
def monthly_command():
    """Realized P&L per month"""
    show_monthly(repo.list(), cfg)

@analysis_app.command("equity")
def equity_command():
    """Equity curve from base capital through every settled trade"""
    show_equity_curve(repo.list(), current_base_capital(), cfg)

@analysis_app.command("held")
def held_command():
    """Days held per closed trade"""
    show_days_held(repo.list(), cfg)
