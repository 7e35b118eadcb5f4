# ═══════════════════════════════════════════════════════════════════
# fzf_helper.py - FZF pickers for strategy, underlying and trade id
# ═══════════════════════════════════════════════════════════════════

import subprocess
import shutil
from typing import Optional, List
import rich

from constants import STRATEGIES

CUSTOM_ENTRY = ">>> ENTER CUSTOM SYMBOL <<<"

def check_fzf_installed() -> bool:
    """Check if fzf is installed on the system"""
    return shutil.which('fzf') is not None

def fzf_select(items: List[str], prompt: str = "Select: ") -> Optional[str]:
    """
    Use fzf to select from a list of items
    Returns the selected item or None if cancelled
    """
    if not items:
        rich.print("[red]No items to select from[/]")
        return None

    try:
        result = subprocess.run(
            ['fzf', '--prompt', prompt, '--height', '40%', '--reverse'],
            input='\n'.join(items),
            text=True,
            capture_output=True
        )
    except OSError as e:
        rich.print(f"[red]Error running fzf: {e}[/]")
        return None

    if result.returncode == 0:
        return result.stdout.strip()
    # User cancelled (Ctrl+C or ESC)
    return None

def get_underlyings_from_book(book) -> List[str]:
    """Unique underlyings already traded, alphabetical"""
    return sorted({t.underlying for t in book if t.underlying})

def select_strategy() -> Optional[str]:
    """Pick one of the supported strategies, None when fzf is missing or cancelled"""
    if not check_fzf_installed():
        return None
    return fzf_select(STRATEGIES, "Strategy: ")

def select_underlying(book, cfg) -> Optional[str]:
    """
    Pick an underlying: previously traded symbols first, then the
    configured common tickers, plus a custom entry option
    """
    if not check_fzf_installed():
        return None

    symbols = get_underlyings_from_book(book)
    for sym in cfg.get("underlyings", []):
        if sym not in symbols:
            symbols.append(sym)
    symbols.append(CUSTOM_ENTRY)

    selected = fzf_select(symbols, "Underlying: ")
    if selected == CUSTOM_ENTRY:
        custom = input("Enter symbol: ").strip().upper()
        return custom or None
    return selected

def select_trade(trades) -> Optional[str]:
    """Pick a trade by id from a one-line summary of each"""
    if not check_fzf_installed():
        return None

    lines = [
        f"{t.id}  {t.underlying:<6} {t.strategy:<17} {t.status:<8} {t.open_date or ''}"
        for t in trades
    ]
    selected = fzf_select(lines, "Trade: ")
    if selected is None:
        return None
    return selected.split()[0]
