# ═══════════════════════════════════════════════════════════════════
# config.py - config.yaml loading, defaults and strategy metadata
# ═══════════════════════════════════════════════════════════════════

import copy
import pathlib
from ruamel.yaml import YAML
import rich

from constants import STRATEGIES, STRATEGY_COLORS, COMMON_UNDERLYINGS

yaml = YAML(typ="safe")
CONFIG_FILE = pathlib.Path("config.yaml")

VALID_STRATEGY_TYPES = ["credit_spread", "iron_condor", "collateral"]

DEFAULT_CFG = {
    "storage": {
        "trades_file": "trades.json",
        "settings_file": "settings.json",
    },
    "display": {
        "currency_decimals": 2,
        "percent_decimals": 1,
        "recent_trades": 10,
    },
    "strategies": {
        "Bull Put Spread": {"type": "credit_spread", "color": STRATEGY_COLORS["Bull Put Spread"]},
        "Bear Call Spread": {"type": "credit_spread", "color": STRATEGY_COLORS["Bear Call Spread"]},
        "Iron Condor": {"type": "iron_condor", "color": STRATEGY_COLORS["Iron Condor"]},
        "Wheel": {"type": "collateral", "color": STRATEGY_COLORS["Wheel"]},
        "Covered Call": {"type": "collateral", "color": STRATEGY_COLORS["Covered Call"]},
    },
    "underlyings": list(COMMON_UNDERLYINGS),
}

def _merge_defaults(cfg: dict, defaults: dict) -> dict:
    """Fill keys missing from a user config with their defaults (one level of nesting)"""
    merged = copy.deepcopy(defaults)
    for key, value in (cfg or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged

def load_config(path=CONFIG_FILE):
    """Load configuration, writing the defaults on first run"""
    path = pathlib.Path(path)
    if not path.exists():
        rich.print(f"[yellow]Creating default {path.name}...[/]")
        yaml.dump(DEFAULT_CFG, path)

    return _merge_defaults(yaml.load(path), DEFAULT_CFG)

def save_config(config, path=CONFIG_FILE):
    yaml.dump(config, pathlib.Path(path))

def get_strategy_color(strategy_name, cfg):
    """Rich colour for a strategy label, white if unconfigured"""
    meta = cfg.get("strategies", {}).get(strategy_name, {})
    return meta.get("color", "white")

def get_strategy_type(strategy_name, cfg):
    meta = cfg.get("strategies", {}).get(strategy_name, {})
    return meta.get("type", "credit_spread")

def validate_config(cfg):
    """Validate strategy configuration, printing every problem found"""
    errors = []

    for name, meta in cfg.get("strategies", {}).items():
        if name not in STRATEGIES:
            errors.append(f"Strategy '{name}' is not a supported strategy")
            continue
        if "type" not in meta:
            errors.append(f"Strategy '{name}' missing 'type' field")
        elif meta["type"] not in VALID_STRATEGY_TYPES:
            errors.append(f"Strategy '{name}' has invalid type '{meta['type']}'")

    for key in ("currency_decimals", "percent_decimals", "recent_trades"):
        value = cfg.get("display", {}).get(key)
        if not isinstance(value, int) or value < 0:
            errors.append(f"display.{key} must be a non-negative integer")

    if errors:
        rich.print("[red]Configuration errors:[/]")
        for error in errors:
            rich.print(f"[red]  - {error}[/]")
        return False

    rich.print("[green]✓ Configuration is valid[/]")
    return True

def list_strategies(cfg):
    """Print configured strategies with their type"""
    strategies = cfg.get("strategies", {})
    rich.print("\n[bold]Strategies:[/]")
    for name, meta in strategies.items():
        color = meta.get("color", "white")
        rich.print(f"  [{color}]{name}[/] - {meta.get('type', 'credit_spread')}")
