# ═══════════════════════════════════════════════════════════════════
# constants.py - Strategy/status enumerations and domain constants
# ═══════════════════════════════════════════════════════════════════

from decimal import Decimal

BULL_PUT_SPREAD = "Bull Put Spread"
BEAR_CALL_SPREAD = "Bear Call Spread"
IRON_CONDOR = "Iron Condor"
WHEEL = "Wheel"
COVERED_CALL = "Covered Call"

STRATEGIES = [
    BULL_PUT_SPREAD,
    BEAR_CALL_SPREAD,
    IRON_CONDOR,
    WHEEL,
    COVERED_CALL,
]

# Rich colour names used when rendering strategy labels
STRATEGY_COLORS = {
    BULL_PUT_SPREAD: "green",
    BEAR_CALL_SPREAD: "red",
    IRON_CONDOR: "magenta",
    WHEEL: "yellow",
    COVERED_CALL: "blue",
}

OPEN = "open"
CLOSED = "closed"
EXPIRED = "expired"

STATUS_OPTIONS = [OPEN, CLOSED, EXPIRED]
CLOSED_STATUSES = (CLOSED, EXPIRED)

STATUS_COLORS = {
    OPEN: "green",
    CLOSED: "bright_black",
    EXPIRED: "yellow",
}

COMMON_UNDERLYINGS = [
    "SPY", "QQQ", "IWM", "DIA", "AAPL", "MSFT", "AMZN", "GOOGL",
    "META", "NVDA", "TSLA", "AMD", "NFLX", "JPM", "BAC", "XLF",
    "GLD", "SLV", "TLT", "VIX",
]

# Shares per option contract
CONTRACT_MULTIPLIER = 100

DEFAULT_BASE_CAPITAL = Decimal("21000")
BASE_CAPITAL_KEY = "base_capital"

ZERO = Decimal("0")
INFINITY = Decimal("Infinity")
