# ═══════════════════════════════════════════════════════════════════
# utils.py - Input coercion and display formatting helpers
# ═══════════════════════════════════════════════════════════════════

import datetime as dt
import decimal as dec

from constants import DEFAULT_BASE_CAPITAL, ZERO

# Beyond this exponent a form value is garbage, and products with the
# contract multiplier would overflow the decimal context
MAX_EXPONENT = 100

def to_number(value, default: dec.Decimal = ZERO) -> dec.Decimal:
    """
    Permissive numeric coercion for user-entered fields.

    Absent, blank, non-numeric, non-finite and absurdly large or small
    values all become `default` instead of raising; this is the only place
    form input is forgiven.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, dec.Decimal):
        number = value
    elif isinstance(value, (int, float)):
        number = dec.Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip().replace(",", "")
        if not text:
            return default
        try:
            number = dec.Decimal(text)
        except dec.InvalidOperation:
            return default
    else:
        return default

    if not number.is_finite():
        return default
    if number and abs(number.adjusted()) > MAX_EXPONENT:
        return default
    return number

def to_optional_number(value) -> dec.Decimal | None:
    """Like to_number, but blank input stays None (used for strikes)"""
    return to_number(value, default=None)

def to_contracts(value) -> int:
    """Contract count; anything missing, invalid or non-positive means 1"""
    number = to_number(value)
    count = int(number)
    return count if count > 0 else 1

def parse_date(value) -> dt.date | None:
    """Parse YYYY-MM-DD (or a full ISO timestamp) into a date, None if unusable"""
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return dt.date.fromisoformat(text[:10])
        except ValueError:
            return None
    return None

def parse_base_capital(value) -> dec.Decimal:
    """Base capital from the settings table; missing, invalid or zero falls back to the default"""
    capital = to_number(value)
    return capital if capital != 0 else DEFAULT_BASE_CAPITAL

def now_utc() -> dt.datetime:
    """Get current UTC datetime"""
    return dt.datetime.now(dt.timezone.utc)

# ─── Display formatting ─────────────────────────────────────────────

def format_currency(value, decimals: int = 2) -> str:
    num = to_number(value)
    prefix = "" if num >= 0 else "-"
    return f"{prefix}${abs(num):,.{decimals}f}"

def format_percent(value, decimals: int = 1) -> str:
    num = to_number(value)
    sign = "+" if num >= 0 else ""
    return f"{sign}{num:.{decimals}f}%"

def format_number(value, decimals: int = 0) -> str:
    return f"{to_number(value):,.{decimals}f}"

def format_date(value) -> str:
    d = parse_date(value)
    if d is None:
        return "—"
    return d.strftime("%b %d, %Y").replace(" 0", " ")

def format_profit_factor(value) -> str:
    if isinstance(value, dec.Decimal) and value.is_infinite():
        return "∞"
    return f"{to_number(value):.2f}"

def pnl_style(value) -> str:
    """Rich style for a P&L figure: green gain, red loss, dim flat"""
    num = to_number(value)
    if num > 0:
        return "green"
    if num < 0:
        return "red"
    return "dim"
