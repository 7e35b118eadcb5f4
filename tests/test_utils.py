import datetime as dt
from decimal import Decimal

import pytest

from constants import DEFAULT_BASE_CAPITAL, INFINITY
from utils import (
    to_number, to_contracts, parse_date, parse_base_capital,
    format_currency, format_percent, format_date, format_profit_factor, pnl_style,
)


@pytest.mark.parametrize("value, expected", [
    (None, Decimal("0")),
    ("", Decimal("0")),
    ("  ", Decimal("0")),
    ("abc", Decimal("0")),
    ("NaN", Decimal("0")),
    ("Infinity", Decimal("0")),
    (True, Decimal("0")),
    ("1.25", Decimal("1.25")),
    (3, Decimal("3")),
    (0.1, Decimal("0.1")),
    ("-2", Decimal("-2")),
    ("1e999999", Decimal("0")),
    ("-1E+200", Decimal("0")),
    ("1e-500", Decimal("0")),
    ("2.5e3", Decimal("2500")),
])
def test_to_number(value, expected):
    assert to_number(value) == expected


@pytest.mark.parametrize("value, expected", [
    (None, 1), ("", 1), ("x", 1), (0, 1), (-3, 1), ("4", 4), (2.7, 2),
])
def test_to_contracts(value, expected):
    assert to_contracts(value) == expected


def test_parse_date():
    assert parse_date("2024-02-29") == dt.date(2024, 2, 29)
    assert parse_date(dt.datetime(2024, 1, 1, 9, 30)) == dt.date(2024, 1, 1)
    assert parse_date("02/29/2024") is None
    assert parse_date("") is None


def test_parse_base_capital():
    assert parse_base_capital(None) == DEFAULT_BASE_CAPITAL
    assert parse_base_capital("junk") == DEFAULT_BASE_CAPITAL
    assert parse_base_capital("0") == DEFAULT_BASE_CAPITAL
    assert parse_base_capital("50000") == Decimal("50000")


def test_formatting():
    assert format_currency(Decimal("1234.5")) == "$1,234.50"
    assert format_currency(-50, 0) == "-$50"
    assert format_percent(Decimal("5")) == "+5.0%"
    assert format_percent(Decimal("-2.5"), 2) == "-2.50%"
    assert format_date("2024-01-05") == "Jan 5, 2024"
    assert format_date(None) == "—"
    assert format_profit_factor(INFINITY) == "∞"
    assert format_profit_factor(Decimal("2")) == "2.00"


def test_pnl_style():
    assert pnl_style(10) == "green"
    assert pnl_style("-1") == "red"
    assert pnl_style(0) == "dim"
