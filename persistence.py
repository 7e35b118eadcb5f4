# ═══════════════════════════════════════════════════════════════════
# persistence.py - JSON-backed trade repository and settings store
# ═══════════════════════════════════════════════════════════════════

import json
import pathlib
import uuid
from typing import Dict, List, Optional

from models import Trade
from constants import BASE_CAPITAL_KEY, DEFAULT_BASE_CAPITAL, OPEN
from utils import to_number, to_optional_number, to_contracts, parse_date, now_utc

BOOK = pathlib.Path("trades.json")
SETTINGS = pathlib.Path("settings.json")

DEFAULT_SETTINGS = {BASE_CAPITAL_KEY: str(DEFAULT_BASE_CAPITAL)}

NUMERIC_FIELDS = (
    "premium_received", "premium_paid", "commission", "close_price",
    "current_price", "collateral", "max_loss", "realized_pnl",
)
STRIKE_FIELDS = ("short_strike", "long_strike", "short_call_strike", "long_call_strike")
DATE_FIELDS = ("open_date", "expiration_date", "close_date")

class TradeNotFoundError(KeyError):
    """Raised when a trade id is not in the book"""

def make_trade(d: dict) -> Trade:
    """Build a Trade from a raw record, coercing every field the forgiving way"""
    fields = {
        "id": str(d.get("id") or ""),
        "underlying": str(d.get("underlying") or "").strip().upper(),
        "strategy": str(d.get("strategy") or ""),
        "status": str(d.get("status") or OPEN),
        "contracts": to_contracts(d.get("contracts")),
        "notes": d.get("notes") or "",
        "tags": d.get("tags") or "",
        "created_at": d.get("created_at"),
        "updated_at": d.get("updated_at"),
    }
    for name in NUMERIC_FIELDS:
        fields[name] = to_number(d.get(name))
    for name in STRIKE_FIELDS:
        fields[name] = to_optional_number(d.get(name))
    for name in DATE_FIELDS:
        fields[name] = parse_date(d.get(name))
    return Trade(**fields)

def load_book(path: pathlib.Path = BOOK) -> List[Trade]:
    """Load trades from the JSON file"""
    if not path.exists():
        return []
    raw = json.loads(path.read_text())
    return [make_trade(t) for t in raw]

def save_book(book: List[Trade], path: pathlib.Path = BOOK):
    """Save trades to the JSON file"""
    data = [trade.to_dict() for trade in book]
    path.write_text(json.dumps(data, indent=2))

class TradeRepository:
    """Create/read/update/delete trades, persisted as a JSON array"""

    def __init__(self, path=BOOK):
        self.path = pathlib.Path(path)

    def list(self) -> List[Trade]:
        """All trades, most recently opened first"""
        book = load_book(self.path)
        # Undated trades sort last, like an epoch date would
        return sorted(book, key=lambda t: t.open_date.toordinal() if t.open_date else 0, reverse=True)

    def list_by_status(self, status: str) -> List[Trade]:
        return [t for t in self.list() if t.status == status]

    def get(self, trade_id: str) -> Trade:
        for trade in load_book(self.path):
            if trade.id == trade_id:
                return trade
        raise TradeNotFoundError(f"Trade ID {trade_id} not found")

    def create(self, trade: Trade) -> Trade:
        book = load_book(self.path)
        stamp = now_utc().isoformat()
        trade.id = trade.id or str(uuid.uuid4())
        trade.created_at = stamp
        trade.updated_at = stamp
        book.insert(0, trade)
        save_book(book, self.path)
        return trade

    def update(self, trade_id: str, changes: dict) -> Trade:
        """Merge `changes` into the stored record and re-save"""
        book = load_book(self.path)
        for idx, trade in enumerate(book):
            if trade.id == trade_id:
                merged = {**trade.to_dict(), **changes, "id": trade_id}
                merged["updated_at"] = now_utc().isoformat()
                book[idx] = make_trade(merged)
                save_book(book, self.path)
                return book[idx]
        raise TradeNotFoundError(f"Trade ID {trade_id} not found")

    def delete(self, trade_id: str):
        book = load_book(self.path)
        remaining = [t for t in book if t.id != trade_id]
        if len(remaining) == len(book):
            raise TradeNotFoundError(f"Trade ID {trade_id} not found")
        save_book(remaining, self.path)

class SettingsStore:
    """Flat string-keyed, string-valued settings table"""

    def __init__(self, path=SETTINGS):
        self.path = pathlib.Path(path)

    def all(self) -> Dict[str, str]:
        if not self.path.exists():
            return dict(DEFAULT_SETTINGS)
        return json.loads(self.path.read_text())

    def get(self, key: str) -> Optional[str]:
        return self.all().get(key)

    def set(self, key: str, value):
        settings = self.all()
        settings[key] = str(value)
        self.path.write_text(json.dumps(settings, indent=2))
