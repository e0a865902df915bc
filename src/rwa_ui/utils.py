"""
Utility functions for parsing and formatting backend values.

Provides helpers for:
- Date parsing (unix seconds/milliseconds, ISO strings, BSON extended JSON)
- Decimal parsing of the string amounts the backend emits
- Amount, currency, date and status formatting for display
"""

from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

# Threshold above which a numeric timestamp is taken to be milliseconds
_MILLIS_THRESHOLD = 10**11


def parse_date(value: Any) -> datetime | None:
    """
    Parse a backend date value into an aware UTC datetime.

    Accepts unix timestamps in seconds or milliseconds (as numbers or digit
    strings), ISO-8601 strings, m/d/Y strings and BSON extended JSON
    (``{"$date": ...}``).

    Returns:
        datetime if parsing succeeds, None otherwise.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, dict):
        inner = value.get("$date", value.get("$numberLong"))
        return parse_date(inner)
    if isinstance(value, (int, float)):
        return _from_timestamp(value)

    text = str(value).strip()
    if not text:
        return None
    if text.lstrip("-").isdigit():
        return _from_timestamp(int(text))

    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
    except ValueError:
        pass

    try:
        return datetime.strptime(text, "%m/%d/%Y").replace(tzinfo=timezone.utc)
    except ValueError:
        pass

    return None


def _from_timestamp(value: float) -> datetime | None:
    if value <= 0:
        return None
    if value > _MILLIS_THRESHOLD:
        value = value / 1000
    return datetime.fromtimestamp(value, tz=timezone.utc)


def to_timestamp(value: datetime | date | None) -> int:
    """Convert a date to unix seconds (0 when missing)."""
    if value is None:
        return 0
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    return int(value.timestamp())


def to_decimal(value: Any, default: Decimal = Decimal(0)) -> Decimal:
    """Parse a backend amount (string, number or BSON Decimal128) into a Decimal."""
    if value is None or value == "":
        return default
    if isinstance(value, dict):
        value = value.get("$numberDecimal", value.get("$numberLong"))
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return default


def format_amount(value: Decimal | float | int, decimals: int = 2) -> str:
    """Format an amount with thousands separators, e.g. 1,234.50."""
    return f"{Decimal(str(value)):,.{decimals}f}"


def format_currency(value: Decimal | float | int, currency: str) -> str:
    """
    Format a currency amount with the currency code suffix.

    Returns:
        Formatted string like '1,234.56 USDT'.
    """
    return f"{format_amount(value)} {currency}".strip()


def format_date(value: datetime | None, fmt: str = "%Y-%m-%d") -> str:
    """Format a date for display, '-' when missing."""
    if value is None:
        return "-"
    return value.strftime(fmt)


_STATUS_LABELS = {
    "Pending": "Pending",
    "Verified": "Verified",
    "Packaged": "Packaged",
    "Repaid": "Repaid",
    "Overdue": "Overdue",
    "OnSale": "On Sale",
    "SoldOut": "Sold Out",
    "Issued": "Issued",
    "Trading": "Trading",
    "Repaying": "Repaying",
    "Settled": "Settled",
    "Defaulted": "Defaulted",
    "Packaging": "Packaging",
    "Available": "Available",
    "Funding": "Funding",
    "Funded": "Funded",
    "Cancelled": "Cancelled",
    "Completed": "Completed",
    "Expired": "Expired",
    "Active": "Active",
    "Redeemed": "Redeemed",
}


def format_status(status: str) -> str:
    """Return the display label for a backend status value."""
    return _STATUS_LABELS.get(status, status)
