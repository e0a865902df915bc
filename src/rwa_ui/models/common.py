"""
Common models shared by the invoice, token and account services.

Backend payloads are wrapped in benedict so nested or missing keys can be
read with dot-notation defaults instead of chains of ``.get()``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Sequence, TypeVar

from benedict import benedict

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


def payload(data: Any) -> benedict:
    """Wrap a backend JSON object for safe nested access."""
    if isinstance(data, benedict):
        return data
    return benedict(dict(data or {}), keyattr_dynamic=True)


def as_list(data: Any) -> list[dict]:
    """
    Return the rows of a list response.

    The backend returns bare arrays for most list endpoints and
    ``{"rows": [...], "total": n}`` for paged ones; ``{"data": [...]}`` also
    appears in older responses.
    """
    if data is None:
        return []
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in ("rows", "data", "items"):
            if isinstance(data.get(key), list):
                return data[key]
    return []


def parse_enum(enum_cls: type[E], value: Any, default: E) -> E:
    """Return the enum member whose value matches, or ``default``."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return default


@dataclass
class PageResult(Generic[T]):
    """
    One page of a list response.

    Most backend list endpoints return no total, so ``has_more`` assumes
    another page exists whenever this one is full.

    Attributes:
        items: Items on this page.
        page: Page number (1-indexed).
        page_size: Requested page size.
        total: Total item count, when the backend reports it.
    """

    items: Sequence[T] = field(default_factory=list)
    page: int = 1
    page_size: int = 10
    total: int | None = None

    @property
    def has_more(self) -> bool:
        """Return True when additional pages are available."""
        if len(self.items) < self.page_size:
            return False
        if self.total is None:
            return True
        return self.page * self.page_size < self.total
