"""
Canonical JSON encoding and digests of domain values.

Request payloads mix Decimals, dates, enums and dataclasses. They are
encoded the same way for debug logging, market cache keys and demo wallet
signatures, so equal values always produce equal digests.
"""

import hashlib
import json
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


def canonical_json(obj: Any) -> str:
    """Compact JSON with sorted keys."""
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), default=_encode)


def digest(*parts: Any) -> str:
    """
    SHA-256 hex digest of the canonical JSON of ``parts``.

    >>> digest("0xabc", "nonce") == digest("0xabc", "nonce")
    True
    """
    return hashlib.sha256(canonical_json(list(parts)).encode("utf-8")).hexdigest()


def to_json(obj: Any, indent: int | None = None) -> str:
    return json.dumps(obj, indent=indent, default=_encode)


def _encode(obj: Any) -> Any:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Decimal):
        # Normalized so 100 and 100.00 encode alike.
        return format(obj.normalize(), "f")
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    return str(obj)
