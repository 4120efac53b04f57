"""Base models and value helpers shared across the portfolio domain."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

ZERO = Decimal("0")


def to_amount(value: Any) -> Decimal:
    """Coerce a possibly missing or malformed numeric field to a Decimal.

    ``None``, NaN, infinities and unparseable values become ``0`` so that
    aggregations never raise and never return a non-finite number.
    """
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except (InvalidOperation, ValueError):
            return ZERO
    if not amount.is_finite():
        return ZERO
    return amount


@dataclass
class AuditEntry:
    """Record of an administrative action against the store."""

    action: str  # e.g. clear_all, reset_to_demo
    actor: str
    occurred_at: datetime
    details: dict[str, Any] = field(default_factory=dict)
