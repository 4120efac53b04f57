"""Document tracking: pending documents and upcoming due dates."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable

from propfolio.models.enums import DocumentPriority, DocumentState
from propfolio.models.property import Documentation, Property, document_state_for

__all__ = [
    "PendingDocument",
    "document_state_for",
    "pending_documents",
    "upcoming_due_documents",
]

PRIORITY_RANK = {
    DocumentPriority.HIGH: 0,
    DocumentPriority.MEDIUM: 1,
    DocumentPriority.LOW: 2,
}


@dataclass
class PendingDocument:
    """Document joined with the property it belongs to."""

    property_id: str | None
    property_name: str
    document: Documentation


def _rank(doc: Documentation) -> int:
    try:
        return PRIORITY_RANK[DocumentPriority(doc.priority)]
    except ValueError:
        return len(PRIORITY_RANK)


def _joined(properties: Iterable[Property]) -> Iterable[PendingDocument]:
    for prop in properties:
        for doc in prop.documentation.docs:
            yield PendingDocument(
                property_id=prop.property_id,
                property_name=prop.property_name,
                document=doc,
            )


def pending_documents(properties: Iterable[Property]) -> list[PendingDocument]:
    """Pending documents across the portfolio, highest priority first."""
    pending = [item for item in _joined(properties) if item.document.state == DocumentState.PENDING]
    return sorted(pending, key=lambda item: _rank(item.document))


def upcoming_due_documents(
    properties: Iterable[Property],
    window_days: int = 30,
    as_of: date | None = None,
) -> list[PendingDocument]:
    """Documents whose due date falls within the next ``window_days``."""
    today = as_of or date.today()
    horizon = today + timedelta(days=window_days)
    return [
        item
        for item in _joined(properties)
        if item.document.due_date is not None and today <= item.document.due_date <= horizon
    ]
