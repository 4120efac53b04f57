"""Denormalized view models for dashboards and tables."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Iterable

from propfolio.analytics.documents import PendingDocument, pending_documents
from propfolio.analytics.valuation import current_value
from propfolio.models.base import ZERO, to_amount
from propfolio.models.enums import LeaseStatus, PaymentRecordStatus
from propfolio.models.property import Property
from propfolio.models.tenancy import Lease, PaymentRecord, Tenant

CURRENCY_SYMBOL = "₱"
UNKNOWN = "Unknown"


def format_currency(amount: Decimal | float | None) -> str:
    """Render ``₱1,234.00``; missing amounts render as ``N/A``."""
    if amount is None:
        return "N/A"
    return f"{CURRENCY_SYMBOL}{to_amount(amount):,.2f}"


def format_millions(amount: Decimal | float | None) -> str:
    """Render ``₱15.00M`` for dashboard cards."""
    if amount is None:
        return "N/A"
    return f"{CURRENCY_SYMBOL}{to_amount(amount) / 1000000:.2f}M"


@dataclass
class DashboardSummary:
    total_properties: int = 0
    total_value: Decimal = ZERO
    needs_attention: int = 0  # Pending documents across the portfolio
    pending: list[PendingDocument] = field(default_factory=list)


def dashboard_summary(properties: Iterable[Property]) -> DashboardSummary:
    props = list(properties)
    pending = pending_documents(props)
    return DashboardSummary(
        total_properties=len(props),
        total_value=sum((current_value(p) for p in props), ZERO),
        needs_attention=len(pending),
        pending=pending,
    )


@dataclass
class LeaseRow:
    lease_id: str | None
    tenant_name: str
    property_name: str
    monthly_rent: Decimal
    status: LeaseStatus
    start_date: date
    end_date: date
    total_collected: Decimal = ZERO
    total_pending: Decimal = ZERO


def lease_rows(
    leases: Iterable[Lease],
    tenants: Iterable[Tenant],
    properties: Iterable[Property],
    payments: Iterable[PaymentRecord],
) -> list[LeaseRow]:
    """Join leases with tenant and property names and payment totals."""
    tenant_names = {t.tenant_id: t.name for t in tenants}
    property_names = {p.property_id: p.property_name for p in properties}

    collected: dict[str | None, Decimal] = {}
    pending: dict[str | None, Decimal] = {}
    for payment in payments:
        if payment.status == PaymentRecordStatus.COMPLETED:
            collected[payment.lease_id] = collected.get(payment.lease_id, ZERO) + to_amount(payment.amount)
        elif payment.status == PaymentRecordStatus.PENDING:
            pending[payment.lease_id] = pending.get(payment.lease_id, ZERO) + to_amount(payment.amount)

    return [
        LeaseRow(
            lease_id=lease.lease_id,
            tenant_name=tenant_names.get(lease.tenant_id, UNKNOWN),
            property_name=property_names.get(lease.property_id, UNKNOWN),
            monthly_rent=to_amount(lease.monthly_rent),
            status=lease.status,
            start_date=lease.start_date,
            end_date=lease.end_date,
            total_collected=collected.get(lease.lease_id, ZERO),
            total_pending=pending.get(lease.lease_id, ZERO),
        )
        for lease in leases
    ]
