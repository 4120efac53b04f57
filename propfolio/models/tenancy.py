"""Tenant management models: tenants, standalone leases and payments."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from propfolio.models.enums import LeaseStatus, PaymentRecordStatus, TenantStatus


@dataclass
class Tenant:
    """Person or entity renting a property."""

    name: str
    email: str
    phone: str = ""
    occupation: str = ""
    status: TenantStatus = TenantStatus.ACTIVE
    id_type: str | None = None
    id_number: str | None = None
    tenant_id: str | None = None
    created_at: datetime | None = None


@dataclass
class Lease:
    """Lease contract linking one property to one tenant."""

    property_id: str
    tenant_id: str
    start_date: date
    end_date: date
    monthly_rent: Decimal
    security_deposit: Decimal = Decimal("0")
    status: LeaseStatus = LeaseStatus.ACTIVE
    contract_url: str | None = None
    lease_id: str | None = None
    created_at: datetime | None = None


@dataclass
class PaymentRecord:
    """Rent payment against a lease; PDC drafts start as pending."""

    lease_id: str
    payment_date: date
    amount: Decimal
    payment_type: str = "Rent"
    payment_method: str = "Check"
    status: PaymentRecordStatus = PaymentRecordStatus.PENDING
    reference_number: str | None = None
    remarks: str | None = None
    payment_id: str | None = None
    created_at: datetime | None = None
