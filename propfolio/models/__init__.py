"""Domain models for the property portfolio."""

from propfolio.models.base import AuditEntry, to_amount
from propfolio.models.enums import (
    DocumentPriority,
    DocumentState,
    DocumentType,
    LeaseStatus,
    PaymentRecordStatus,
    PaymentStatus,
    PropertyType,
    Region,
    TenantStatus,
)
from propfolio.models.property import (
    AcquisitionCost,
    Appraisal,
    Documentation,
    DocumentationStatus,
    DuesPayment,
    EmbeddedLease,
    Insurance,
    PaymentInfo,
    PossessionStatus,
    Property,
    PropertyManagement,
    document_state_for,
)
from propfolio.models.tenancy import Lease, PaymentRecord, Tenant

__all__ = [
    "AcquisitionCost",
    "Appraisal",
    "AuditEntry",
    "DocumentPriority",
    "DocumentState",
    "DocumentType",
    "Documentation",
    "DocumentationStatus",
    "DuesPayment",
    "EmbeddedLease",
    "Insurance",
    "Lease",
    "LeaseStatus",
    "PaymentInfo",
    "PaymentRecord",
    "PaymentRecordStatus",
    "PaymentStatus",
    "PossessionStatus",
    "Property",
    "PropertyManagement",
    "PropertyType",
    "Region",
    "Tenant",
    "TenantStatus",
    "document_state_for",
    "to_amount",
]
