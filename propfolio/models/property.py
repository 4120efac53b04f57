"""Property model and its nested sections."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from propfolio.models.base import to_amount
from propfolio.models.enums import (
    DocumentPriority,
    DocumentState,
    DocumentType,
    PaymentStatus,
    PropertyType,
    Region,
)

# Initial mapping from legacy free-text statuses to DocumentState
PENDING_MARKERS = ("missing", "submission")
EXPIRED_MARKERS = ("expired",)


def document_state_for(status: str | None) -> DocumentState:
    """Classify a free-text document status.

    ``"Missing Original"`` and ``"For Submission"`` are pending,
    anything mentioning ``"expired"`` is expired, everything else is
    available.
    """
    text = (status or "").lower()
    if any(marker in text for marker in PENDING_MARKERS):
        return DocumentState.PENDING
    if any(marker in text for marker in EXPIRED_MARKERS):
        return DocumentState.EXPIRED
    return DocumentState.AVAILABLE


@dataclass
class AcquisitionCost:
    """Acquisition cost breakdown; the total is always derived."""

    unit_lot_cost: Decimal
    fit_out_cost: Decimal | None = None
    cost_per_sqm: Decimal | None = None

    @property
    def total_cost(self) -> Decimal:
        return to_amount(self.unit_lot_cost) + to_amount(self.fit_out_cost)


@dataclass
class PaymentInfo:
    status: PaymentStatus
    schedule_url: str | None = None
    schedule_file_name: str | None = None


@dataclass
class EmbeddedLease:
    """Lease terms stored directly on the property (legacy display shape)."""

    lessee: str
    lease_date: date | None = None
    lease_rate: Decimal | None = None  # Monthly
    term_in_years: int | None = None
    referring_broker: str = ""
    broker_contact: str = ""
    contract_url: str = ""


@dataclass
class Appraisal:
    """Dated third-party valuation of a property."""

    appraisal_date: date | None  # Legacy records may be undated
    appraised_value: Decimal
    appraisal_company: str = ""
    report_url: str | None = None


@dataclass
class Documentation:
    """A tracked legal document for a property."""

    document_type: DocumentType
    status: str  # e.g. "Missing Original", "Available (Copy)", "For Submission"
    priority: DocumentPriority = DocumentPriority.MEDIUM
    due_date: date | None = None
    execution_date: date | None = None
    document_url: str = ""
    file_name: str | None = None
    state_override: DocumentState | None = None  # Set by hand; otherwise derived

    @property
    def state(self) -> DocumentState:
        """Current state, re-derived from ``status`` on every read."""
        if self.state_override is not None:
            return self.state_override
        return document_state_for(self.status)

    @property
    def name(self) -> str:
        return getattr(self.document_type, "value", str(self.document_type))


@dataclass
class DocumentationStatus:
    docs: list[Documentation] = field(default_factory=list)
    pending_documents: list[str] = field(default_factory=list)  # Declared by hand

    def outstanding(self) -> list[str]:
        """Declared pending names plus names of pending docs, de-duplicated."""
        names: list[str] = []
        for name in self.pending_documents:
            if name and name not in names:
                names.append(name)
        for doc in self.docs:
            if doc.state == DocumentState.PENDING and doc.name not in names:
                names.append(doc.name)
        return names


@dataclass
class DuesPayment:
    last_paid_date: date | None = None
    amount_paid: Decimal | None = None
    receipt_url: str | None = None


@dataclass
class PropertyManagement:
    caretaker_name: str | None = None
    caretaker_rate_per_month: Decimal | None = None
    real_estate_taxes: DuesPayment = field(default_factory=DuesPayment)  # Annual
    condo_dues: DuesPayment | None = None  # Monthly


@dataclass
class PossessionStatus:
    is_turned_over: bool = False
    turnover_date: date | None = None
    authorized_recipient: str | None = None


@dataclass
class Insurance:
    insurance_company: str
    amount_insured: Decimal
    coverage_date: date | None = None
    policy_url: str = ""


@dataclass
class Property:
    """Real estate asset in the portfolio."""

    property_name: str
    property_type: PropertyType
    location: Region
    full_address: str
    acquisition: AcquisitionCost
    payment: PaymentInfo
    management: PropertyManagement = field(default_factory=PropertyManagement)
    lease: EmbeddedLease | None = None
    documentation: DocumentationStatus = field(default_factory=DocumentationStatus)
    appraisals: list[Appraisal] = field(default_factory=list)
    possession: PossessionStatus = field(default_factory=PossessionStatus)
    insurance: Insurance | None = None
    unit_number: str | None = None
    area_sqm: float = 0.0
    original_developer: str = ""
    buyers_name: str = ""
    property_id: str | None = None  # Assigned by the store
    created_at: datetime | None = None
    updated_at: datetime | None = None
