"""In-memory portfolio store with referential integrity.

Stands in for the hosted persistence service: fetch-all-by-table reads,
create operations that return the canonical record with a generated id,
and full-record replacement for property updates. Reads and writes go
through deep copies, so callers never share state with the store.
"""

import copy
import logging
import threading
import uuid
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable

from propfolio.analytics.schedule import generate_monthly_schedule
from propfolio.config import ScheduleConfig
from propfolio.exceptions import (
    BatchCreateError,
    EntityNotFoundError,
    InvalidEntityStateError,
    PropfolioError,
    ReferentialIntegrityError,
)
from propfolio.models.base import AuditEntry, to_amount
from propfolio.models.property import Appraisal, Documentation, Property
from propfolio.models.tenancy import Lease, PaymentRecord, Tenant

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


def _require_non_negative(value: Any, label: str) -> None:
    if value is not None and to_amount(value) < 0:
        raise InvalidEntityStateError(f"{label} must not be negative")


@dataclass
class PortfolioStore:
    """In-memory store for portfolio entities with relationship tracking."""

    # Tables
    properties: dict[str, Property] = field(default_factory=dict)
    tenants: dict[str, Tenant] = field(default_factory=dict)
    leases: dict[str, Lease] = field(default_factory=dict)
    payments: dict[str, PaymentRecord] = field(default_factory=dict)

    # Relationship indexes
    _property_leases: dict[str, list[str]] = field(default_factory=dict)
    _lease_payments: dict[str, list[str]] = field(default_factory=dict)

    _audit: list[AuditEntry] = field(default_factory=list)
    max_workers: int = 8
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    # Validation
    def _validate_property(self, prop: Property) -> None:
        _require_non_negative(prop.acquisition.unit_lot_cost, "Unit/lot cost")
        _require_non_negative(prop.acquisition.fit_out_cost, "Fit-out cost")
        for appraisal in prop.appraisals:
            self._validate_appraisal(appraisal)

    def _validate_appraisal(self, appraisal: Appraisal) -> None:
        _require_non_negative(appraisal.appraised_value, "Appraised value")

    def _validate_lease(self, lease: Lease) -> None:
        if lease.property_id not in self.properties:
            raise ReferentialIntegrityError(f"Property {lease.property_id} not found")
        if lease.tenant_id not in self.tenants:
            raise ReferentialIntegrityError(f"Tenant {lease.tenant_id} not found")
        if lease.end_date < lease.start_date:
            raise InvalidEntityStateError(
                f"Lease end date {lease.end_date} is before start date {lease.start_date}"
            )
        _require_non_negative(lease.monthly_rent, "Monthly rent")
        _require_non_negative(lease.security_deposit, "Security deposit")

    def _get_property(self, property_id: str | None) -> Property:
        if property_id is None or property_id not in self.properties:
            raise EntityNotFoundError(f"Property {property_id} not found")
        return self.properties[property_id]

    # Create / update
    def add_property(self, prop: Property) -> Property:
        """Add a property and return the stored copy with its new id."""
        self._validate_property(prop)
        record = copy.deepcopy(prop)
        record.property_id = _new_id()
        record.created_at = record.created_at or datetime.now()
        with self._lock:
            self.properties[record.property_id] = record
            self._property_leases[record.property_id] = []
        logger.info(
            "Added property %s (%s)",
            record.property_id,
            record.property_name,
            extra={"property_id": record.property_id},
        )
        return copy.deepcopy(record)

    def update_property(self, prop: Property) -> Property:
        """Replace a property record in full."""
        existing = self._get_property(prop.property_id)
        self._validate_property(prop)
        record = copy.deepcopy(prop)
        record.created_at = existing.created_at
        record.updated_at = datetime.now()
        with self._lock:
            self.properties[record.property_id] = record
        logger.info("Updated property %s", record.property_id)
        return copy.deepcopy(record)

    def add_appraisal(self, property_id: str, appraisal: Appraisal) -> Property:
        """Attach an appraisal to a property; returns the updated property."""
        self._validate_appraisal(appraisal)
        with self._lock:
            record = self._get_property(property_id)
            record.appraisals.append(copy.deepcopy(appraisal))
            record.updated_at = datetime.now()
        return copy.deepcopy(record)

    def add_document(self, property_id: str, doc: Documentation) -> Property:
        """Attach a document to a property; returns the updated property."""
        with self._lock:
            record = self._get_property(property_id)
            record.documentation.docs.append(copy.deepcopy(doc))
            record.updated_at = datetime.now()
        logger.info("Added %s document to property %s", doc.name, property_id)
        return copy.deepcopy(record)

    def add_tenant(self, tenant: Tenant) -> Tenant:
        """Add a tenant and return the stored copy with its new id."""
        record = copy.deepcopy(tenant)
        record.tenant_id = _new_id()
        record.created_at = record.created_at or datetime.now()
        with self._lock:
            self.tenants[record.tenant_id] = record
        logger.info("Added tenant %s", record.tenant_id)
        return copy.deepcopy(record)

    def add_lease(self, lease: Lease) -> Lease:
        """Add a lease; property and tenant must exist."""
        self._validate_lease(lease)
        record = copy.deepcopy(lease)
        record.lease_id = _new_id()
        record.created_at = record.created_at or datetime.now()
        with self._lock:
            self.leases[record.lease_id] = record
            self._property_leases.setdefault(record.property_id, []).append(record.lease_id)
            self._lease_payments[record.lease_id] = []
        logger.info(
            "Added lease %s for property %s",
            record.lease_id,
            record.property_id,
            extra={"lease_id": record.lease_id, "property_id": record.property_id},
        )
        return copy.deepcopy(record)

    def _prepare_payment(self, payment: PaymentRecord) -> PaymentRecord:
        if payment.lease_id not in self.leases:
            raise ReferentialIntegrityError(f"Lease {payment.lease_id} not found")
        _require_non_negative(payment.amount, "Payment amount")
        record = copy.deepcopy(payment)
        record.payment_id = _new_id()
        record.created_at = record.created_at or datetime.now()
        return record

    def _commit_payment(self, record: PaymentRecord) -> None:
        self.payments[record.payment_id] = record
        self._lease_payments.setdefault(record.lease_id, []).append(record.payment_id)

    def add_payment(self, payment: PaymentRecord) -> PaymentRecord:
        """Add a payment record; its lease must exist."""
        record = self._prepare_payment(payment)
        with self._lock:
            self._commit_payment(record)
        return copy.deepcopy(record)

    def add_payments_batch(self, drafts: Iterable[PaymentRecord]) -> list[PaymentRecord]:
        """Insert payments concurrently, committing only if all succeed.

        Raises
        ------
        BatchCreateError
            If any insert fails. Nothing from the batch is committed.
        """
        drafts = list(drafts)
        if not drafts:
            return []

        errors: list[PropfolioError] = []
        prepared: list[PaymentRecord] = []
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(drafts))) as pool:
            futures = [pool.submit(self._prepare_payment, draft) for draft in drafts]
            for future in futures:
                try:
                    prepared.append(future.result())
                except PropfolioError as exc:
                    errors.append(exc)

        if errors:
            logger.warning("Payment batch rejected: %d of %d inserts failed", len(errors), len(drafts))
            raise BatchCreateError(
                f"{len(errors)} of {len(drafts)} payment inserts failed",
                failed=len(errors),
                total=len(drafts),
            ) from errors[0]

        with self._lock:
            for record in prepared:
                self._commit_payment(record)
        logger.info("Added %d payments", len(prepared), extra={"count": len(prepared)})
        return [copy.deepcopy(record) for record in prepared]

    def create_lease_with_schedule(
        self,
        lease: Lease,
        config: ScheduleConfig | None = None,
    ) -> tuple[Lease, list[PaymentRecord]]:
        """Create a lease and its monthly PDC payments as one unit.

        The lease is removed again if the payment batch fails.
        """
        created = self.add_lease(lease)
        try:
            payments = self.add_payments_batch(generate_monthly_schedule(created, config))
        except BatchCreateError:
            with self._lock:
                self.leases.pop(created.lease_id, None)
                self._lease_payments.pop(created.lease_id, None)
                self._property_leases[created.property_id].remove(created.lease_id)
            raise
        return created, payments

    # Fetch-all reads
    def fetch_properties(self) -> list[Property]:
        """All properties, newest first."""
        return [copy.deepcopy(p) for p in reversed(list(self.properties.values()))]

    def fetch_tenants(self) -> list[Tenant]:
        return [copy.deepcopy(t) for t in self.tenants.values()]

    def fetch_leases(self) -> list[Lease]:
        return [copy.deepcopy(lease) for lease in self.leases.values()]

    def fetch_payments(self) -> list[PaymentRecord]:
        return [copy.deepcopy(p) for p in self.payments.values()]

    # Query methods
    def get_property(self, property_id: str) -> Property:
        return copy.deepcopy(self._get_property(property_id))

    def get_property_leases(self, property_id: str) -> list[Lease]:
        """Get all leases for a property."""
        lease_ids = self._property_leases.get(property_id, [])
        return [copy.deepcopy(self.leases[lid]) for lid in lease_ids]

    def get_lease_payments(self, lease_id: str) -> list[PaymentRecord]:
        """Get all payments for a lease."""
        payment_ids = self._lease_payments.get(lease_id, [])
        return [copy.deepcopy(self.payments[pid]) for pid in payment_ids]

    # Administrative operations
    def record_audit(self, action: str, actor: str, **details: Any) -> AuditEntry:
        """Append an administrative action to the audit log."""
        entry = AuditEntry(action=action, actor=actor, occurred_at=datetime.now(), details=details)
        self._audit.append(entry)
        logger.info("Audit: %s by %s %s", action, actor, details, extra={"action": action, "actor": actor})
        return entry

    def clear_all(self, *, confirm: bool = False, actor: str) -> AuditEntry:
        """Delete every entity. Requires ``confirm=True``; the audit log is kept."""
        if not confirm:
            raise InvalidEntityStateError("clear_all requires confirm=True")
        removed = self.summary()
        with self._lock:
            self.properties.clear()
            self.tenants.clear()
            self.leases.clear()
            self.payments.clear()
            self._property_leases.clear()
            self._lease_payments.clear()
        return self.record_audit("clear_all", actor, removed=removed)

    def audit_log(self) -> list[AuditEntry]:
        return list(self._audit)

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "properties": len(self.properties),
            "tenants": len(self.tenants),
            "leases": len(self.leases),
            "payments": len(self.payments),
            "appraisals": sum(len(p.appraisals) for p in self.properties.values()),
            "documents": sum(len(p.documentation.docs) for p in self.properties.values()),
        }
