"""Generators for synthetic property portfolios."""

import random
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterator

from propfolio.analytics.periods import add_months
from propfolio.generators.base import BaseGenerator
from propfolio.models.enums import (
    DocumentPriority,
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
    PaymentInfo,
    Property,
    PropertyManagement,
)
from propfolio.models.tenancy import Lease, PaymentRecord, Tenant

CONDO_TYPES = (PropertyType.CONDOMINIUM, PropertyType.CONDOTEL, PropertyType.COMMERCIAL_BUILDING)

DOCUMENT_STATUSES = ["Available (Original)", "Available (Copy)", "Missing Original", "For Submission"]
DOCUMENT_STATUS_WEIGHTS = [0.50, 0.25, 0.15, 0.10]


class PropertyGenerator(BaseGenerator):
    """Generate synthetic properties with management costs and documents."""

    PROPERTY_TYPES = list(PropertyType)
    REGION_WEIGHTS = {Region.LUZON: 0.6, Region.VISAYAS: 0.25, Region.MINDANAO: 0.15}

    # Unit/lot cost range by type, in thousands of PHP
    COST_RANGES = {
        PropertyType.CONDOMINIUM: (3000, 25000),
        PropertyType.CONDOTEL: (4000, 20000),
        PropertyType.COMMERCIAL_BUILDING: (15000, 80000),
        PropertyType.HOUSE_AND_LOT: (5000, 40000),
        PropertyType.WAREHOUSE_AND_LOT: (10000, 60000),
    }
    DEFAULT_COST_RANGE = (1000, 15000)

    def generate(self) -> Property:
        """Generate a property.

        Returns
        -------
        Property
            Generated property without an id.
        """
        property_type = random.choice(self.PROPERTY_TYPES)
        low, high = self.COST_RANGES.get(property_type, self.DEFAULT_COST_RANGE)
        unit_lot_cost = self.amount(low, high, 1000)
        fit_out = self.amount(0, 30, 100000) if property_type in CONDO_TYPES else None
        area = round(random.uniform(30, 500), 1)
        region = random.choices(list(self.REGION_WEIGHTS), weights=list(self.REGION_WEIGHTS.values()), k=1)[0]

        return Property(
            property_name=f"{self.fake.last_name()} {property_type.value}",
            property_type=property_type,
            location=region,
            full_address=self.fake.address().replace("\n", ", "),
            acquisition=AcquisitionCost(
                unit_lot_cost=unit_lot_cost,
                fit_out_cost=fit_out,
                cost_per_sqm=(unit_lot_cost / Decimal(str(area))).quantize(Decimal("0.01")),
            ),
            payment=PaymentInfo(status=random.choice(list(PaymentStatus))),
            management=self._generate_management(property_type, unit_lot_cost),
            documentation=DocumentationStatus(docs=self._generate_documents(property_type)),
            area_sqm=area,
            original_developer=self.fake.company(),
            buyers_name=self.fake.name(),
        )

    def generate_batch(self, count: int) -> Iterator[Property]:
        """Generate multiple properties.

        Yields
        ------
        Property
            Generated properties.
        """
        for _ in range(count):
            yield self.generate()

    def generate_embedded_lease(self, prop: Property, start: date | None = None) -> EmbeddedLease:
        """Legacy lease-on-property terms at roughly 0.4-0.8% of cost per month."""
        rate = self.scaled(prop.acquisition.total_cost, 0.004, 0.008)
        return EmbeddedLease(
            lessee=self.fake.company(),
            lease_date=start or date.today() - timedelta(days=random.randint(30, 720)),
            lease_rate=rate,
            term_in_years=random.choice([1, 2, 3, 5]),
            referring_broker=self.fake.name(),
            broker_contact=self.fake.phone_number(),
        )

    def _generate_management(self, property_type: PropertyType, cost: Decimal) -> PropertyManagement:
        taxes = DuesPayment(
            last_paid_date=date(date.today().year, 1, random.randint(5, 31)),
            amount_paid=(cost * Decimal("0.003")).quantize(Decimal("1")),
        )
        condo_dues = None
        if property_type in CONDO_TYPES:
            condo_dues = DuesPayment(
                last_paid_date=date.today().replace(day=1),
                amount_paid=self.amount(30, 150, 100),
            )
        caretaker_rate = None
        caretaker_name = None
        if property_type not in CONDO_TYPES and random.random() < 0.5:
            caretaker_name = self.fake.name()
            caretaker_rate = self.amount(8, 20, 500)
        return PropertyManagement(
            caretaker_name=caretaker_name,
            caretaker_rate_per_month=caretaker_rate,
            real_estate_taxes=taxes,
            condo_dues=condo_dues,
        )

    def _generate_documents(self, property_type: PropertyType) -> list[Documentation]:
        title = DocumentType.CCT if property_type in CONDO_TYPES else DocumentType.TCT
        docs = []
        for doc_type in (title, DocumentType.TD, DocumentType.DOAS):
            status = random.choices(DOCUMENT_STATUSES, weights=DOCUMENT_STATUS_WEIGHTS, k=1)[0]
            due = None
            if "Missing" in status or "Submission" in status:
                due = date.today() + timedelta(days=random.randint(-10, 90))
            docs.append(
                Documentation(
                    document_type=doc_type,
                    status=status,
                    priority=random.choice(list(DocumentPriority)),
                    due_date=due,
                    document_url=f"documents/{self.fake.uuid4()}.pdf",
                )
            )
        return docs


class AppraisalGenerator(BaseGenerator):
    """Generate an appraisal history drifting from the acquisition cost."""

    def generate_history(
        self,
        prop: Property,
        count: int,
        start: date | None = None,
        annual_growth: tuple[float, float] = (-0.02, 0.10),
    ) -> list[Appraisal]:
        """Generate ``count`` yearly appraisals, oldest first.

        Parameters
        ----------
        prop : Property
            Property being appraised.
        count : int
            Number of appraisals.
        start : date | None
            Date of the first appraisal (default: ``count`` years ago).
        annual_growth : tuple[float, float]
            Range of year-over-year value change.
        """
        first = start or add_months(date.today(), -12 * count)
        value = prop.acquisition.total_cost
        history = []
        for year in range(count):
            value = self.scaled(value, 1 + annual_growth[0], 1 + annual_growth[1])
            history.append(
                Appraisal(
                    appraisal_date=add_months(first, 12 * year),
                    appraised_value=value,
                    appraisal_company=self.fake.company(),
                    report_url=f"appraisals/{self.fake.uuid4()}.pdf",
                )
            )
        return history


class TenantGenerator(BaseGenerator):
    """Generate synthetic tenants."""

    def generate(self) -> Tenant:
        return Tenant(
            name=self.fake.name(),
            email=self.fake.email(),
            phone=self.fake.phone_number(),
            occupation=self.fake.job(),
            status=TenantStatus.ACTIVE,
        )


class LeaseGenerator(BaseGenerator):
    """Generate standalone leases for stored properties and tenants."""

    def generate(
        self,
        prop: Property,
        tenant_id: str,
        start: date | None = None,
        term_months: int | None = None,
    ) -> Lease:
        """Generate a lease starting on the first of a recent month."""
        if start is None:
            start = add_months(date.today().replace(day=1), -random.randint(0, 11))
        term = term_months or random.choice([6, 12, 24])
        rent = self.scaled(prop.acquisition.total_cost, 0.004, 0.008)
        return Lease(
            property_id=prop.property_id or "",
            tenant_id=tenant_id,
            start_date=start,
            end_date=add_months(start, term - 1),
            monthly_rent=rent,
            security_deposit=rent * 2,
            status=LeaseStatus.ACTIVE,
        )


class PaymentBehavior:
    """Simulate rent collection on already-scheduled PDCs."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is not None:
            random.seed(seed)

    def settle(
        self,
        payments: list[PaymentRecord],
        collection_rate: float = 0.9,
        reference_date: date | None = None,
    ) -> list[PaymentRecord]:
        """Mark due PDCs completed (or failed when a check bounces).

        Future-dated payments stay pending.
        """
        if reference_date is None:
            reference_date = date.today()
        for payment in payments:
            if payment.payment_date > reference_date:
                continue
            if random.random() < collection_rate:
                payment.status = PaymentRecordStatus.COMPLETED
                payment.reference_number = f"CHK-{random.randint(100000, 999999)}"
            else:
                payment.status = PaymentRecordStatus.FAILED
                payment.remarks = "Returned check"
        return payments
