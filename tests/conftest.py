"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal

import pytest

from propfolio.models import (
    AcquisitionCost,
    Appraisal,
    DuesPayment,
    EmbeddedLease,
    PaymentInfo,
    PaymentStatus,
    Property,
    PropertyManagement,
    PropertyType,
    Region,
)


def make_property(
    name: str = "Test Property",
    cost: str = "10000000",
    fit_out: str | None = None,
    appraisals: list[tuple[date, str]] | None = None,
    property_type: PropertyType = PropertyType.CONDOMINIUM,
    location: Region = Region.LUZON,
    status: PaymentStatus = PaymentStatus.FULLY_PAID,
    lease_rate: str | None = None,
    address: str = "1 Test Street, Makati",
    property_id: str | None = None,
) -> Property:
    """Build a property with only the fields a test cares about."""
    return Property(
        property_name=name,
        property_type=property_type,
        location=location,
        full_address=address,
        acquisition=AcquisitionCost(
            unit_lot_cost=Decimal(cost),
            fit_out_cost=Decimal(fit_out) if fit_out is not None else None,
        ),
        payment=PaymentInfo(status=status),
        appraisals=[
            Appraisal(appraisal_date=d, appraised_value=Decimal(v), appraisal_company="Appraiser")
            for d, v in appraisals or []
        ],
        lease=EmbeddedLease(lessee="Lessee Co", lease_rate=Decimal(lease_rate)) if lease_rate else None,
        property_id=property_id,
    )


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def as_of() -> date:
    """Fixed reference date."""
    return date(2024, 6, 15)


@pytest.fixture
def appraised_property() -> Property:
    """Property with two appraisals, 11M then 12M."""
    return make_property(
        cost="10000000",
        appraisals=[(date(2023, 1, 1), "11000000"), (date(2024, 1, 1), "12000000")],
        property_id="prop-001",
    )


@pytest.fixture
def managed_property() -> Property:
    """Unleased property with caretaker, condo dues and taxes."""
    prop = make_property(property_id="prop-002")
    prop.management = PropertyManagement(
        caretaker_rate_per_month=Decimal("5000"),
        real_estate_taxes=DuesPayment(amount_paid=Decimal("20000")),
        condo_dues=DuesPayment(amount_paid=Decimal("2000")),
    )
    return prop
