"""Fixed demo portfolio used by the reset-to-demo operation."""

from datetime import date
from decimal import Decimal

from propfolio.models.enums import PaymentStatus, PropertyType, Region
from propfolio.models.property import (
    AcquisitionCost,
    DuesPayment,
    EmbeddedLease,
    Insurance,
    PaymentInfo,
    PossessionStatus,
    Property,
    PropertyManagement,
)


def demo_properties() -> list[Property]:
    """The two showcase properties of the demo portfolio."""
    return [
        Property(
            property_name="Makati Prime Condominium Unit",
            property_type=PropertyType.CONDOMINIUM,
            location=Region.LUZON,
            full_address="123 Ayala Ave, Makati, Metro Manila",
            unit_number="18A",
            area_sqm=85.0,
            original_developer="Ayala Land Premier",
            buyers_name="John Smith",
            acquisition=AcquisitionCost(unit_lot_cost=Decimal("15000000")),
            payment=PaymentInfo(status=PaymentStatus.FULLY_PAID),
            possession=PossessionStatus(
                is_turned_over=True,
                turnover_date=date(2022, 2, 1),
                authorized_recipient="John Smith",
            ),
            insurance=Insurance(
                insurance_company="AXA Philippines",
                amount_insured=Decimal("10000000"),
                coverage_date=date(2024, 1, 1),
            ),
            management=PropertyManagement(
                real_estate_taxes=DuesPayment(last_paid_date=date(2024, 1, 10), amount_paid=Decimal("45000")),
                condo_dues=DuesPayment(last_paid_date=date(2024, 7, 5), amount_paid=Decimal("8500")),
            ),
        ),
        Property(
            property_name="BGC Corporate Office Suite",
            property_type=PropertyType.COMMERCIAL_BUILDING,
            location=Region.LUZON,
            full_address="25th Street, Bonifacio Global City, Taguig",
            unit_number="2405",
            area_sqm=120.0,
            original_developer="Megaworld",
            buyers_name="Tech Solutions Inc.",
            acquisition=AcquisitionCost(
                unit_lot_cost=Decimal("25000000"),
                fit_out_cost=Decimal("3000000"),
            ),
            payment=PaymentInfo(status=PaymentStatus.FULLY_PAID),
            possession=PossessionStatus(
                is_turned_over=True,
                turnover_date=date(2023, 5, 15),
                authorized_recipient="CEO Tech Solutions",
            ),
            insurance=Insurance(insurance_company="Malayan Insurance", amount_insured=Decimal("30000000")),
            management=PropertyManagement(
                real_estate_taxes=DuesPayment(last_paid_date=date(2024, 1, 15), amount_paid=Decimal("65000")),
                condo_dues=DuesPayment(last_paid_date=date(2024, 7, 1), amount_paid=Decimal("12000")),
            ),
            lease=EmbeddedLease(
                lessee="StartUp Hub",
                lease_date=date(2023, 8, 1),
                lease_rate=Decimal("150000"),
                term_in_years=3,
            ),
        ),
    ]
