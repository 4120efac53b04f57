"""Financial summary engine: income, expenses, NOI and ROI."""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable

from propfolio.analytics.documents import upcoming_due_documents
from propfolio.analytics.portfolio import aggregate
from propfolio.config import IncomeConfig, IncomeSource, PortfolioConfig
from propfolio.models.base import ZERO, to_amount
from propfolio.models.enums import LeaseStatus, PaymentRecordStatus
from propfolio.models.property import Property
from propfolio.models.tenancy import Lease, PaymentRecord

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
RENT = "Rent"


@dataclass
class FinancialSummary:
    total_acquisition_cost: Decimal = ZERO
    total_market_value: Decimal = ZERO
    annualized_gross_income: Decimal = ZERO
    total_collected_income: Decimal = ZERO
    annualized_expenses: Decimal = ZERO
    net_operating_income: Decimal = ZERO
    roi: Decimal = ZERO
    pending_payments: Decimal = ZERO
    value_change_percentage: Decimal = ZERO
    upcoming_due_dates: int = 0


def annualized_expenses(prop: Property) -> Decimal:
    """Caretaker and condo dues are monthly; real estate tax is annual."""
    management = prop.management
    if management is None:
        return ZERO
    caretaker = to_amount(management.caretaker_rate_per_month) * MONTHS_PER_YEAR
    dues = ZERO
    if management.condo_dues is not None:
        dues = to_amount(management.condo_dues.amount_paid) * MONTHS_PER_YEAR
    taxes = ZERO
    if management.real_estate_taxes is not None:
        taxes = to_amount(management.real_estate_taxes.amount_paid)
    return caretaker + dues + taxes


def _embedded_income(prop: Property) -> Decimal:
    if prop.lease is None:
        return ZERO
    return to_amount(prop.lease.lease_rate) * MONTHS_PER_YEAR


def _active_leases_by_property(leases: Iterable[Lease]) -> dict[str, list[Lease]]:
    index: dict[str, list[Lease]] = {}
    for lease in leases:
        if lease.status == LeaseStatus.ACTIVE:
            index.setdefault(lease.property_id, []).append(lease)
    return index


def annualized_gross_income(
    properties: list[Property],
    leases: Iterable[Lease] = (),
    source: IncomeSource = IncomeSource.EMBEDDED,
) -> Decimal:
    """Yearly rent roll from the configured lease shape."""
    if source == IncomeSource.EMBEDDED:
        return sum((_embedded_income(p) for p in properties), ZERO)

    active = _active_leases_by_property(leases)
    total = ZERO
    for prop in properties:
        standalone = active.get(prop.property_id, []) if prop.property_id else []
        if standalone:
            total += sum((to_amount(lease.monthly_rent) for lease in standalone), ZERO) * MONTHS_PER_YEAR
        elif source == IncomeSource.PREFER_STANDALONE:
            total += _embedded_income(prop)
    return total


def _scoped_payments(
    payments: Iterable[PaymentRecord],
    properties: list[Property],
    leases: Iterable[Lease],
) -> list[PaymentRecord]:
    property_ids = {p.property_id for p in properties if p.property_id}
    lease_ids = {lease.lease_id for lease in leases if lease.property_id in property_ids}
    return [p for p in payments if p.lease_id in lease_ids]


def summarize(
    properties: Iterable[Property],
    payments: Iterable[PaymentRecord],
    leases: Iterable[Lease] | None = None,
    config: PortfolioConfig | None = None,
    as_of: date | None = None,
) -> FinancialSummary:
    """Combine property aggregates with payments into a financial summary.

    Parameters
    ----------
    properties : Iterable[Property]
        Property set, usually the output of ``filter_properties``.
    payments : Iterable[PaymentRecord]
        Payment records. By default the full collection is used, even
        when ``properties`` is filtered.
    leases : Iterable[Lease] | None
        Standalone leases; needed for standalone income and for
        property-scoped payment sums.
    config : PortfolioConfig | None
        Income source, payment scoping and due-date window.
    as_of : date | None
        Reference date for upcoming due documents (default: today).

    Returns
    -------
    FinancialSummary
        Derived metrics. Every division is guarded.
    """
    config = config or PortfolioConfig()
    income: IncomeConfig = config.income
    props = list(properties)
    lease_list = list(leases or [])
    payment_list = list(payments)
    if income.scope_payments_to_properties:
        if leases is None:
            logger.warning("Payment scoping is on but no leases were given; collected and pending will be 0")
        payment_list = _scoped_payments(payment_list, props, lease_list)

    portfolio = aggregate(props)

    gross = annualized_gross_income(props, lease_list, income.source)
    expenses = sum((annualized_expenses(p) for p in props), ZERO)
    noi = gross - expenses
    total_cost = portfolio.total_cost
    roi = noi / total_cost * 100 if total_cost > 0 else ZERO

    collected = sum(
        (
            to_amount(p.amount)
            for p in payment_list
            if p.status == PaymentRecordStatus.COMPLETED and p.payment_type == RENT
        ),
        ZERO,
    )
    pending = sum(
        (to_amount(p.amount) for p in payment_list if p.status == PaymentRecordStatus.PENDING),
        ZERO,
    )

    due = upcoming_due_documents(props, window_days=config.due_window_days, as_of=as_of)

    logger.debug("Summarized %d properties, %d payments", len(props), len(payment_list))
    return FinancialSummary(
        total_acquisition_cost=total_cost,
        total_market_value=portfolio.total_value,
        annualized_gross_income=gross,
        total_collected_income=collected,
        annualized_expenses=expenses,
        net_operating_income=noi,
        roi=roi,
        pending_payments=pending,
        value_change_percentage=portfolio.value_change_percent,
        upcoming_due_dates=len(due),
    )
