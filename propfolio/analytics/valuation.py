"""Valuation resolver: current, prior and as-of market values."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable

from propfolio.models.base import ZERO, to_amount
from propfolio.models.property import Appraisal, Property


@dataclass
class Appreciation:
    """Portfolio value gained over total acquisition cost."""

    total_cost: Decimal
    total_current_value: Decimal
    amount: Decimal
    percent: Decimal


def _appraisal_key(appraisal: Appraisal) -> date:
    # Undated appraisals rank below every dated one and count as known on any date
    return appraisal.appraisal_date or date.min


def sorted_appraisals(prop: Property) -> list[Appraisal]:
    """Appraisals newest first; equal dates keep their input order."""
    # sorted(reverse=True) is stable for equal keys
    return sorted(prop.appraisals or [], key=_appraisal_key, reverse=True)


def current_value(prop: Property) -> Decimal:
    """Latest appraised value, or acquisition total cost without appraisals."""
    ordered = sorted_appraisals(prop)
    if not ordered:
        return prop.acquisition.total_cost
    return to_amount(ordered[0].appraised_value)


def prior_value(prop: Property) -> Decimal:
    """Second-latest appraised value, or acquisition total cost."""
    ordered = sorted_appraisals(prop)
    if len(ordered) < 2:
        return prop.acquisition.total_cost
    return to_amount(ordered[1].appraised_value)


def value_as_of(prop: Property, when: date) -> Decimal:
    """Value of the latest appraisal dated on or before ``when``.

    Undated appraisals rank as in ``current_value``: below any dated one,
    but known on every date.
    """
    known = [a for a in prop.appraisals or [] if _appraisal_key(a) <= when]
    if not known:
        return prop.acquisition.total_cost
    return to_amount(sorted(known, key=_appraisal_key, reverse=True)[0].appraised_value)


def appreciation(properties: Iterable[Property]) -> Appreciation:
    """Growth of current market value over total acquisition cost."""
    total_cost = ZERO
    total_value = ZERO
    for prop in properties:
        total_cost += prop.acquisition.total_cost
        total_value += current_value(prop)

    amount = total_value - total_cost
    percent = amount / total_cost * 100 if total_cost > 0 else ZERO
    return Appreciation(
        total_cost=total_cost,
        total_current_value=total_value,
        amount=amount,
        percent=percent,
    )
