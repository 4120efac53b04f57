"""Filter engine for the property collection."""

from dataclasses import dataclass
from typing import Iterable

from propfolio.models.enums import PaymentStatus, PropertyType, Region
from propfolio.models.property import Property

ALL = "all"
LEASED = "leased"
VACANT = "vacant"


@dataclass
class FilterCriteria:
    """Property filters; empty, ``None`` or ``"all"`` disables a criterion."""

    search: str = ""
    property_type: PropertyType | str | None = ALL
    region: Region | str | None = ALL
    payment_status: PaymentStatus | str | None = ALL
    lease_status: str | None = ALL  # "leased" | "vacant" | "all"


def _is_set(value: object) -> bool:
    return value is not None and value != "" and value != ALL


def _text(value: object) -> str:
    return str(getattr(value, "value", value) or "").lower()


def matches(prop: Property, criteria: FilterCriteria) -> bool:
    """Whether ``prop`` satisfies every active criterion."""
    if criteria.search:
        needle = criteria.search.lower()
        haystacks = (prop.property_name, prop.full_address, prop.location)
        if not any(needle in _text(h) for h in haystacks):
            return False
    if _is_set(criteria.property_type) and prop.property_type != criteria.property_type:
        return False
    if _is_set(criteria.region) and prop.location != criteria.region:
        return False
    if _is_set(criteria.payment_status) and prop.payment.status != criteria.payment_status:
        return False
    if _is_set(criteria.lease_status):
        if criteria.lease_status == LEASED and prop.lease is None:
            return False
        if criteria.lease_status == VACANT and prop.lease is not None:
            return False
    return True


def filter_properties(
    properties: Iterable[Property],
    criteria: FilterCriteria | None = None,
) -> list[Property]:
    """Stable subsequence of ``properties`` matching ``criteria``."""
    if criteria is None:
        return list(properties)
    return [p for p in properties if matches(p, criteria)]
