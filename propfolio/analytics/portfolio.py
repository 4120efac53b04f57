"""Portfolio aggregator: totals, value change and chart counts."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable

from propfolio.analytics.valuation import current_value, prior_value
from propfolio.models.base import ZERO
from propfolio.models.property import Property

logger = logging.getLogger(__name__)


@dataclass
class PortfolioCounts:
    total: int = 0
    needs_attention: int = 0  # Properties with outstanding documents
    cost_by_type: dict[str, Decimal] = field(default_factory=dict)
    status_counts: dict[str, int] = field(default_factory=dict)


@dataclass
class PortfolioSummary:
    total_cost: Decimal = ZERO
    total_value: Decimal = ZERO
    prior_total: Decimal = ZERO
    value_change_percent: Decimal = ZERO
    counts: PortfolioCounts = field(default_factory=PortfolioCounts)


def value_change_percent(total_value: Decimal, prior_total: Decimal) -> Decimal:
    """Percentage change from ``prior_total``; 0 when there is no prior value."""
    if prior_total > 0:
        return (total_value - prior_total) / prior_total * 100
    return ZERO


def _label(value: object) -> str:
    return str(getattr(value, "value", value))


def aggregate(properties: Iterable[Property]) -> PortfolioSummary:
    """Reduce a property collection to portfolio totals.

    Parameters
    ----------
    properties : Iterable[Property]
        Properties to aggregate, usually already filtered.

    Returns
    -------
    PortfolioSummary
        Totals and counts. An empty collection yields all zeros.
    """
    summary = PortfolioSummary()
    counts = summary.counts

    for prop in properties:
        cost = prop.acquisition.total_cost
        summary.total_cost += cost
        summary.total_value += current_value(prop)
        summary.prior_total += prior_value(prop)

        counts.total += 1
        if prop.documentation.outstanding():
            counts.needs_attention += 1

        type_key = _label(prop.property_type)
        counts.cost_by_type[type_key] = counts.cost_by_type.get(type_key, ZERO) + cost
        status_key = _label(prop.payment.status)
        counts.status_counts[status_key] = counts.status_counts.get(status_key, 0) + 1

    summary.value_change_percent = value_change_percent(summary.total_value, summary.prior_total)
    logger.debug(
        "Aggregated %d properties: cost=%s value=%s",
        counts.total,
        summary.total_cost,
        summary.total_value,
    )
    return summary
