"""Time-series builder for portfolio market value."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable

from propfolio.analytics.periods import add_months, add_years, end_of_year
from propfolio.analytics.valuation import value_as_of
from propfolio.config import BucketUnit
from propfolio.models.base import ZERO
from propfolio.models.property import Property

LABEL_FORMATS = {
    BucketUnit.MONTH: "%b %Y",
    BucketUnit.YEAR: "%Y",
}


@dataclass
class TrendPoint:
    label: str
    period_end: date
    value: Decimal


def _portfolio_value(properties: list[Property], when: date) -> Decimal:
    return sum((value_as_of(p, when) for p in properties), ZERO)


def _bucket_date(as_of: date, steps_back: int, unit: BucketUnit) -> date:
    if unit == BucketUnit.YEAR:
        return add_years(as_of, -steps_back)
    return add_months(as_of, -steps_back)


def market_value_trend(
    properties: Iterable[Property],
    bucket_count: int = 6,
    bucket_unit: BucketUnit = BucketUnit.MONTH,
    as_of: date | None = None,
) -> list[TrendPoint]:
    """Portfolio market value over trailing months or years.

    Walks back ``bucket_count - 1`` steps from ``as_of`` (inclusive) and,
    for each bucket date, sums every property's latest appraisal known
    on that date, falling back to acquisition cost.

    Parameters
    ----------
    properties : Iterable[Property]
        Property set to value.
    bucket_count : int
        Number of buckets to produce.
    bucket_unit : BucketUnit
        Month or year granularity.
    as_of : date | None
        Newest bucket date (default: today).

    Returns
    -------
    list[TrendPoint]
        Points ordered oldest to newest.
    """
    today = as_of or date.today()
    unit = BucketUnit(bucket_unit)
    props = list(properties)
    points = []
    for steps_back in range(max(bucket_count, 0) - 1, -1, -1):
        when = _bucket_date(today, steps_back, unit)
        points.append(
            TrendPoint(
                label=when.strftime(LABEL_FORMATS[unit]),
                period_end=when,
                value=_portfolio_value(props, when),
            )
        )
    return points


def appraisal_history(
    properties: Iterable[Property],
    property_id: str | None = None,
    as_of: date | None = None,
) -> list[TrendPoint]:
    """Year-by-year value across every year that has an appraisal.

    Each year is valued at 31 December. Without any appraisals the
    series holds the current year only.
    """
    props = [p for p in properties if property_id is None or p.property_id == property_id]
    years = sorted({a.appraisal_date.year for p in props for a in p.appraisals if a.appraisal_date})
    if not years:
        years = [(as_of or date.today()).year]
    return [
        TrendPoint(label=str(year), period_end=end_of_year(year), value=_portfolio_value(props, end_of_year(year)))
        for year in years
    ]
