"""Tests for market value trends and calendar arithmetic."""

from datetime import date
from decimal import Decimal

from conftest import make_property
from propfolio.analytics.periods import add_months, add_years, end_of_year
from propfolio.analytics.trends import appraisal_history, market_value_trend
from propfolio.analytics.valuation import current_value
from propfolio.config import BucketUnit
from propfolio.models import Appraisal, Property


class TestPeriods:
    """Tests for month and year shifting."""

    def test_add_months_across_year(self) -> None:
        assert add_months(date(2023, 11, 15), 3) == date(2024, 2, 15)
        assert add_months(date(2024, 2, 15), -3) == date(2023, 11, 15)

    def test_add_months_clamps_day(self) -> None:
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
        assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)
        assert add_months(date(2024, 1, 31), 2) == date(2024, 3, 31)

    def test_add_years_leap_day(self) -> None:
        assert add_years(date(2024, 2, 29), 1) == date(2025, 2, 28)

    def test_end_of_year(self) -> None:
        assert end_of_year(2023) == date(2023, 12, 31)


class TestMarketValueTrend:
    """Tests for the trailing market value series."""

    def test_monthly_buckets_oldest_first(self, appraised_property: Property) -> None:
        points = market_value_trend([appraised_property], 6, BucketUnit.MONTH, as_of=date(2024, 3, 15))

        assert [p.label for p in points] == [
            "Oct 2023",
            "Nov 2023",
            "Dec 2023",
            "Jan 2024",
            "Feb 2024",
            "Mar 2024",
        ]
        assert [p.value for p in points] == [Decimal("11000000")] * 3 + [Decimal("12000000")] * 3
        assert points[-1].period_end == date(2024, 3, 15)

    def test_yearly_buckets(self, appraised_property: Property) -> None:
        points = market_value_trend([appraised_property], 3, BucketUnit.YEAR, as_of=date(2024, 6, 15))

        assert [p.label for p in points] == ["2022", "2023", "2024"]
        assert [p.value for p in points] == [
            Decimal("10000000"),
            Decimal("11000000"),
            Decimal("12000000"),
        ]

    def test_appraisal_on_bucket_date_counts(self) -> None:
        """An appraisal dated exactly on a bucket date is included in that bucket."""
        prop = make_property(cost="10000000", appraisals=[(date(2024, 6, 15), "12500000")])

        points = market_value_trend([prop], 2, BucketUnit.MONTH, as_of=date(2024, 6, 15))

        assert [p.value for p in points] == [Decimal("10000000"), Decimal("12500000")]

    def test_newest_bucket_matches_current_value_for_undated(self) -> None:
        prop = make_property(cost="10000000")
        prop.appraisals = [Appraisal(appraisal_date=None, appraised_value=Decimal("9000000"))]

        points = market_value_trend([prop], 3, as_of=date(2024, 6, 15))

        assert points[-1].value == current_value(prop) == Decimal("9000000")

    def test_sums_across_properties(self, appraised_property: Property) -> None:
        other = make_property(cost="5000000")

        points = market_value_trend([appraised_property, other], 1, as_of=date(2024, 6, 15))

        assert len(points) == 1
        assert points[0].value == Decimal("17000000")

    def test_empty_portfolio(self) -> None:
        points = market_value_trend([], 6, as_of=date(2024, 6, 15))

        assert len(points) == 6
        assert all(p.value == Decimal("0") for p in points)


class TestAppraisalHistory:
    """Tests for the year-by-year appraisal series."""

    def test_one_point_per_appraisal_year(self, appraised_property: Property) -> None:
        points = appraisal_history([appraised_property])

        assert [p.label for p in points] == ["2023", "2024"]
        assert [p.value for p in points] == [Decimal("11000000"), Decimal("12000000")]
        assert points[0].period_end == date(2023, 12, 31)

    def test_single_property(self, appraised_property: Property) -> None:
        other = make_property(
            cost="1000000",
            appraisals=[(date(2020, 5, 1), "2000000")],
            property_id="prop-other",
        )

        points = appraisal_history([appraised_property, other], property_id="prop-other")

        assert [p.label for p in points] == ["2020"]
        assert points[0].value == Decimal("2000000")

    def test_no_appraisals_gives_current_year(self) -> None:
        points = appraisal_history([make_property(cost="3000000")], as_of=date(2024, 6, 15))

        assert [p.label for p in points] == ["2024"]
        assert points[0].value == Decimal("3000000")
