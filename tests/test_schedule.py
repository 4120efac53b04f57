"""Tests for PDC schedule generation."""

from datetime import date
from decimal import Decimal

from propfolio.analytics.schedule import generate_monthly_schedule
from propfolio.config import ScheduleConfig
from propfolio.models import Lease, PaymentRecordStatus


def _lease(start: date, end: date, rent: str = "10000") -> Lease:
    return Lease(
        property_id="prop-1",
        tenant_id="tenant-1",
        start_date=start,
        end_date=end,
        monthly_rent=Decimal(rent),
        lease_id="lease-1",
    )


class TestGenerateMonthlySchedule:
    """Tests for generate_monthly_schedule."""

    def test_one_draft_per_month_inclusive(self) -> None:
        drafts = list(generate_monthly_schedule(_lease(date(2024, 1, 1), date(2024, 6, 1))))

        assert len(drafts) == 6
        assert [d.payment_date for d in drafts] == [date(2024, m, 1) for m in range(1, 7)]
        assert all(d.amount == Decimal("10000") for d in drafts)
        assert all(d.status == PaymentRecordStatus.PENDING for d in drafts)
        assert all(d.lease_id == "lease-1" for d in drafts)
        assert all(d.payment_id is None for d in drafts)

    def test_default_type_and_method(self) -> None:
        draft = next(generate_monthly_schedule(_lease(date(2024, 1, 1), date(2024, 1, 1))))

        assert draft.payment_type == "Rent"
        assert draft.payment_method == "Check"
        assert draft.remarks == "PDC 1"

    def test_custom_config(self) -> None:
        config = ScheduleConfig(payment_type="Rent", payment_method="Bank Transfer")

        drafts = list(generate_monthly_schedule(_lease(date(2024, 1, 1), date(2024, 2, 1)), config))

        assert all(d.payment_method == "Bank Transfer" for d in drafts)

    def test_month_end_start_is_clamped_not_chained(self) -> None:
        """Jan 31 gives Feb 29, then back to Mar 31."""
        drafts = list(generate_monthly_schedule(_lease(date(2024, 1, 31), date(2024, 4, 30))))

        assert [d.payment_date for d in drafts] == [
            date(2024, 1, 31),
            date(2024, 2, 29),
            date(2024, 3, 31),
            date(2024, 4, 30),
        ]

    def test_end_mid_month_excludes_later_date(self) -> None:
        drafts = list(generate_monthly_schedule(_lease(date(2024, 1, 15), date(2024, 3, 14))))

        assert len(drafts) == 2

    def test_end_before_start_yields_nothing(self) -> None:
        assert list(generate_monthly_schedule(_lease(date(2024, 5, 1), date(2024, 4, 1)))) == []
