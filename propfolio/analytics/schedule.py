"""Post-dated check (PDC) schedule generation."""

from typing import Iterator

from propfolio.analytics.periods import add_months
from propfolio.config import ScheduleConfig
from propfolio.models.enums import PaymentRecordStatus
from propfolio.models.tenancy import Lease, PaymentRecord


def generate_monthly_schedule(
    lease: Lease,
    config: ScheduleConfig | None = None,
) -> Iterator[PaymentRecord]:
    """Yield one pending rent draft per calendar month of the lease term.

    Month ``k`` falls on ``add_months(start_date, k)``, so the start
    day-of-month is kept and clamped in shorter months (Jan 31 becomes
    Feb 29, then Mar 31). Drafts are produced while the date is on or
    before ``end_date``.

    Parameters
    ----------
    lease : Lease
        Lease providing start/end dates and monthly rent.
    config : ScheduleConfig | None
        Payment type and method stamped on each draft.

    Yields
    ------
    PaymentRecord
        Draft payments without ids; the store assigns them.
    """
    config = config or ScheduleConfig()
    month = 0
    cursor = lease.start_date
    while cursor <= lease.end_date:
        yield PaymentRecord(
            lease_id=lease.lease_id or "",
            payment_date=cursor,
            amount=lease.monthly_rent,
            payment_type=config.payment_type,
            payment_method=config.payment_method,
            status=PaymentRecordStatus.PENDING,
            remarks=f"PDC {month + 1}",
        )
        month += 1
        cursor = add_months(lease.start_date, month)
