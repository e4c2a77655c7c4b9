from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence

from app.core.config import RECENT_BOOKINGS_LIMIT
from app.schemas.booking import BookingOut
from app.schemas.dashboard import DashboardStatsOut, StatCard

"""
DASHBOARD STATISTICS

Counts and revenue over a month of already-fetched bookings.
"""


def month_bounds(today: date) -> tuple[date, date]:
    first = today.replace(day=1)
    next_month = (first + timedelta(days=32)).replace(day=1)
    return first, next_month - timedelta(days=1)


#Monday..Sunday week containing the given day
def week_bounds(today: date) -> tuple[date, date]:
    start = today - timedelta(days=today.weekday())
    return start, start + timedelta(days=6)


def _whole_euros(amount: float) -> int:
    return int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_dashboard_stats(
    bookings: Sequence[BookingOut],
    today: date,
) -> DashboardStatsOut:
    today_str = today.isoformat()
    week_start, week_end = (d.isoformat() for d in week_bounds(today))

    today_bookings = [b for b in bookings if b.booking_date == today_str]
    week_bookings = [
        b for b in bookings if week_start <= b.booking_date <= week_end
    ]
    # Every fetched booking counts towards revenue, whatever its status
    monthly_revenue = sum(b.service_price or 0 for b in bookings)

    stats = [
        StatCard(key="today", label="Today's Appointments", value=str(len(today_bookings))),
        StatCard(key="week", label="This Week", value=str(len(week_bookings))),
        StatCard(key="month", label="Monthly Bookings", value=str(len(bookings))),
        StatCard(key="revenue", label="Monthly Revenue", value=f"€{_whole_euros(monthly_revenue)}"),
    ]

    return DashboardStatsOut(
        today=today_str,
        today_count=len(today_bookings),
        week_count=len(week_bookings),
        month_count=len(bookings),
        monthly_revenue=monthly_revenue,
        stats=stats,
        today_bookings=today_bookings,
        recent_bookings=list(bookings[:RECENT_BOOKINGS_LIMIT]),
    )
