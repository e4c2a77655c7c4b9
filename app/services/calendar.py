from datetime import date, timedelta
from typing import Literal, Sequence

from app.core.config import (
    CALENDAR_FIRST_HOUR,
    CALENDAR_LAST_HOUR,
    CALENDAR_SLOT_COUNT,
)
from app.schemas.booking import BookingOut
from app.schemas.calendar import CalendarDay, CalendarWeekOut

"""
CALENDAR VIEW

Buckets a week of fetched bookings into a day x half-hour grid. Purely a
display transform: overlapping bookings simply share a cell.
"""


STATUS_STYLES = {
    "pending": "bg-yellow-100 border-yellow-200 text-yellow-800",
    "confirmed": "bg-blue-100 border-blue-200 text-blue-800",
    "completed": "bg-green-100 border-green-200 text-green-800",
    "cancelled": "bg-red-100 border-red-200 text-red-800",
}


def status_style(status: str) -> str:
    return STATUS_STYLES.get(status, STATUS_STYLES["pending"])


def week_start(day: date) -> date:
    return day - timedelta(days=day.weekday())


def week_days(day: date) -> list[date]:
    start = week_start(day)
    return [start + timedelta(days=i) for i in range(7)]


def time_slots() -> list[str]:
    slots = []
    for i in range(CALENDAR_SLOT_COUNT):
        hour = i // 2 + CALENDAR_FIRST_HOUR
        minute = "00" if i % 2 == 0 else "30"
        if CALENDAR_FIRST_HOUR <= hour <= CALENDAR_LAST_HOUR:
            slots.append(f"{hour:02d}:{minute}")
    return slots


#Bookings on a day whose start time falls in the given slot label
def bookings_for_slot(
    bookings: Sequence[BookingOut],
    day: date,
    slot: str,
) -> list[BookingOut]:
    day_str = day.isoformat()
    return [
        b for b in bookings
        if b.booking_date == day_str and b.booking_time.startswith(slot)
    ]


def shift_week(day: date, move: Literal["prev", "next", "today"] | None, today: date) -> date:
    if move == "prev":
        return day - timedelta(days=7)
    if move == "next":
        return day + timedelta(days=7)
    if move == "today":
        return today
    return day


def week_title(day: date) -> str:
    start = week_start(day)
    end = start + timedelta(days=6)
    return f"{start:%B} {start.day} - {end:%B} {end.day}, {end.year}"


def build_week_grid(
    bookings: Sequence[BookingOut],
    day: date,
    today: date,
) -> CalendarWeekOut:
    days = week_days(day)
    slots = time_slots()

    columns = [
        CalendarDay(
            date=d.isoformat(),
            weekday=f"{d:%a}",
            label=f"{d:%B} {d.day}",
            is_today=d == today,
            bookings=[b for b in bookings if b.booking_date == d.isoformat()],
        )
        for d in days
    ]

    grid = {
        slot: [bookings_for_slot(bookings, d, slot) for d in days]
        for slot in slots
    }

    return CalendarWeekOut(
        week_start=days[0].isoformat(),
        week_end=days[-1].isoformat(),
        title=week_title(day),
        days=columns,
        slots=slots,
        grid=grid,
    )
