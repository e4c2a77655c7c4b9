from datetime import date, timedelta
from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.deps import get_current_user, get_user_datastore
from app.core.supabase_client import DataStoreClient
from app.core.utils import format_time
from app.schemas.booking import BookingOut
from app.schemas.calendar import BookingDetailOut, CalendarWeekOut
from app.services.calendar import build_week_grid, shift_week, status_style, week_start

router = APIRouter(
    prefix="/calendar",
    tags=["Calendar"],
    dependencies=[Depends(get_current_user)],
)


"""
CALENDAR ROUTES => WEEK VIEW

Bookings are read-only here; the calendar only groups them for display.
"""


#Week grid for the week containing `date`, optionally moved by one week
@router.get("/week", response_model=CalendarWeekOut)
def get_week(
    day: Optional[date] = Query(None, alias="date"),
    move: Optional[Literal["prev", "next", "today"]] = Query(None),
    datastore: DataStoreClient = Depends(get_user_datastore),
):
    today = date.today()
    current = shift_week(day or today, move, today)
    start = week_start(current)

    rows = datastore.select(
        "bookings",
        filters=[
            ("booking_date", "gte", start.isoformat()),
            ("booking_date", "lte", (start + timedelta(days=6)).isoformat()),
        ],
        order=["booking_time"],
    )

    bookings = [BookingOut.model_validate(r) for r in rows]
    return build_week_grid(bookings, current, today)


#Single booking for the detail modal
@router.get("/bookings/{booking_id}", response_model=BookingDetailOut)
def get_booking(
    booking_id: str,
    datastore: DataStoreClient = Depends(get_user_datastore),
):
    rows = datastore.select("bookings", filters=[("id", "eq", booking_id)])
    if not rows:
        raise HTTPException(404, "Booking not found")

    booking = BookingOut.model_validate(rows[0])
    return BookingDetailOut(
        **booking.model_dump(),
        time_label=format_time(booking.booking_time),
        status_style=status_style(booking.status),
    )
