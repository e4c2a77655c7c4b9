from pydantic import BaseModel
from typing import Dict, List

from app.schemas.booking import BookingOut

"""
CALENDAR ROUTE SCHEMA
"""


#One column of the week view
class CalendarDay(BaseModel):
    date: str
    weekday: str
    label: str
    is_today: bool
    bookings: List[BookingOut]


class CalendarWeekOut(BaseModel):
    week_start: str
    week_end: str
    title: str
    days: List[CalendarDay]
    slots: List[str]
    grid: Dict[str, List[List[BookingOut]]]


#Booking detail plus its status badge style
class BookingDetailOut(BookingOut):
    time_label: str
    status_style: str
