from pydantic import BaseModel
from typing import List

from app.schemas.booking import BookingOut

"""
DASHBOARD ROUTE SCHEMA
"""


#Single labelled stat card
class StatCard(BaseModel):
    key: str
    label: str
    value: str


class DashboardStatsOut(BaseModel):
    today: str
    today_count: int
    week_count: int
    month_count: int
    monthly_revenue: float
    stats: List[StatCard]
    today_bookings: List[BookingOut]
    recent_bookings: List[BookingOut]
