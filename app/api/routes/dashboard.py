from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_current_user, get_user_datastore
from app.core.supabase_client import DataStoreClient
from app.schemas.booking import BookingOut
from app.schemas.dashboard import DashboardStatsOut
from app.services.stats import compute_dashboard_stats, month_bounds

router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"],
    dependencies=[Depends(get_current_user)],
)


#Headline counts and revenue for the month containing `today`
@router.get("/stats", response_model=DashboardStatsOut)
def get_stats(
    today: Optional[date] = Query(None),
    datastore: DataStoreClient = Depends(get_user_datastore),
):
    today = today or date.today()
    month_start, month_end = month_bounds(today)

    rows = datastore.select(
        "bookings",
        filters=[
            ("booking_date", "gte", month_start.isoformat()),
            ("booking_date", "lte", month_end.isoformat()),
        ],
        order=["booking_date", "booking_time"],
    )

    bookings = [BookingOut.model_validate(r) for r in rows]
    return compute_dashboard_stats(bookings, today)
