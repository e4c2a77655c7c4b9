from pydantic import BaseModel, ConfigDict
from typing import Optional

"""
BOOKING SCHEMA
"""


#Booking row as stored by the hosted backend, read-only here
class BookingOut(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    salon_id: Optional[str] = None
    service_id: Optional[str] = None
    staff_id: Optional[str] = None

    booking_date: str
    booking_time: str = ""
    start_time: Optional[str] = None
    end_time: Optional[str] = None

    service_name: Optional[str] = None
    service_duration: Optional[int] = None
    service_price: Optional[float] = None

    customer_name: str = ""
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    notes: Optional[str] = None

    status: str = "pending"
