from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

"""
SERVICES ROUTE SCHEMA
"""


#Form payload used to create or edit a service
class ServiceForm(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str = ""
    duration_minutes: int = Field(default=30, ge=0)
    price: float = Field(default=0, ge=0)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str):
        if not v.strip():
            raise ValueError("Name is required")
        return v.strip()


#Service row as stored by the hosted backend
class Service(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    description: Optional[str] = None
    duration_minutes: int
    price: float
    is_active: bool = True
    salon_id: Optional[str] = None


#Service as shown in the services manager list
class ServiceOut(Service):
    price_label: str
    duration_label: str
