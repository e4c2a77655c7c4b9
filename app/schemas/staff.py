from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

"""
STAFF ROUTE SCHEMA
"""


#Form payload used to create or edit a staff member
class StaffForm(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = ""

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str):
        if not v.strip():
            raise ValueError("Name is required")
        return v.strip()


#Staff row as stored by the hosted backend
class StaffMember(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    is_active: bool = True
    salon_id: Optional[str] = None


#Staff member as shown in the staff manager list
class StaffMemberOut(StaffMember):
    initials: str
    avatar_color: str
