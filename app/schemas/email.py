from pydantic import BaseModel
from typing import Any, Dict, Optional

"""
EMAIL ROUTE SCHEMA
"""


#Payload accepted by the send endpoint, required fields checked in the route
class EmailSendRequest(BaseModel):
    to: Optional[str] = None
    template: Optional[str] = None
    data: Optional[Dict[str, Any]] = None


class EmailSendOut(BaseModel):
    success: bool = True
    id: Optional[str] = None


class EmailHealthChecks(BaseModel):
    emailApiKey: bool
    emailFrom: bool


class EmailHealthOut(BaseModel):
    status: str
    timestamp: str
    checks: EmailHealthChecks
