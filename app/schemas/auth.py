from pydantic import BaseModel, EmailStr, Field
from typing import Optional

from app.core.config import MIN_PASSWORD_LENGTH

"""
AUTH ROUTE SCHEMA
"""


#Email + password submitted by the login and signup forms
class Credentials(BaseModel):
    email: EmailStr
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)


#Session returned after a successful login or signup
class SessionOut(BaseModel):
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    token_type: str = "bearer"
    user: Optional[dict] = None
    redirect: str = "/admin"


#Response returned after signing out
class LogoutOut(BaseModel):
    success: bool = True
    redirect: str = "/admin/login"
