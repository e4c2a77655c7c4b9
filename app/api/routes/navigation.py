from typing import List

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_current_user
from app.schemas.navigation import NavItemOut
from app.services.navigation import build_navigation

router = APIRouter(
    prefix="/navigation",
    tags=["Navigation"],
    dependencies=[Depends(get_current_user)],
)


#Sidebar entries with the active section flagged
@router.get("/", response_model=List[NavItemOut])
def get_navigation(
    active: str = Query("dashboard"),
):
    return build_navigation(active)
