from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import CurrentUser, get_current_user, get_user_datastore
from app.core.supabase_client import DataStoreClient
from app.core.utils import dedupe_by_name, get_initials
from app.schemas.staff import StaffForm, StaffMember, StaffMemberOut
from app.services.audit import log_action

router = APIRouter(
    prefix="/staff",
    tags=["Staff"],
)


AVATAR_COLORS = [
    "bg-rose-100 text-rose-700",
    "bg-sky-100 text-sky-700",
    "bg-amber-100 text-amber-700",
    "bg-emerald-100 text-emerald-700",
    "bg-violet-100 text-violet-700",
]


#List staff by name, one entry per name, avatar colour by position
@router.get("/", response_model=List[StaffMemberOut])
def list_staff(
    datastore: DataStoreClient = Depends(get_user_datastore),
):
    rows = datastore.select("staff", order=["name"])
    members = dedupe_by_name(StaffMember.model_validate(r) for r in rows)

    return [
        StaffMemberOut(
            **member.model_dump(),
            initials=get_initials(member.name),
            avatar_color=AVATAR_COLORS[i % len(AVATAR_COLORS)],
        )
        for i, member in enumerate(members)
    ]


@router.post("/", response_model=dict)
def create_staff_member(
    payload: StaffForm,
    datastore: DataStoreClient = Depends(get_user_datastore),
    user: CurrentUser = Depends(get_current_user),
):
    row = datastore.insert("staff", {**payload.model_dump(), "is_active": True})

    log_action("owner", user.id, "staff.created", f"name={payload.name}")
    return {"success": True, "staff": row}


@router.put("/{staff_id}", response_model=dict)
def update_staff_member(
    staff_id: str,
    payload: StaffForm,
    datastore: DataStoreClient = Depends(get_user_datastore),
    user: CurrentUser = Depends(get_current_user),
):
    rows = datastore.update("staff", payload.model_dump(), match={"id": staff_id})
    if not rows:
        raise HTTPException(404, "Staff member not found")

    log_action("owner", user.id, "staff.updated", f"staff_id={staff_id}")
    return {"success": True, "staff": rows[0]}


#Remove a staff member
@router.delete("/{staff_id}", response_model=dict)
def delete_staff_member(
    staff_id: str,
    datastore: DataStoreClient = Depends(get_user_datastore),
    user: CurrentUser = Depends(get_current_user),
):
    datastore.delete("staff", match={"id": staff_id})

    log_action("owner", user.id, "staff.deleted", f"staff_id={staff_id}")
    return {"success": True}
