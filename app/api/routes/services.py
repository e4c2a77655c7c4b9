from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import CurrentUser, get_current_user, get_user_datastore
from app.core.supabase_client import DataStoreClient
from app.core.utils import dedupe_by_name, format_duration, format_price
from app.schemas.service import Service, ServiceForm, ServiceOut
from app.services.audit import log_action

router = APIRouter(
    prefix="/services",
    tags=["Services"],
)


"""
SERVICES ROUTES => SALON MENU

Plain create / update / delete against the services table. Name
de-duplication in the listing is cosmetic only.
"""


def _service_out(service: Service) -> ServiceOut:
    return ServiceOut(
        **service.model_dump(),
        price_label=format_price(service.price),
        duration_label=format_duration(service.duration_minutes),
    )


#List services by name, one entry per name
@router.get("/", response_model=List[ServiceOut])
def list_services(
    datastore: DataStoreClient = Depends(get_user_datastore),
):
    rows = datastore.select("services", order=["name"])
    services = dedupe_by_name(Service.model_validate(r) for r in rows)
    return [_service_out(s) for s in services]


#Create a new, active service
@router.post("/", response_model=dict)
def create_service(
    payload: ServiceForm,
    datastore: DataStoreClient = Depends(get_user_datastore),
    user: CurrentUser = Depends(get_current_user),
):
    row = datastore.insert("services", {**payload.model_dump(), "is_active": True})

    log_action("owner", user.id, "service.created", f"name={payload.name}")
    return {"success": True, "service": row}


@router.put("/{service_id}", response_model=dict)
def update_service(
    service_id: str,
    payload: ServiceForm,
    datastore: DataStoreClient = Depends(get_user_datastore),
    user: CurrentUser = Depends(get_current_user),
):
    rows = datastore.update("services", payload.model_dump(), match={"id": service_id})
    if not rows:
        raise HTTPException(404, "Service not found")

    log_action("owner", user.id, "service.updated", f"service_id={service_id}")
    return {"success": True, "service": rows[0]}


@router.delete("/{service_id}", response_model=dict)
def delete_service(
    service_id: str,
    datastore: DataStoreClient = Depends(get_user_datastore),
    user: CurrentUser = Depends(get_current_user),
):
    datastore.delete("services", match={"id": service_id})

    log_action("owner", user.id, "service.deleted", f"service_id={service_id}")
    return {"success": True}
