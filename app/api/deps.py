from dataclasses import dataclass

from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core.config import settings
from app.core.jwt import decode_access_token, InvalidTokenError
from app.core.supabase_client import DataStoreClient, DataStoreError, get_datastore

bearer_scheme = HTTPBearer()


@dataclass
class CurrentUser:
    id: str
    email: str | None
    access_token: str


def get_anon_datastore() -> DataStoreClient:
    return get_datastore()


# =========================
# 🔒 Salon owner auth
# =========================
def get_current_user(
    creds: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    datastore: DataStoreClient = Depends(get_anon_datastore),
) -> CurrentUser:
    token = creds.credentials

    # Verify locally when the project secret is known, otherwise ask GoTrue
    if settings.SUPABASE_JWT_SECRET:
        try:
            payload = decode_access_token(token)
        except InvalidTokenError:
            raise HTTPException(status_code=401, detail="Invalid token")
        user_id = payload.get("sub")
        email = payload.get("email")
    else:
        try:
            user = datastore.for_token(token).get_user()
        except DataStoreError:
            raise HTTPException(status_code=401, detail="Invalid token")
        user_id = user.get("id")
        email = user.get("email")

    if not user_id:
        raise HTTPException(status_code=401, detail="Invalid token")

    return CurrentUser(id=user_id, email=email, access_token=token)


#Backend client acting as the signed-in user, so row-level security applies
def get_user_datastore(
    user: CurrentUser = Depends(get_current_user),
    datastore: DataStoreClient = Depends(get_anon_datastore),
) -> DataStoreClient:
    return datastore.for_token(user.access_token)
