from fastapi import APIRouter, Depends, HTTPException, Request

from app.api.deps import CurrentUser, get_anon_datastore, get_current_user
from app.core.config import RATE_LIMITS
from app.core.rate_limit import make_key, rate_limit
from app.core.supabase_client import DataStoreClient, DataStoreError
from app.schemas.auth import Credentials, LogoutOut, SessionOut
from app.services.audit import log_action
from app.services.navigation import LOGIN_PATH

router = APIRouter(prefix="/auth", tags=["Auth"])

"""
AUTH ROUTES => LOGIN, SIGNUP, LOGOUT

Sessions are issued and revoked by the hosted identity provider; these
routes only forward credentials and pass its errors back to the form.
"""


def _check_rate_limit(request: Request, endpoint: str, email: str):
    limit, window = RATE_LIMITS[endpoint]
    if not rate_limit(make_key(request, endpoint, email), limit, window):
        raise HTTPException(status_code=429, detail="Too many attempts")


def _session_out(result: dict) -> SessionOut:
    # Signup without a session (email confirmation pending) returns the bare user
    user = result.get("user")
    if user is None and "access_token" not in result:
        user = result or None

    return SessionOut(
        access_token=result.get("access_token"),
        refresh_token=result.get("refresh_token"),
        user=user,
    )


#Sign in with email + password
@router.post("/login", response_model=SessionOut)
def login(
    payload: Credentials,
    request: Request,
    datastore: DataStoreClient = Depends(get_anon_datastore),
):
    email = payload.email.strip().lower()
    _check_rate_limit(request, "login", email)

    try:
        result = datastore.sign_in_with_password(email, payload.password)
    except DataStoreError as e:
        log_action("owner", None, "auth.login_failed", f"email={email}")
        raise HTTPException(status_code=400, detail=e.message or "Authentication failed")

    session = _session_out(result)
    log_action("owner", (session.user or {}).get("id"), "auth.login_success")
    return session


#Create a salon owner account
@router.post("/signup", response_model=SessionOut)
def signup(
    payload: Credentials,
    request: Request,
    datastore: DataStoreClient = Depends(get_anon_datastore),
):
    email = payload.email.strip().lower()
    _check_rate_limit(request, "signup", email)

    try:
        result = datastore.sign_up(email, payload.password)
    except DataStoreError as e:
        raise HTTPException(status_code=400, detail=e.message or "Authentication failed")

    session = _session_out(result)
    log_action("owner", (session.user or {}).get("id"), "auth.signup")
    return session


#Revoke the current session and send the browser back to the login page
@router.post("/logout", response_model=LogoutOut)
def logout(
    user: CurrentUser = Depends(get_current_user),
    datastore: DataStoreClient = Depends(get_anon_datastore),
):
    datastore.for_token(user.access_token).sign_out()
    log_action("owner", user.id, "auth.logout")
    return LogoutOut(redirect=LOGIN_PATH)
