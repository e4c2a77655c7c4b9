import logging
from typing import Any, Iterable

import requests

from app.core.config import settings

logger = logging.getLogger(__name__)

"""
HOSTED BACKEND CLIENT

Thin REST wrapper over the Supabase project: PostgREST for tables and
GoTrue for authentication. Row-level security on the backend decides what
each token may see, so every call is a single request with no retries.
"""


FILTER_OPERATORS = {"eq", "gte", "lte"}


class DataStoreError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class DataStoreConfigError(DataStoreError):
    pass


#Pull a readable message out of a PostgREST / GoTrue error body
def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"

    if isinstance(body, dict):
        for key in ("error_description", "msg", "message", "error"):
            if body.get(key):
                return str(body[key])

    return f"HTTP {response.status_code}"


class DataStoreClient:
    def __init__(
        self,
        url: str,
        anon_key: str,
        *,
        access_token: str | None = None,
        session: requests.Session | None = None,
        timeout: float = 10.0,
    ):
        self.url = url.rstrip("/")
        self.anon_key = anon_key
        self.access_token = access_token
        self.session = session or requests.Session()
        self.timeout = timeout

    #Same backend, but calls carry the signed-in user's token
    def for_token(self, access_token: str) -> "DataStoreClient":
        return DataStoreClient(
            self.url,
            self.anon_key,
            access_token=access_token,
            session=self.session,
            timeout=self.timeout,
        )

    def _headers(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        headers = {
            "apikey": self.anon_key,
            "Authorization": f"Bearer {self.access_token or self.anon_key}",
            "Content-Type": "application/json",
        }
        if extra:
            headers.update(extra)
        return headers

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Any = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        url = f"{self.url}{path}"
        logger.debug("%s %s params=%s", method, path, params)

        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=json,
                headers=self._headers(headers),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("Backend request failed: %s %s (%s)", method, path, e)
            raise DataStoreError(str(e)) from e

        if not response.ok:
            message = _error_message(response)
            logger.warning(
                "Backend error %s on %s %s: %s",
                response.status_code, method, path, message,
            )
            raise DataStoreError(message, response.status_code)

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.warning("Backend sent non-JSON body on %s %s", method, path)
            raise DataStoreError("Invalid response from backend", response.status_code) from e

    # -------------------------------------------------------------------
    # Tables
    # -------------------------------------------------------------------
    def select(
        self,
        table: str,
        *,
        filters: Iterable[tuple[str, str, Any]] | None = None,
        order: Iterable[str] | None = None,
    ) -> list[dict]:
        params: list[tuple[str, str]] = [("select", "*")]

        for column, op, value in filters or ():
            if op not in FILTER_OPERATORS:
                raise ValueError(f"Unsupported filter operator: {op}")
            params.append((column, f"{op}.{value}"))

        order = list(order or ())
        if order:
            params.append(("order", ",".join(f"{c}.asc" for c in order)))

        return self._request("GET", f"/rest/v1/{table}", params=params) or []

    def insert(self, table: str, row: dict) -> dict | None:
        rows = self._request(
            "POST",
            f"/rest/v1/{table}",
            json=row,
            headers={"Prefer": "return=representation"},
        )
        return rows[0] if rows else None

    def update(self, table: str, row: dict, *, match: dict[str, Any]) -> list[dict]:
        return self._request(
            "PATCH",
            f"/rest/v1/{table}",
            params=[(k, f"eq.{v}") for k, v in match.items()],
            json=row,
            headers={"Prefer": "return=representation"},
        ) or []

    def delete(self, table: str, *, match: dict[str, Any]) -> None:
        self._request(
            "DELETE",
            f"/rest/v1/{table}",
            params=[(k, f"eq.{v}") for k, v in match.items()],
        )

    # -------------------------------------------------------------------
    # Auth
    # -------------------------------------------------------------------
    def sign_up(self, email: str, password: str) -> dict:
        return self._request(
            "POST",
            "/auth/v1/signup",
            json={"email": email, "password": password},
        ) or {}

    def sign_in_with_password(self, email: str, password: str) -> dict:
        return self._request(
            "POST",
            "/auth/v1/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        ) or {}

    def sign_out(self) -> None:
        self._request("POST", "/auth/v1/logout")

    def get_user(self) -> dict:
        return self._request("GET", "/auth/v1/user") or {}


_datastore: DataStoreClient | None = None


#Lazily build the shared anonymous client
def get_datastore() -> DataStoreClient:
    global _datastore

    if _datastore is None:
        if not settings.SUPABASE_URL or not settings.SUPABASE_ANON_KEY:
            raise DataStoreConfigError("Supabase URL and Anon Key must be defined")

        _datastore = DataStoreClient(
            settings.SUPABASE_URL,
            settings.SUPABASE_ANON_KEY,
            timeout=settings.DATASTORE_TIMEOUT,
        )

    return _datastore
