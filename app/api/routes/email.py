import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.schemas.email import EmailHealthOut, EmailSendOut, EmailSendRequest
from app.services.email import (
    EmailConfigError,
    EmailDeliveryError,
    email_config_checks,
    send_email,
)
from app.services.email_templates import UnknownTemplateError, render_template

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Email"])


"""
EMAIL ROUTES => TEMPLATED SEND + HEALTH

Errors are returned as {"error": message} bodies rather than FastAPI's
default {"detail": ...}.
"""


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


#Render one of the fixed templates and hand it to Brevo
@router.post("/email/send", response_model=EmailSendOut)
def send_templated_email(payload: EmailSendRequest):
    if not payload.to or not payload.template:
        return _error("Missing required fields: to, template", 400)

    try:
        subject, html = render_template(payload.template, payload.data)
    except UnknownTemplateError:
        return _error("Unknown template", 400)

    try:
        message_id = send_email(to=payload.to, subject=subject, html=html)
    except (EmailConfigError, EmailDeliveryError) as e:
        return _error(str(e) or "Internal server error", 500)

    return EmailSendOut(id=message_id)


#Reports whether the email secrets are present, 503 when either is missing
@router.get("/health/email", response_model=EmailHealthOut)
def email_health():
    checks = email_config_checks()
    healthy = all(checks.values())

    if not healthy:
        logger.warning("Email health check failed: %s", checks)

    body = EmailHealthOut(
        status="healthy" if healthy else "unhealthy",
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        checks=checks,
    )
    return JSONResponse(body.model_dump(), status_code=200 if healthy else 503)
