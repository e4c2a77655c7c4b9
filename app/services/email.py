import logging
import os

import sib_api_v3_sdk
from sib_api_v3_sdk.rest import ApiException
from urllib3.exceptions import HTTPError
from urllib3.util import Retry

from app.core.config import settings, DEFAULT_EMAIL_FROM

logger = logging.getLogger(__name__)


class EmailConfigError(RuntimeError):
    pass


class EmailDeliveryError(RuntimeError):
    pass


# -------------------------------------------------------------------
# Brevo client setup (lazy, so the app boots without a key)
# -------------------------------------------------------------------
_brevo: sib_api_v3_sdk.TransactionalEmailsApi | None = None


#One attempt per send, urllib3 would otherwise retry connection failures
def build_brevo(api_key: str, host: str | None = None) -> sib_api_v3_sdk.TransactionalEmailsApi:
    config = sib_api_v3_sdk.Configuration()
    config.api_key["api-key"] = api_key
    if host:
        config.host = host

    client = sib_api_v3_sdk.ApiClient(config)
    client.rest_client.pool_manager.connection_pool_kw["retries"] = Retry(total=0)
    return sib_api_v3_sdk.TransactionalEmailsApi(client)


def get_brevo() -> sib_api_v3_sdk.TransactionalEmailsApi:
    global _brevo

    if _brevo is None:
        if not settings.BREVO_API_KEY:
            raise EmailConfigError("BREVO_API_KEY not configured")

        _brevo = build_brevo(settings.BREVO_API_KEY)

    return _brevo


def sender_address() -> str:
    return settings.EMAIL_FROM or DEFAULT_EMAIL_FROM


#Presence of the two secrets the email endpoint depends on
def email_config_checks() -> dict[str, bool]:
    return {
        "emailApiKey": bool(os.getenv("BREVO_API_KEY")),
        "emailFrom": bool(os.getenv("EMAIL_FROM")),
    }


# -------------------------------------------------------------------
# Only place that talks to Brevo
# -------------------------------------------------------------------
def send_email(*, to: str, subject: str, html: str) -> str | None:
    """
    Send a rendered HTML email and return Brevo's message id.
    Raises EmailConfigError when no API key is set and
    EmailDeliveryError when Brevo rejects the request or cannot be reached.
    """
    brevo = get_brevo()

    email = sib_api_v3_sdk.SendSmtpEmail(
        sender={"email": sender_address()},
        to=[{"email": to}],
        subject=subject,
        html_content=html,
    )

    try:
        result = brevo.send_transac_email(
            email, _request_timeout=settings.EMAIL_TIMEOUT
        )
    except ApiException as e:
        logger.warning("Brevo send failed to=%s subject=%r: %s", to, subject, e)
        raise EmailDeliveryError(e.reason or "Email delivery failed") from e
    except HTTPError as e:
        logger.warning("Brevo unreachable to=%s subject=%r: %s", to, subject, e)
        raise EmailDeliveryError("Email delivery failed: Brevo unreachable") from e

    message_id = getattr(result, "message_id", None)
    logger.info("Email sent to=%s subject=%r id=%s", to, subject, message_id)
    return message_id
