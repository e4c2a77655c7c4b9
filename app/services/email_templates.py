from html import escape
from typing import Any, Callable

from app.core.config import DEFAULT_SALON_NAME

"""
EMAIL TEMPLATES

Hardcoded HTML bodies for the transactional emails. Each builder takes the
request's data object and returns (subject, html).
"""


class UnknownTemplateError(Exception):
    pass


BUTTON_STYLE = (
    "display: inline-block; background: #1f2937; color: white; "
    "padding: 12px 24px; text-decoration: none; border-radius: 8px; "
    "margin: 16px 0;"
)
FOOTNOTE_STYLE = "color: #6b7280; font-size: 12px; margin-top: 24px;"


#Escaped value from the data object, missing keys render empty
def _v(data: dict[str, Any], key: str, default: str = "") -> str:
    value = data.get(key)
    if value is None or value == "":
        value = default
    return escape(str(value))


def _wrap(body: str) -> str:
    return (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">'
        f"{body}"
        "</div>"
    )


def signup_confirmation(data: dict[str, Any]) -> tuple[str, str]:
    url = _v(data, "confirmationUrl")
    html = _wrap(
        f'<h2 style="color: #1f2937;">Welkom bij {_v(data, "salonName", DEFAULT_SALON_NAME)}!</h2>'
        f"<p>Beste {_v(data, 'email')},</p>"
        "<p>Bedankt voor je registratie. Klik op de onderstaande knop om je account te bevestigen:</p>"
        f'<a href="{url}" style="{BUTTON_STYLE}">Account bevestigen</a>'
        f'<p>Of gebruik deze link: <a href="{url}">{url}</a></p>'
        f'<p style="{FOOTNOTE_STYLE}">Deze link verloopt over 24 uur.</p>'
    )
    return "Welkom bij SalonBooker - Bevestig je account", html


def password_reset(data: dict[str, Any]) -> tuple[str, str]:
    url = _v(data, "resetUrl")
    html = _wrap(
        '<h2 style="color: #1f2937;">Wachtwoord reset</h2>'
        f"<p>Beste {_v(data, 'email')},</p>"
        "<p>Je hebt een wachtwoord reset aangevraagd. Klik op de onderstaande knop om een nieuw wachtwoord in te stellen:</p>"
        f'<a href="{url}" style="{BUTTON_STYLE}">Wachtwoord resetten</a>'
        f'<p>Of gebruik deze link: <a href="{url}">{url}</a></p>'
        f'<p style="{FOOTNOTE_STYLE}">Deze link verloopt over 1 uur.</p>'
    )
    return "Wachtwoord reset - SalonBooker", html


def booking_confirmation(data: dict[str, Any]) -> tuple[str, str]:
    html = _wrap(
        '<h2 style="color: #1f2937;">Je afspraak is bevestigd!</h2>'
        f"<p>Beste {_v(data, 'customerName')},</p>"
        f"<p>Je afspraak bij <strong>{_v(data, 'salonName')}</strong> is bevestigd.</p>"
        '<div style="background: #f3f4f6; padding: 16px; border-radius: 8px; margin: 16px 0;">'
        f"<p><strong>Service:</strong> {_v(data, 'serviceName')}</p>"
        f"<p><strong>Datum:</strong> {_v(data, 'date')}</p>"
        f"<p><strong>Tijd:</strong> {_v(data, 'time')}</p>"
        f"<p><strong>Prijs:</strong> €{_v(data, 'price')}</p>"
        "</div>"
        f'<p style="{FOOTNOTE_STYLE}">Wil je je afspraak wijzigen of annuleren? Neem contact op met de salon.</p>'
    )
    return "Afspraak bevestigd - SalonBooker", html


TEMPLATES: dict[str, Callable[[dict[str, Any]], tuple[str, str]]] = {
    "signupConfirmation": signup_confirmation,
    "passwordReset": password_reset,
    "bookingConfirmation": booking_confirmation,
}


def render_template(name: str, data: dict[str, Any] | None) -> tuple[str, str]:
    builder = TEMPLATES.get(name)
    if builder is None:
        raise UnknownTemplateError(name)
    return builder(data or {})
