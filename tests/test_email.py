import pytest
from urllib3.exceptions import MaxRetryError

from app.api.routes import email as email_routes
from app.services import email as email_service
from app.services.email import EmailConfigError, EmailDeliveryError
from app.services.email_templates import UnknownTemplateError, render_template


def test_signup_confirmation_template():
    subject, html = render_template(
        "signupConfirmation",
        {"email": "owner@salon.com", "confirmationUrl": "https://x.test/confirm"},
    )

    assert subject == "Welkom bij SalonBooker - Bevestig je account"
    assert "Welkom bij SalonBooker!" in html
    assert "Beste owner@salon.com" in html
    assert html.count("https://x.test/confirm") == 3


def test_signup_confirmation_uses_salon_name():
    _, html = render_template("signupConfirmation", {"salonName": "Knipkunst"})

    assert "Welkom bij Knipkunst!" in html


def test_password_reset_template():
    subject, html = render_template("passwordReset", {"resetUrl": "https://x.test/reset"})

    assert subject == "Wachtwoord reset - SalonBooker"
    assert 'href="https://x.test/reset"' in html
    assert "1 uur" in html


def test_booking_confirmation_template():
    subject, html = render_template(
        "bookingConfirmation",
        {
            "customerName": "Sanne",
            "salonName": "Knipkunst",
            "serviceName": "Knippen",
            "date": "2024-05-15",
            "time": "10:30",
            "price": 35,
        },
    )

    assert subject == "Afspraak bevestigd - SalonBooker"
    assert "Beste Sanne" in html
    assert "<strong>Knipkunst</strong>" in html
    assert "€35" in html


def test_template_values_are_escaped():
    _, html = render_template("bookingConfirmation", {"customerName": "<script>x</script>"})

    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_unknown_template():
    with pytest.raises(UnknownTemplateError):
        render_template("newsletter", {})


def test_send_endpoint_requires_to_and_template(anon_client):
    res = anon_client.post("/api/email/send", json={"template": "passwordReset"})

    assert res.status_code == 400
    assert res.json() == {"error": "Missing required fields: to, template"}

    res = anon_client.post("/api/email/send", json={"to": "a@b.nl"})
    assert res.status_code == 400


def test_send_endpoint_rejects_unknown_template(anon_client):
    res = anon_client.post("/api/email/send", json={"to": "a@b.nl", "template": "nope", "data": {}})

    assert res.status_code == 400
    assert res.json() == {"error": "Unknown template"}


def test_send_endpoint_success(anon_client, monkeypatch):
    sent = {}

    def fake_send(*, to, subject, html):
        sent.update(to=to, subject=subject, html=html)
        return "<msg-1@brevo>"

    monkeypatch.setattr(email_routes, "send_email", fake_send)

    res = anon_client.post(
        "/api/email/send",
        json={"to": "klant@mail.nl", "template": "bookingConfirmation", "data": {"customerName": "Sanne"}},
    )

    assert res.status_code == 200
    assert res.json() == {"success": True, "id": "<msg-1@brevo>"}
    assert sent["to"] == "klant@mail.nl"
    assert sent["subject"] == "Afspraak bevestigd - SalonBooker"


def test_send_endpoint_without_data(anon_client, monkeypatch):
    monkeypatch.setattr(email_routes, "send_email", lambda **kw: "id-2")

    res = anon_client.post("/api/email/send", json={"to": "a@b.nl", "template": "passwordReset"})

    assert res.status_code == 200


def test_send_endpoint_delivery_failure(anon_client, monkeypatch):
    def failing_send(**kwargs):
        raise EmailDeliveryError("Bad Request")

    monkeypatch.setattr(email_routes, "send_email", failing_send)

    res = anon_client.post("/api/email/send", json={"to": "a@b.nl", "template": "passwordReset"})

    assert res.status_code == 500
    assert res.json() == {"error": "Bad Request"}


def test_send_email_without_api_key(monkeypatch):
    monkeypatch.setattr(email_service, "_brevo", None)
    monkeypatch.setattr(email_service.settings, "BREVO_API_KEY", None)

    with pytest.raises(EmailConfigError, match="BREVO_API_KEY not configured"):
        email_service.send_email(to="a@b.nl", subject="s", html="<p>x</p>")


def test_send_email_builds_brevo_message(monkeypatch):
    calls = []

    class FakeResult:
        message_id = "<abc@brevo>"

    class FakeBrevo:
        def send_transac_email(self, email, _request_timeout=None):
            calls.append(email)
            return FakeResult()

    monkeypatch.setattr(email_service, "_brevo", FakeBrevo())
    monkeypatch.setattr(email_service.settings, "EMAIL_FROM", "salon@knipkunst.nl")

    message_id = email_service.send_email(to="a@b.nl", subject="Hallo", html="<p>x</p>")

    assert message_id == "<abc@brevo>"
    assert calls[0].subject == "Hallo"
    assert calls[0].html_content == "<p>x</p>"
    assert calls[0].to == [{"email": "a@b.nl"}]
    assert calls[0].sender == {"email": "salon@knipkunst.nl"}


def test_health_is_healthy_when_both_secrets_set(anon_client, monkeypatch):
    monkeypatch.setenv("BREVO_API_KEY", "key")
    monkeypatch.setenv("EMAIL_FROM", "noreply@salon.nl")

    res = anon_client.get("/api/health/email")

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    assert body["checks"] == {"emailApiKey": True, "emailFrom": True}
    assert body["timestamp"].endswith("Z")


@pytest.mark.parametrize("missing", ["BREVO_API_KEY", "EMAIL_FROM"])
def test_health_is_unhealthy_when_a_secret_is_missing(anon_client, monkeypatch, missing):
    monkeypatch.setenv("BREVO_API_KEY", "key")
    monkeypatch.setenv("EMAIL_FROM", "noreply@salon.nl")
    monkeypatch.delenv(missing)

    res = anon_client.get("/api/health/email")

    assert res.status_code == 503
    assert res.json()["status"] == "unhealthy"


def test_health_treats_empty_values_as_missing(anon_client, monkeypatch):
    monkeypatch.setenv("BREVO_API_KEY", "")
    monkeypatch.setenv("EMAIL_FROM", "noreply@salon.nl")

    res = anon_client.get("/api/health/email")

    assert res.status_code == 503
    assert res.json()["checks"]["emailApiKey"] is False


def test_send_endpoint_without_api_key(anon_client, monkeypatch):
    monkeypatch.setattr(email_service, "_brevo", None)
    monkeypatch.setattr(email_service.settings, "BREVO_API_KEY", None)

    res = anon_client.post("/api/email/send", json={"to": "a@b.nl", "template": "passwordReset"})

    assert res.status_code == 500
    assert res.json() == {"error": "BREVO_API_KEY not configured"}


def test_send_endpoint_when_brevo_is_unreachable(anon_client, monkeypatch):
    # Nothing listens on the discard port, the connection is refused
    monkeypatch.setattr(email_service, "_brevo", email_service.build_brevo("test-key", host="http://127.0.0.1:9"))

    res = anon_client.post("/api/email/send", json={"to": "a@b.nl", "template": "passwordReset"})

    assert res.status_code == 500
    assert res.json()["error"].startswith("Email delivery failed")


def test_send_email_wraps_transport_errors(monkeypatch):
    class UnreachableBrevo:
        def send_transac_email(self, email, _request_timeout=None):
            raise MaxRetryError(None, "/v3/smtp/email")

    monkeypatch.setattr(email_service, "_brevo", UnreachableBrevo())

    with pytest.raises(EmailDeliveryError):
        email_service.send_email(to="a@b.nl", subject="s", html="<p>x</p>")


def test_send_email_passes_request_timeout(monkeypatch):
    timeouts = []

    class FakeBrevo:
        def send_transac_email(self, email, _request_timeout=None):
            timeouts.append(_request_timeout)
            return None

    monkeypatch.setattr(email_service, "_brevo", FakeBrevo())
    monkeypatch.setattr(email_service.settings, "EMAIL_TIMEOUT", 4.0)

    assert email_service.send_email(to="a@b.nl", subject="s", html="<p>x</p>") is None
    assert timeouts == [4.0]


def test_brevo_client_makes_a_single_attempt():
    brevo = email_service.build_brevo("test-key")

    retries = brevo.api_client.rest_client.pool_manager.connection_pool_kw["retries"]
    assert retries.total == 0
