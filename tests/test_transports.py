"""Tests for live transports (SMTP, SMS gateway, FCM) against fakes."""

import json
from urllib.parse import parse_qs

import aiosmtplib
import httpx
import pytest

from notify_dispatch.delivery import RenderedNotification
from notify_dispatch.exceptions import NotificationDeliveryError
from notify_dispatch.providers import FcmPushTransport, HttpSmsGateway, SmtpEmailTransport


class FakeSMTP:
    """Stands in for ``aiosmtplib.SMTP`` and records what it was given."""

    instances: list["FakeSMTP"] = []

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.logged_in = None
        self.messages = []
        FakeSMTP.instances.append(self)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    async def login(self, username, password):
        self.logged_in = (username, password)

    async def send_message(self, message):
        self.messages.append(message)


@pytest.fixture
def fake_smtp(monkeypatch):
    FakeSMTP.instances = []
    monkeypatch.setattr(aiosmtplib, "SMTP", FakeSMTP)
    return FakeSMTP


@pytest.mark.asyncio
class TestSmtpEmailTransport:
    async def test_sends_multipart_message(self, fake_smtp):
        transport = SmtpEmailTransport(
            host="smtp.example.com",
            username="mailer",
            password="secret",
            from_email="noreply@example.com",
        )
        content = RenderedNotification(
            body_text="Plain body", subject="Subject line", body_html="<p>Html body</p>"
        )

        message_id = await transport.transmit("alice@example.com", content)

        smtp = fake_smtp.instances[0]
        assert smtp.kwargs["hostname"] == "smtp.example.com"
        assert smtp.kwargs["port"] == 587
        assert smtp.kwargs["start_tls"] is True
        assert smtp.logged_in == ("mailer", "secret")

        sent = smtp.messages[0]
        assert sent["To"] == "alice@example.com"
        assert sent["From"] == "noreply@example.com"
        assert sent["Subject"] == "Subject line"
        assert sent["Message-ID"] == message_id
        assert sent.is_multipart()
        assert sent.get_body(("html",)).get_content().strip() == "<p>Html body</p>"
        assert sent.get_body(("plain",)).get_content().strip() == "Plain body"

    async def test_no_login_without_credentials(self, fake_smtp):
        transport = SmtpEmailTransport(host="localhost", from_email="noreply@example.com")

        await transport.transmit("bob@example.com", RenderedNotification(body_text="hi"))

        assert fake_smtp.instances[0].logged_in is None
        assert not fake_smtp.instances[0].messages[0].is_multipart()


def test_smtp_from_email_required():
    with pytest.raises(ValueError, match="from_email"):
        SmtpEmailTransport(host="localhost")


def _gateway(handler) -> HttpSmsGateway:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpSmsGateway(
        url="https://sms.example.com/send",
        auth_key="key-123",
        default_from="SRJINF",
        client=client,
    )


@pytest.mark.asyncio
class TestHttpSmsGateway:
    async def test_posts_form_and_returns_id(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["form"] = parse_qs(request.content.decode())
            return httpx.Response(200, text="OK;12345;1")

        gateway = _gateway(handler)
        message_id = await gateway.transmit(
            "+919123456780", RenderedNotification(body_text="Your OTP is 4821")
        )

        form = captured["form"]
        assert form["auth_key"] == ["key-123"]
        assert form["from"] == ["SRJINF"]
        assert form["to"] == ["919123456780"]
        assert form["text"] == ["Your OTP is 4821"]
        assert form["id"] == [message_id]

    async def test_gateway_error_raises(self):
        gateway = _gateway(lambda request: httpx.Response(200, text="ERROR;101;Invalid key"))

        with pytest.raises(NotificationDeliveryError) as exc_info:
            await gateway.transmit("9123456780", RenderedNotification(body_text="hi"))

        assert "ERROR;101;Invalid key" in str(exc_info.value)
        assert "9123456780" not in str(exc_info.value)

    async def test_http_error_raises(self):
        gateway = _gateway(lambda request: httpx.Response(503))

        with pytest.raises(httpx.HTTPStatusError):
            await gateway.transmit("9123456780", RenderedNotification(body_text="hi"))

    async def test_originator_from_metadata(self):
        captured = {}

        def handler(request):
            captured["form"] = parse_qs(request.content.decode())
            return httpx.Response(200, text="OK;1;1")

        gateway = _gateway(handler)
        await gateway.transmit(
            "9123456780", RenderedNotification(body_text="hi"), {"from_number": "ALTSND"}
        )

        assert captured["form"]["from"] == ["ALTSND"]

    async def test_originator_required(self):
        gateway = HttpSmsGateway(url="https://sms.example.com/send", auth_key="k")

        with pytest.raises(ValueError, match="originator"):
            await gateway.transmit("9123456780", RenderedNotification(body_text="hi"))


@pytest.mark.asyncio
class TestFcmPushTransport:
    async def test_sends_v1_message(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["auth"] = request.headers["Authorization"]
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"name": "projects/srj/messages/0:1"})

        transport = FcmPushTransport(
            project_id="srj",
            access_token="access-token",
            client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )

        name = await transport.transmit(
            "device-token-123456",
            RenderedNotification(body_text="Order shipped", title="Update"),
            {"event": "system_update", "attempt": 1, "skip": None},
        )

        assert name == "projects/srj/messages/0:1"
        assert captured["url"] == "https://fcm.googleapis.com/v1/projects/srj/messages:send"
        assert captured["auth"] == "Bearer access-token"
        message = captured["body"]["message"]
        assert message["token"] == "device-token-123456"
        assert message["notification"] == {"title": "Update", "body": "Order shipped"}
        assert message["data"] == {"event": "system_update", "attempt": "1"}

    async def test_error_status_raises_with_masked_token(self):
        transport = FcmPushTransport(
            project_id="srj",
            access_token="access-token",
            client=httpx.AsyncClient(
                transport=httpx.MockTransport(lambda request: httpx.Response(404))
            ),
        )

        with pytest.raises(NotificationDeliveryError) as exc_info:
            await transport.transmit("device-token-123456", RenderedNotification(body_text="x"))

        assert "HTTP 404" in str(exc_info.value)
        assert "device-token-123456" not in str(exc_info.value)
