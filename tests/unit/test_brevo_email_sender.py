"""
Unit tests for BrevoEmailSender adapter.

Uses httpx.MockTransport to capture requests without network access.
"""

import json

import httpx
import pytest

from src.adapters.mail.brevo import BrevoEmailSender
from src.domain.exceptions import NotificationFailed
from src.domain.models import EventDetails


def make_sender(handler) -> tuple[BrevoEmailSender, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    client = httpx.Client(transport=httpx.MockTransport(record))
    sender = BrevoEmailSender(
        client=client,
        api_key="xkeysib-test",
        event=EventDetails(),
        api_url="https://api.brevo.test/v3/",
    )
    return sender, seen


class TestSendConfirmation:
    def test_posts_transactional_email(self) -> None:
        sender, seen = make_sender(lambda r: httpx.Response(201, json={"messageId": "<1@brevo>"}))

        sender.send_confirmation("Asha Rao", "asha@example.com")

        assert len(seen) == 1
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == "https://api.brevo.test/v3/smtp/email"
        assert request.headers["api-key"] == "xkeysib-test"

        body = json.loads(request.content)
        assert body["sender"] == {"name": "Insight X", "email": "kathant.somaiya@somaiya.edu"}
        assert body["to"] == [{"email": "asha@example.com", "name": "Asha Rao"}]
        assert body["subject"] == "Registration Confirmed for Insight X!"
        assert "Welcome to Insight X, Asha Rao!" in body["htmlContent"]

    def test_rejected_request_raises(self) -> None:
        sender, _ = make_sender(lambda r: httpx.Response(401, json={"code": "unauthorized"}))

        with pytest.raises(NotificationFailed) as exc_info:
            sender.send_confirmation("Asha Rao", "asha@example.com")

        assert "401" in str(exc_info.value)

    def test_transport_error_raises(self) -> None:
        def fail(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        sender, _ = make_sender(fail)

        with pytest.raises(NotificationFailed) as exc_info:
            sender.send_confirmation("Asha Rao", "asha@example.com")

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
