"""
Brevo email sender adapter - Implements EmailSender protocol.

Submits the confirmation email to Brevo's transactional email HTTP API
(POST /smtp/email). The httpx.Client is created once at startup and shared
across requests; its lifecycle belongs to the application, not this adapter.
"""

import logging

import httpx

from src.adapters.mail.template import compose_confirmation
from src.domain.exceptions import NotificationFailed
from src.domain.models import EventDetails

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.brevo.com/v3"


class BrevoEmailSender:
    """Implements EmailSender protocol via the Brevo transactional API."""

    def __init__(
        self,
        client: httpx.Client,
        api_key: str,
        event: EventDetails,
        api_url: str = DEFAULT_API_URL,
    ) -> None:
        self._client = client
        self._api_key = api_key
        self._event = event
        self._endpoint = f"{api_url.rstrip('/')}/smtp/email"

    def send_confirmation(self, recipient_name: str, recipient_email: str) -> None:
        content = compose_confirmation(recipient_name, self._event)
        payload = {
            "sender": {"name": self._event.sender_name, "email": self._event.sender_email},
            "to": [{"email": recipient_email, "name": recipient_name}],
            "subject": content.subject,
            "htmlContent": content.html,
        }

        logger.info("Sending confirmation email to %s via Brevo", recipient_email)
        try:
            response = self._client.post(
                self._endpoint,
                json=payload,
                headers={"api-key": self._api_key, "accept": "application/json"},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NotificationFailed(
                f"Brevo rejected email to {recipient_email}: HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise NotificationFailed(f"Brevo request for {recipient_email} failed") from e

        logger.debug("Brevo accepted message: %s", response.text)
