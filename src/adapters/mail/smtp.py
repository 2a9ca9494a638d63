"""
SMTP email sender adapter - Implements EmailSender protocol.

Delivers the confirmation email through an SMTP account. Port 465 uses
implicit TLS (SMTP_SSL); any other port connects in plain text and upgrades
with STARTTLS. Each send opens its own connection.
"""

import logging
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formataddr

from src.adapters.mail.template import compose_confirmation
from src.domain.exceptions import NotificationFailed
from src.domain.models import EventDetails

logger = logging.getLogger(__name__)


class SmtpEmailSender:
    """Implements EmailSender protocol via smtplib."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        event: EventDetails,
        timeout: float = 10.0,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._event = event
        self._timeout = timeout

    def send_confirmation(self, recipient_name: str, recipient_email: str) -> None:
        message = self._build_message(recipient_name, recipient_email)

        logger.info("Sending confirmation email to %s via SMTP %s:%s", recipient_email, self._host, self._port)
        try:
            context = ssl.create_default_context()
            if self._port == 465:
                with smtplib.SMTP_SSL(self._host, self._port, timeout=self._timeout, context=context) as s:
                    self._deliver(s, message)
            else:
                with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as s:
                    s.starttls(context=context)
                    self._deliver(s, message)
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationFailed(f"SMTP delivery to {recipient_email} failed") from e

    def _build_message(self, recipient_name: str, recipient_email: str) -> EmailMessage:
        content = compose_confirmation(recipient_name, self._event)
        msg = EmailMessage()
        msg["Subject"] = content.subject
        msg["From"] = formataddr((self._event.sender_name, self._event.sender_email))
        msg["To"] = formataddr((recipient_name, recipient_email))
        msg.set_content(content.text)
        msg.add_alternative(content.html, subtype="html")
        return msg

    def _deliver(self, session: smtplib.SMTP, message: EmailMessage) -> None:
        if self._username:
            session.login(self._username, self._password)
        session.send_message(message)
