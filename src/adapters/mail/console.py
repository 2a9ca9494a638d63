"""
Console email sender adapter - Implements EmailSender protocol.

This module provides a console-based implementation of the domain's
email sender port, logging confirmation emails to stdout for demo purposes.
"""

import logging

from src.adapters.mail.template import compose_confirmation
from src.domain.models import EventDetails

logger = logging.getLogger(__name__)


class ConsoleEmailSender:
    """
    Implements EmailSender protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - logs the message instead of sending it.
    """

    def __init__(self, event: EventDetails | None = None) -> None:
        self._event = event or EventDetails()

    def send_confirmation(self, recipient_name: str, recipient_email: str) -> None:
        """
        Log the confirmation email to console (simulates email delivery).

        The message is logged at INFO level to be visible in container logs.

        Args:
            recipient_name: Registrant's full name
            recipient_email: Recipient email address (normalized by domain layer)
        """
        message = compose_confirmation(recipient_name, self._event)
        logger.info("[CONFIRMATION] To: %s Subject: %s", recipient_email, message.subject)
