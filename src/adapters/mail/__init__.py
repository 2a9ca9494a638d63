"""Mail adapters - Confirmation email delivery implementations."""

from .brevo import BrevoEmailSender
from .console import ConsoleEmailSender
from .smtp import SmtpEmailSender
from .template import ConfirmationMessage, compose_confirmation

__all__ = [
    "BrevoEmailSender",
    "ConfirmationMessage",
    "ConsoleEmailSender",
    "SmtpEmailSender",
    "compose_confirmation",
]
