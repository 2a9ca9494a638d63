"""
Confirmation email template.

The copy is fixed per deployment (EventDetails); only the recipient name
varies between messages.
"""

from dataclasses import dataclass
from html import escape

from src.domain.models import EventDetails


@dataclass(frozen=True)
class ConfirmationMessage:
    subject: str
    html: str
    text: str


def compose_confirmation(recipient_name: str, event: EventDetails) -> ConfirmationMessage:
    """Build the confirmation subject and bodies for one registrant."""
    name = escape(recipient_name)
    subject = f"Registration Confirmed for {event.name}!"
    html = (
        f"<h1>Welcome to {escape(event.name)}, {name}!</h1>"
        f"<p>Thank you for registering. We're thrilled to have you join us for our "
        f"{escape(event.tagline)} event.</p>"
        f"<p><b>Event Date:</b> {escape(event.date)}</p>"
        f"<p>Best regards,</p>"
        f"<p><b>{escape(event.organizer)}</b></p>"
    )
    text = (
        f"Welcome to {event.name}, {recipient_name}!\n\n"
        f"Thank you for registering. We're thrilled to have you join us for our "
        f"{event.tagline} event.\n\n"
        f"Event Date: {event.date}\n\n"
        f"Best regards,\n"
        f"{event.organizer}\n"
    )
    return ConfirmationMessage(subject=subject, html=html, text=text)
