"""
Domain models - Registration record and static event copy.

Plain dataclasses shared by the workflow and the adapters.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Registration:
    """
    One person's signup for the event.

    Records are immutable once created. Uniqueness of email and
    contact_number is enforced by the repository adapter.
    """

    full_name: str
    email: str
    contact_number: str
    current_year: str
    branch: str
    registered_at: datetime
    purpose: str | None = None


@dataclass(frozen=True)
class EventDetails:
    """Static event copy and sender identity used in confirmation emails."""

    name: str = "Insight X"
    tagline: str = "Campus to Corporate"
    date: str = "October 13th, 2025"
    organizer: str = "Alumni Cell KJSSE"
    sender_name: str = "Insight X"
    sender_email: str = "kathant.somaiya@somaiya.edu"
