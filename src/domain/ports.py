"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from enum import Enum
from typing import Protocol

from .models import Registration


class InsertResult(Enum):
    """
    Result of an insert attempt.

    DUPLICATE is reported when the store's unique constraint on email or
    contact number rejects the row. It is the authoritative duplicate signal;
    the pre-insert lookup only exists to answer early.
    """

    CREATED = "created"
    DUPLICATE = "duplicate"


class RegistrationRepository(Protocol):
    """Port interface for registration persistence."""

    def find_duplicate(self, email: str, contact_number: str) -> Registration | None:
        """
        Find a registration sharing the email OR the contact number.

        Args:
            email: Normalized email address
            contact_number: Contact number as submitted

        Returns:
            The first matching registration, or None

        Raises:
            StorageUnavailable: If the store cannot be queried
        """
        ...

    def insert(self, registration: Registration) -> InsertResult:
        """
        Store a new registration.

        Args:
            registration: Fully validated record

        Returns:
            CREATED on success, DUPLICATE on unique-constraint violation

        Raises:
            StorageUnavailable: If the store cannot be written
        """
        ...


class EmailSender(Protocol):
    """Port interface for confirmation email delivery."""

    def send_confirmation(self, recipient_name: str, recipient_email: str) -> None:
        """
        Send the event confirmation email to a single registrant.

        Args:
            recipient_name: Registrant's full name
            recipient_email: Registrant's email address

        Raises:
            NotificationFailed: If the mail channel rejected or failed the send
        """
        ...
