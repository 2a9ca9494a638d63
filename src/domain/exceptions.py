"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class RequiredFieldsMissing(RegistrationError):
    """One or more required fields are absent, blank, or not text."""

    def __init__(self, fields: list[str]) -> None:
        super().__init__(", ".join(fields))
        self.fields = fields


class AlreadyRegistered(RegistrationError):
    """Email or contact number belongs to an existing registration."""

    def __init__(self, email: str, contact_number: str) -> None:
        super().__init__(f"{email} / {contact_number}")
        self.email = email
        self.contact_number = contact_number


class NotificationFailed(RegistrationError):
    """Confirmation email could not be handed to the mail channel."""

    pass


class StorageUnavailable(RegistrationError):
    """Registration store could not be reached or rejected the operation."""

    pass
