"""
Registration domain service - Event signup workflow.

This module contains the core business logic for event registration.

Workflow (strict order, no step skipped)
========================================

1. Validate: required fields present and non-empty after coercion to text
2. Duplicate check: any stored record with the same email OR contact number
3. Persist: insert with registered_at set to now; the store's unique
   constraint is the authority, a DUPLICATE insert result is a duplicate
4. Notify: send the confirmation email; a failure is logged and only
   aborts the request when block_on_email_failure is set
5. Return the created record

Note: Steps 2 and 3 are not atomic. Two concurrent submissions can both pass
the lookup; the repository's insert result decides which one wins.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone

from .exceptions import AlreadyRegistered, NotificationFailed, RequiredFieldsMissing
from .models import Registration
from .ports import EmailSender, InsertResult, RegistrationRepository

logger = logging.getLogger(__name__)

# Request keys, in the order they are reported when missing
REQUIRED_FIELDS = ("fullName", "email", "contactNumber", "currentYear", "branch")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def coerce_text(value: object) -> str | None:
    """
    Coerce an untyped request value to stripped text.

    Strings are stripped, integers are converted (JSON clients often send
    contact numbers as integers). Everything else, including booleans and
    floats, counts as absent. Empty results become None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
    elif isinstance(value, int):
        text = str(value)
    else:
        return None
    return text or None


@dataclass
class RegistrationService:
    """
    Domain service for event registration.

    Collaborators are injected so tests can substitute them. The
    block_on_email_failure flag selects the notification policy:
    False (default) logs a failed send and keeps the registration,
    True propagates NotificationFailed to the caller.
    """

    repository: RegistrationRepository
    email_sender: EmailSender
    block_on_email_failure: bool = False
    clock: Callable[[], datetime] = field(default=_utcnow)

    def submit(self, data: object) -> Registration:
        """
        Register an attendee from untyped request data.

        Args:
            data: Decoded request body; anything that is not a mapping
                is treated as an empty submission

        Returns:
            The stored registration

        Raises:
            RequiredFieldsMissing: If a required field is absent or blank
            AlreadyRegistered: If the email or contact number is taken
            StorageUnavailable: If the repository cannot be reached
            NotificationFailed: If the send fails and the policy blocks
        """
        registration = self._validate(data)

        existing = self.repository.find_duplicate(
            registration.email, registration.contact_number
        )
        if existing is not None:
            logger.warning(
                "Rejected duplicate registration for %s / %s",
                registration.email,
                registration.contact_number,
            )
            raise AlreadyRegistered(registration.email, registration.contact_number)

        result = self.repository.insert(registration)
        if result == InsertResult.DUPLICATE:
            logger.warning(
                "Insert rejected by unique constraint for %s / %s",
                registration.email,
                registration.contact_number,
            )
            raise AlreadyRegistered(registration.email, registration.contact_number)

        logger.info("Registration saved for %s", registration.email)
        self._notify(registration)
        return registration

    def _validate(self, data: object) -> Registration:
        """Build a Registration from request data or raise RequiredFieldsMissing."""
        if not isinstance(data, Mapping):
            raise RequiredFieldsMissing(list(REQUIRED_FIELDS))

        values = {key: coerce_text(data.get(key)) for key in REQUIRED_FIELDS}
        missing = [key for key, value in values.items() if value is None]
        if missing:
            raise RequiredFieldsMissing(missing)

        return Registration(
            full_name=values["fullName"],
            email=values["email"],
            contact_number=values["contactNumber"],
            current_year=values["currentYear"],
            branch=values["branch"],
            purpose=coerce_text(data.get("purpose")),
            registered_at=self.clock(),
        )

    def _notify(self, registration: Registration) -> None:
        try:
            self.email_sender.send_confirmation(registration.full_name, registration.email)
        except NotificationFailed:
            logger.exception("Confirmation email to %s failed", registration.email)
            if self.block_on_email_failure:
                raise
            return
        logger.info("Confirmation email sent to %s", registration.email)
