"""
In-memory repository adapter - Implements RegistrationRepository protocol.

Keeps registrations in a process-local list. A single lock guards the
uniqueness check and the append so concurrent inserts behave like the
database constraint: one wins, the rest get DUPLICATE. Intended for local
development without PostgreSQL and for tests.
"""

import threading

from src.domain.models import Registration
from src.domain.ports import InsertResult


class InMemoryRegistrationRepository:
    """Implements RegistrationRepository protocol with a locked list."""

    def __init__(self) -> None:
        self._records: list[Registration] = []
        self._emails: set[str] = set()
        self._contact_numbers: set[str] = set()
        self._lock = threading.Lock()

    def find_duplicate(self, email: str, contact_number: str) -> Registration | None:
        with self._lock:
            for record in self._records:
                if record.email == email or record.contact_number == contact_number:
                    return record
        return None

    def insert(self, registration: Registration) -> InsertResult:
        with self._lock:
            if (
                registration.email in self._emails
                or registration.contact_number in self._contact_numbers
            ):
                return InsertResult.DUPLICATE
            self._records.append(registration)
            self._emails.add(registration.email)
            self._contact_numbers.add(registration.contact_number)
        return InsertResult.CREATED

    def records(self) -> list[Registration]:
        """Snapshot of stored registrations in insertion order."""
        with self._lock:
            return list(self._records)
