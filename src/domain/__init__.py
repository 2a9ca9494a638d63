"""
Domain layer - Pure business logic with zero framework imports.

This package contains the registration workflow for the event signup
service. It defines its own port interfaces for infrastructure
abstraction, keeping storage and mail delivery swappable.
"""

from .exceptions import (
    AlreadyRegistered,
    NotificationFailed,
    RegistrationError,
    RequiredFieldsMissing,
    StorageUnavailable,
)
from .models import EventDetails, Registration
from .ports import EmailSender, InsertResult, RegistrationRepository
from .registration import RegistrationService

__all__ = [
    "AlreadyRegistered",
    "EmailSender",
    "EventDetails",
    "InsertResult",
    "NotificationFailed",
    "Registration",
    "RegistrationError",
    "RegistrationRepository",
    "RegistrationService",
    "RequiredFieldsMissing",
    "StorageUnavailable",
]
