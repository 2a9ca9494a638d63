"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A valid registration payload
- In-memory repository and mocked email sender
"""

from unittest.mock import Mock

import pytest

from src.adapters.repository.memory import InMemoryRegistrationRepository


@pytest.fixture
def payload() -> dict[str, str]:
    """A complete registration request body."""
    return {
        "fullName": "Asha Rao",
        "email": "asha@example.com",
        "contactNumber": "9999999999",
        "currentYear": "TE",
        "branch": "Comp",
    }


@pytest.fixture
def repository() -> InMemoryRegistrationRepository:
    """Fresh in-memory repository per test."""
    return InMemoryRegistrationRepository()


@pytest.fixture
def sender() -> Mock:
    """Email sender double recording send_confirmation calls."""
    return Mock()
