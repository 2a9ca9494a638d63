"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes, plus the
builders the lifespan uses to create the process-wide adapters.
"""

import logging

import httpx
from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.mail import BrevoEmailSender, ConsoleEmailSender, SmtpEmailSender
from src.adapters.repository import InMemoryRegistrationRepository, PostgresRegistrationRepository
from src.config.settings import Settings, get_settings
from src.domain.ports import EmailSender, RegistrationRepository
from src.domain.registration import RegistrationService

logger = logging.getLogger(__name__)


def build_repository(settings: Settings, pool: ConnectionPool | None) -> RegistrationRepository:
    """Create the repository adapter selected by STORAGE_BACKEND."""
    if settings.storage_backend == "memory":
        logger.warning("Using in-memory registration store; data is lost on restart")
        return InMemoryRegistrationRepository()
    if pool is None:
        raise RuntimeError("PostgreSQL backend selected but no connection pool was created")
    return PostgresRegistrationRepository(pool)


def build_email_sender(settings: Settings, http_client: httpx.Client | None) -> EmailSender:
    """Create the mail adapter selected by MAIL_BACKEND."""
    event = settings.event_details()
    if settings.mail_backend == "brevo":
        if http_client is None:
            raise RuntimeError("Brevo mail backend selected but no HTTP client was created")
        if not settings.brevo_api_key:
            logger.warning("BREVO_API_KEY is empty; confirmation emails will be rejected")
        return BrevoEmailSender(
            client=http_client,
            api_key=settings.brevo_api_key,
            event=event,
            api_url=settings.brevo_api_url,
        )
    if settings.mail_backend == "smtp":
        return SmtpEmailSender(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_username,
            password=settings.smtp_password,
            event=event,
            timeout=settings.mail_timeout_seconds,
        )
    return ConsoleEmailSender(event)


def get_pool(request: Request) -> ConnectionPool | None:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    It is None when the in-memory backend is active.
    """
    return getattr(request.app.state, "pool", None)


def get_repository(request: Request) -> RegistrationRepository:
    """Get the process-wide repository from app state."""
    return request.app.state.repository


def get_email_sender(request: Request) -> EmailSender:
    """Get the process-wide email sender from app state."""
    return request.app.state.email_sender


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the repository, email sender and notification policy.
    """
    return RegistrationService(
        repository=get_repository(request),
        email_sender=get_email_sender(request),
        block_on_email_failure=get_settings().block_on_email_failure,
    )


async def read_json_body(request: Request) -> object:
    """
    Decode the request body as JSON.

    Returns None for an empty or malformed body; the domain treats any
    non-object payload as a submission with every field missing.
    """
    try:
        return await request.json()
    except ValueError:
        logger.info("Register request with unreadable JSON body")
        return None
