"""
API routes - Registration endpoint.

This module defines the HTTP endpoint:
- POST /api/register - Validate, store and confirm an event registration

Every outcome is reported as {"message": ...} from inside the route, so
error responses also pass through the CORS middleware.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_registration_service, read_json_body
from src.api.models import (
    DUPLICATE_MESSAGE,
    MISSING_FIELDS_MESSAGE,
    REGISTERED_MESSAGE,
    SERVER_ERROR_MESSAGE,
    MessageResponse,
    RegisterRequest,
)
from src.domain.exceptions import (
    AlreadyRegistered,
    NotificationFailed,
    RequiredFieldsMissing,
    StorageUnavailable,
)
from src.domain.registration import RegistrationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["registration"])


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": MessageResponse, "description": "Required field missing or blank"},
        409: {"model": MessageResponse, "description": "Email or contact number already registered"},
        500: {"model": MessageResponse, "description": "Unexpected server error"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": RegisterRequest.model_json_schema()}},
        }
    },
    summary="Register for the event",
    description="Submit attendee details. A confirmation email is sent to the "
    "registered address on success.",
)
def register(
    payload: object = Depends(read_json_body),
    service: RegistrationService = Depends(get_registration_service),
) -> MessageResponse | JSONResponse:
    """
    Register an attendee and send the confirmation email.

    - **fullName**, **email**, **contactNumber**, **currentYear**, **branch**: required
    - **purpose**: optional
    """
    logger.info("POST /api/register")
    try:
        service.submit(payload)
    except RequiredFieldsMissing as e:
        logger.info("Registration rejected, missing fields: %s", e)
        return _message(status.HTTP_400_BAD_REQUEST, MISSING_FIELDS_MESSAGE)
    except AlreadyRegistered:
        return _message(status.HTTP_409_CONFLICT, DUPLICATE_MESSAGE)
    except (StorageUnavailable, NotificationFailed):
        logger.exception("An error occurred during the registration process")
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)
    except Exception:
        logger.exception("Unexpected error during the registration process")
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)
    return MessageResponse(message=REGISTERED_MESSAGE)
