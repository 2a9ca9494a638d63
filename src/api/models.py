"""
API request and response models.

Pydantic models for OpenAPI schema generation and response serialization.
The register endpoint validates input in the domain layer so that missing
fields produce the 400 contract instead of FastAPI's 422.
"""

from pydantic import BaseModel, Field

REGISTERED_MESSAGE = "Registration successful! A confirmation email has been sent."
MISSING_FIELDS_MESSAGE = "Please fill out all required fields."
DUPLICATE_MESSAGE = "This email or contact number has already been registered."
SERVER_ERROR_MESSAGE = "An unexpected server error occurred."


class RegisterRequest(BaseModel):
    """Request model for event registration (documentation only)."""

    fullName: str = Field(..., description="Registrant's full name")
    email: str = Field(..., description="Email address, unique per registration")
    contactNumber: str = Field(..., description="Contact number, unique per registration")
    currentYear: str = Field(..., description="Current year of study")
    branch: str = Field(..., description="Branch of study")
    purpose: str | None = Field(default=None, description="Optional reason for attending")


class MessageResponse(BaseModel):
    """Response body shared by every register outcome."""

    message: str
