"""API schemas package."""

from contactbook.api.schemas.contact import (
    ContactResponse,
    ContactsListResponse,
    ContactValidationErrorResponse,
    PhoneResponse,
    ValidationFailureResponse,
)

__all__ = [
    "ContactResponse",
    "ContactsListResponse",
    "ContactValidationErrorResponse",
    "PhoneResponse",
    "ValidationFailureResponse",
]
