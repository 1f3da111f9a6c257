"""Contact response schemas."""

from datetime import datetime

from pydantic import BaseModel

from contactbook.domain.services.contact_service import ContactResult


class PhoneResponse(BaseModel):
    """Phone sub-record. ``id`` is None while unsaved."""

    id: int | None
    phone: str | None
    phone_type: str | None

    class Config:
        from_attributes = True


class ContactResponse(BaseModel):
    """Contact with its phones, saved or not."""

    id: int | None
    firstname: str | None
    lastname: str | None
    email: str | None
    name: str
    phones: list[PhoneResponse]
    created_at: datetime | None
    updated_at: datetime | None

    class Config:
        from_attributes = True


class ContactsListResponse(BaseModel):
    """Contacts list response."""

    contacts: list[ContactResponse]
    total: int


class ValidationFailureResponse(BaseModel):
    """One failing field."""

    field: str
    reason: str
    message: str


class ContactValidationErrorResponse(BaseModel):
    """Rejected write: every failure plus the attempted contact for redisplay."""

    errors: dict[str, list[str]]
    details: list[ValidationFailureResponse]
    contact: ContactResponse

    @classmethod
    def from_result(cls, result: ContactResult) -> "ContactValidationErrorResponse":
        return cls(
            errors=result.errors.to_dict(),
            details=[
                ValidationFailureResponse(field=f.field, reason=f.reason, message=f.message)
                for f in result.errors
            ],
            contact=ContactResponse.model_validate(result.contact),
        )
