"""Permitted input attributes for contact writes.

Only the fields declared here reach the service. Anything else in a request
payload is dropped during validation. Lengths match the column sizes so an
over-long value is rejected before it reaches the store.
"""

from pydantic import AliasChoices, BaseModel, Field

from contactbook.persistence.models.contact import TEXT_MAX_LENGTH
from contactbook.persistence.models.phone import PHONE_MAX_LENGTH


class PhoneAttributes(BaseModel):
    """Phone sub-record attributes.

    An ``id`` patches the contact's existing phone in place on update;
    without one a new phone is appended.
    """

    id: int | None = None
    phone: str | None = Field(default=None, max_length=PHONE_MAX_LENGTH)
    phone_type: str | None = Field(default=None, max_length=PHONE_MAX_LENGTH)

    class Config:
        extra = "ignore"


class ContactAttributes(BaseModel):
    """Contact attributes for create and update."""

    firstname: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    lastname: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    email: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    phones: list[PhoneAttributes] | None = Field(
        default=None,
        validation_alias=AliasChoices("phones", "phones_attributes"),
    )

    class Config:
        extra = "ignore"

    def contact_fields(self) -> dict[str, str | None]:
        """Scalar contact fields explicitly supplied by the caller."""
        return self.model_dump(exclude_unset=True, exclude={"phones"})
