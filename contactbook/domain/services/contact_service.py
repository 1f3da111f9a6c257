"""Contact service: the Contact aggregate's writes, lookups and queries."""

import logging
from dataclasses import dataclass, field

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from contactbook.domain.attributes import ContactAttributes, PhoneAttributes
from contactbook.domain.errors import ContactNotFoundError, PhoneNotFoundError
from contactbook.domain.validation import TAKEN, ValidationErrors, is_blank, validate_presence
from contactbook.persistence.models.contact import Contact
from contactbook.persistence.models.phone import Phone
from contactbook.persistence.repositories.contact_repository import ContactRepository

logger = logging.getLogger(__name__)

# Phone slots offered by a blank contact form, in display order
NEW_CONTACT_PHONE_TYPES = ("home", "office", "mobile")


@dataclass
class ContactResult:
    """Outcome of a create or update.

    On success ``contact`` is the persisted contact. On failure it is an
    unsaved contact carrying the attempted values (phones included) so the
    caller can redisplay them, and ``errors`` lists every failing field.
    """

    contact: Contact
    errors: ValidationErrors = field(default_factory=ValidationErrors)

    @property
    def ok(self) -> bool:
        return not self.errors


class ContactService:
    """Service for contact management."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize contact service."""
        self.session = session
        self.contact_repo = ContactRepository(session)

    async def list_all(self) -> list[Contact]:
        """List every contact ordered by lastname, then firstname."""
        return await self.contact_repo.list_ordered()

    async def by_letter(self, letter: str) -> list[Contact]:
        """List contacts whose lastname starts with letter (case-insensitive).

        Args:
            letter: Letter or short prefix

        Returns:
            Matching contacts ordered by lastname; ties fall back to
            firstname, then id. Empty when nothing matches.
        """
        return await self.contact_repo.list_by_lastname_prefix(letter)

    async def find(self, contact_id: int) -> Contact:
        """Get a contact by ID.

        Raises:
            ContactNotFoundError: If no contact has this ID
        """
        contact = await self.contact_repo.get_by_id(contact_id)
        if contact is None:
            raise ContactNotFoundError(contact_id)
        return contact

    def build_new(self) -> Contact:
        """Unsaved contact with one blank phone per default phone type."""
        contact = Contact()
        contact.phones = [Phone(phone_type=phone_type) for phone_type in NEW_CONTACT_PHONE_TYPES]
        return contact

    async def create(self, attrs: ContactAttributes) -> ContactResult:
        """Validate and persist a new contact together with its phones.

        Args:
            attrs: Permitted contact attributes

        Returns:
            ContactResult with the saved contact, or the unsaved attempt and
            its validation errors. Nothing is written on failure.
        """
        contact = self._build(attrs)
        errors = await self._validate(contact)
        if errors:
            logger.info(f"Contact create rejected - fields={sorted(errors.fields)}")
            return ContactResult(contact, errors)

        self.session.add(contact)
        try:
            await self.session.commit()
        except IntegrityError:
            # Another writer claimed the email between the check and the commit
            await self.session.rollback()
            logger.warning("Contact create lost email uniqueness race")
            errors.add("email", TAKEN)
            return ContactResult(self._build(attrs), errors)

        await self.session.refresh(contact)
        logger.info(f"Contact created - contact_id={contact.id}, phones={len(contact.phones)}")
        return ContactResult(contact)

    async def update(self, contact_id: int, attrs: ContactAttributes) -> ContactResult:
        """Apply supplied attributes to a contact and persist if still valid.

        Fields not supplied stay as they are. Phones with an ``id`` are
        patched in place, phones without one are appended.

        Args:
            contact_id: Contact ID
            attrs: Permitted contact attributes (partial)

        Returns:
            ContactResult with the updated contact, or the rejected attempt
            and its validation errors. The stored contact is untouched on
            failure.

        Raises:
            ContactNotFoundError: If no contact has this ID
            PhoneNotFoundError: If a phone id does not belong to the contact
        """
        contact = await self.find(contact_id)

        attempt = self._copy(contact)
        self._assign(attempt, attrs)
        errors = await self._validate(attempt, exclude_id=contact.id)
        if errors:
            logger.info(
                f"Contact update rejected - contact_id={contact_id}, fields={sorted(errors.fields)}"
            )
            return ContactResult(attempt, errors)

        self._assign(contact, attrs)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            await self.session.refresh(contact)
            logger.warning(f"Contact update lost email uniqueness race - contact_id={contact_id}")
            errors.add("email", TAKEN)
            return ContactResult(attempt, errors)

        await self.session.refresh(contact)
        logger.info(f"Contact updated - contact_id={contact_id}")
        return ContactResult(contact)

    async def destroy(self, contact_id: int) -> None:
        """Delete a contact and all of its phones.

        Raises:
            ContactNotFoundError: If no contact has this ID
        """
        deleted = await self.contact_repo.delete(contact_id)
        if not deleted:
            raise ContactNotFoundError(contact_id)
        logger.info(f"Contact deleted - contact_id={contact_id}")

    async def _validate(self, contact: Contact, exclude_id: int | None = None) -> ValidationErrors:
        """Run presence and uniqueness rules together."""
        errors = validate_presence(contact)
        if not is_blank(contact.email) and await self.contact_repo.email_taken(
            contact.email, exclude_id=exclude_id
        ):
            errors.add("email", TAKEN)
        return errors

    @staticmethod
    def _build(attrs: ContactAttributes) -> Contact:
        contact = Contact(**attrs.model_dump(exclude={"phones"}))
        contact.phones = [
            Phone(phone=phone_attrs.phone, phone_type=phone_attrs.phone_type)
            for phone_attrs in attrs.phones or []
        ]
        return contact

    @staticmethod
    def _copy(contact: Contact) -> Contact:
        """Detached copy of a stored contact to try changes on."""
        attempt = Contact(
            id=contact.id,
            firstname=contact.firstname,
            lastname=contact.lastname,
            email=contact.email,
            created_at=contact.created_at,
            updated_at=contact.updated_at,
        )
        attempt.phones = [
            Phone(id=phone.id, phone=phone.phone, phone_type=phone.phone_type)
            for phone in contact.phones
        ]
        return attempt

    @staticmethod
    def _assign(contact: Contact, attrs: ContactAttributes) -> None:
        for name, value in attrs.contact_fields().items():
            setattr(contact, name, value)

        existing = {phone.id: phone for phone in contact.phones}
        for phone_attrs in attrs.phones or []:
            _assign_phone(contact, existing, phone_attrs)


def _assign_phone(contact: Contact, existing: dict[int, Phone], attrs: PhoneAttributes) -> None:
    changes = attrs.model_dump(exclude_unset=True, exclude={"id"})
    if attrs.id is None:
        contact.phones.append(Phone(**changes))
        return

    phone = existing.get(attrs.id)
    if phone is None:
        raise PhoneNotFoundError(attrs.id)
    for name, value in changes.items():
        setattr(phone, name, value)
