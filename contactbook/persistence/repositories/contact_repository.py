"""Contact repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from contactbook.persistence.models.contact import Contact
from contactbook.persistence.repositories.base import BaseRepository

_LIKE_ESCAPE = "\\"


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value is matched literally."""
    return (
        value.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


class ContactRepository(BaseRepository[Contact]):
    """Repository for Contact entities."""

    # Deterministic order shared by the full scan and the letter filter
    ORDERING = (Contact.lastname, Contact.firstname, Contact.id)

    def __init__(self, session: AsyncSession):
        """Initialize contact repository."""
        super().__init__(Contact, session)

    async def list_ordered(self) -> list[Contact]:
        """List all contacts ordered by lastname, then firstname."""
        stmt = select(Contact).order_by(*self.ORDERING)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_lastname_prefix(self, prefix: str) -> list[Contact]:
        """List contacts whose lastname starts with prefix, ignoring case.

        Args:
            prefix: Letter or short string to match

        Returns:
            Matching contacts ordered by lastname, firstname, id
        """
        pattern = _escape_like(prefix) + "%"
        stmt = (
            select(Contact)
            .where(Contact.lastname.ilike(pattern, escape=_LIKE_ESCAPE))
            .order_by(*self.ORDERING)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        """Check whether another contact already uses this exact email.

        Args:
            email: Email to look up (case-sensitive)
            exclude_id: Contact ID to ignore, used when a contact keeps its own email

        Returns:
            True if a different contact holds the email
        """
        stmt = select(Contact.id).where(Contact.email == email)
        if exclude_id is not None:
            stmt = stmt.where(Contact.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None
