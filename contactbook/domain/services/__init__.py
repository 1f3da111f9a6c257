"""Domain services."""

from contactbook.domain.services.contact_service import ContactResult, ContactService

__all__ = ["ContactResult", "ContactService"]
