"""Database models."""

from contactbook.persistence.models.contact import Contact
from contactbook.persistence.models.phone import Phone
from contactbook.persistence.models.user import User

__all__ = [
    "Contact",
    "Phone",
    "User",
]
