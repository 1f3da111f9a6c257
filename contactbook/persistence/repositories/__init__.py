"""Repository implementations."""

from contactbook.persistence.repositories.base import BaseRepository
from contactbook.persistence.repositories.contact_repository import ContactRepository
from contactbook.persistence.repositories.user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "ContactRepository",
    "UserRepository",
]
