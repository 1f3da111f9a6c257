"""Contact model."""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from contactbook.persistence.database import Base

if TYPE_CHECKING:
    from contactbook.persistence.models.phone import Phone

TEXT_MAX_LENGTH = 255


class Contact(Base):
    """Contact model owning an ordered set of phone numbers."""

    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, index=True)
    firstname = Column(String(TEXT_MAX_LENGTH), nullable=False)
    lastname = Column(String(TEXT_MAX_LENGTH), nullable=False, index=True)
    email = Column(String(TEXT_MAX_LENGTH), nullable=False, unique=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    phones = relationship(
        "Phone",
        back_populates="contact",
        cascade="all, delete-orphan",
        order_by="Phone.id",
        lazy="selectin",
    )

    @property
    def name(self) -> str:
        """Full name, firstname and lastname joined by a single space."""
        return f"{self.firstname or ''} {self.lastname or ''}"

    def __repr__(self) -> str:
        return f"<Contact(id={self.id}, lastname={self.lastname}, email={self.email})>"
