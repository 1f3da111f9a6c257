"""Phone model."""

from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from contactbook.persistence.database import Base

if TYPE_CHECKING:
    from contactbook.persistence.models.contact import Contact

PHONE_MAX_LENGTH = 50


class Phone(Base):
    """Phone number owned by exactly one contact."""

    __tablename__ = "phones"

    id = Column(Integer, primary_key=True, index=True)
    contact_id = Column(Integer, ForeignKey("contacts.id", ondelete="CASCADE"), nullable=False, index=True)
    phone = Column(String(PHONE_MAX_LENGTH), nullable=True)
    phone_type = Column(String(PHONE_MAX_LENGTH), nullable=True)  # 'home', 'office', 'mobile', ...

    # Relationships
    contact = relationship("Contact", back_populates="phones")

    def __repr__(self) -> str:
        return f"<Phone(id={self.id}, contact_id={self.contact_id}, phone_type={self.phone_type})>"
