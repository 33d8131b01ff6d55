"""
Contact board models
"""
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import Base


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    # sqlite hands timestamps back naive; they were written as UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


class User(Base):
    """Contact submitter, keyed by email"""
    __tablename__ = "users"

    email = Column(String(255), primary_key=True)
    name = Column(Text, nullable=False)

    messages = relationship("Message", back_populates="user")

    def __repr__(self):
        return f"<User(email='{self.email}', name='{self.name}')>"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "email": self.email,
            "name": self.name,
        }


class Message(Base):
    """A single contact submission, immutable once written"""
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    subject = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    user_email = Column("userEmail", String(255), ForeignKey("users.email"), nullable=False, index=True)
    created_at = Column(
        "createdAt",
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True
    )

    user = relationship("User", back_populates="messages")

    def __repr__(self):
        return f"<Message(id={self.id}, user_email='{self.user_email}', subject='{self.subject}')>"

    def to_dict(self, include_user: bool = False) -> Dict[str, Any]:
        """Convert to dictionary for API responses and channel events"""
        data = {
            "id": self.id,
            "subject": self.subject,
            "content": self.content,
            "userEmail": self.user_email,
            "createdAt": _isoformat(self.created_at),
        }
        if include_user:
            data["user"] = self.user.to_dict() if self.user is not None else None
        return data
