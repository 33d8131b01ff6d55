"""
SQLAlchemy Models for the Contact Board service
"""
from .base import Base, create_engine_from_settings, create_session_factory, init_db
from .contact import Message, User

__all__ = [
    "Base",
    "Message",
    "User",
    "create_engine_from_settings",
    "create_session_factory",
    "init_db",
]
