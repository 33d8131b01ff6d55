"""
Pydantic Schemas for the Contact Board service
"""
from .contact import (
    ContactRequest,
    ContactResponse,
    ErrorResponse,
    MessagesResponse,
)

__all__ = [
    "ContactRequest",
    "ContactResponse",
    "ErrorResponse",
    "MessagesResponse",
]
