"""
Contact-related schemas
"""
from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator


class ContactRequest(BaseModel):
    """Request schema for a contact submission"""
    name: str
    subject: str
    email: str = Field(min_length=1, max_length=255)
    message: str

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("email must not be blank")
        return v

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Ana",
                "subject": "Hi",
                "email": "a@x.com",
                "message": "Hello"
            }
        }
    }


class ContactResponse(BaseModel):
    """Response schema for a successful contact submission"""
    success: bool = True
    message: str = "Message sent successfully"
    data: Dict[str, Any]


class MessagesResponse(BaseModel):
    """Response schema for the message listing"""
    success: bool = True
    data: List[Dict[str, Any]]


class ErrorResponse(BaseModel):
    """Schema for error responses"""
    success: bool = False
    error: str
