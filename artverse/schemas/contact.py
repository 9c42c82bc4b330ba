# ==============================================================================
# CONTACT SCHEMAS - Public Contact Form
# ==============================================================================

from __future__ import annotations

from pydantic import EmailStr, Field

from artverse.schemas.base import BaseSchema


class ContactCreate(BaseSchema):
    """Schema for a contact form submission."""

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1, max_length=5000)


class ContactReceipt(BaseSchema):
    """Acknowledgement of a stored submission."""

    id: str
