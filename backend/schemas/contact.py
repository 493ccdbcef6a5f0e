"""
Contact Schemas
===============
Pydantic models for the public contact form.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ContactSubmission(BaseModel):
    """
    Contact form payload.

    Fields accept any JSON value; the endpoint answers missing, mistyped
    or short values with the form's own error envelope.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: Any = None
    email: Any = None
    topic: Any = None
    message: Any = None
    # Honeypot, hidden from humans
    company_website: Any = Field(default=None, alias="companyWebsite")


class ContactResponse(BaseModel):
    """Contact form result."""

    ok: bool
    id: str | None = None
    error: str | None = None
