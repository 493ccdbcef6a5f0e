"""
Business Services
=================
Service layer for token checkout and the contact form.
"""

from backend.services.contact import ContactService
from backend.services.tokens import TokenService

__all__ = ["ContactService", "TokenService"]
