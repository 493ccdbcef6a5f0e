"""
API Package
===========
HTTP routes for the billing backend.
"""

from backend.api.router import api_router

__all__ = ["api_router"]
