"""
API Router
==========
Main API router combining all endpoint modules.
"""

from fastapi import APIRouter

from backend.api.endpoints import contact, health, tokens

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(tokens.router, prefix="/tokens", tags=["Tokens"])
api_router.include_router(contact.router, prefix="/contact", tags=["Contact"])
