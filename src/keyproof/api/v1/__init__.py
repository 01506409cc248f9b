"""Version 1 API endpoints."""

from .endpoints import admin_router, attestation_router

__all__ = [
    "admin_router",
    "attestation_router",
]
