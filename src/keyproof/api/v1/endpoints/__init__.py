"""API endpoint modules for version 1."""

from .admin import router as admin_router
from .attestation import router as attestation_router

__all__ = [
    "admin_router",
    "attestation_router",
]
