"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .attestation import (
    ClearNoncesResponse,
    NonceListResponse,
    NonceResponse,
    VerificationRequest,
    VerificationResponse,
)

__all__ = [
    "ClearNoncesResponse",
    "NonceListResponse",
    "NonceResponse",
    "VerificationRequest",
    "VerificationResponse",
]
