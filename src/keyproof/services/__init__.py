"""Business logic services for the verifier."""

from .attestation import AttestationService
from .nonce import NonceGenerator
from .replay import ReplayGuard
from .verification import VerificationEngine, VerificationOutcome

__all__ = [
    "AttestationService",
    "NonceGenerator",
    "ReplayGuard",
    "VerificationEngine",
    "VerificationOutcome",
]
