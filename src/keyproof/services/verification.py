"""Proof-of-possession verification."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from jose import JWTError

from keyproof.core.logging_config import preview_token
from keyproof.core.security import (
    InvalidPublicKeyError,
    decode_pinned_token,
    load_pinned_public_key,
)
from keyproof.services.replay import ReplayGuard

logger = logging.getLogger(__name__)

NONCE_CLAIM = "nonce"

REASON_VERIFIED = "attestation verified successfully"
REASON_INVALID_KEY = "invalid public key format"
REASON_SIGNATURE_FAILED = "signature verification failed"
REASON_INVALID_NONCE = "invalid nonce extracted"
REASON_NONCE_USED = "nonce has already been used"


@dataclass(frozen=True)
class VerificationOutcome:
    """Result of a single verification call."""

    verified: bool
    reason: str

    @classmethod
    def accepted(cls) -> VerificationOutcome:
        return cls(verified=True, reason=REASON_VERIFIED)

    @classmethod
    def rejected(cls, reason: str) -> VerificationOutcome:
        return cls(verified=False, reason=reason)


def _extract_nonce(claims: dict[str, Any]) -> str | None:
    value = claims.get(NONCE_CLAIM)
    if not isinstance(value, str):
        return None
    nonce = value.strip()
    return nonce or None


class VerificationEngine:
    """Validate signed proofs and enforce single use of their nonces.

    Every step before the replay check is a pure function of the inputs, and
    signature work finishes before the guard's lock is touched.
    """

    def __init__(
        self,
        replay_guard: ReplayGuard,
        *,
        leeway: int = 60,
        require_exp: bool = False,
    ) -> None:
        self.replay_guard = replay_guard
        self.leeway = leeway
        self.require_exp = require_exp

    def verify(self, signed_token: str, public_key_material: str) -> VerificationOutcome:
        """Verify a signed token against submitted public key material.

        Args:
            signed_token: Compact ES256 JWS whose claims carry the nonce.
            public_key_material: PEM-encoded P-256 public key.

        Returns:
            The verification outcome. Rejections are returned, not raised.
        """
        logger.info("Received verification request with JWT: %s", preview_token(signed_token))

        try:
            public_key_pem = load_pinned_public_key(public_key_material)
        except InvalidPublicKeyError as err:
            logger.error("Failed to create decoding key from PEM: %s", err)
            return VerificationOutcome.rejected(REASON_INVALID_KEY)

        try:
            claims = decode_pinned_token(
                signed_token,
                public_key_pem,
                leeway=self.leeway,
                require_exp=self.require_exp,
            )
        except JWTError as err:
            logger.error("JWT verification failed: %s", err)
            return VerificationOutcome.rejected(f"{REASON_SIGNATURE_FAILED}: {err}")

        nonce = _extract_nonce(claims)
        if nonce is None:
            logger.error("Nonce extracted is missing or empty")
            return VerificationOutcome.rejected(REASON_INVALID_NONCE)

        if not self.replay_guard.try_consume(nonce):
            return VerificationOutcome.rejected(REASON_NONCE_USED)

        logger.info("Successfully verified attestation for nonce %s", nonce)
        return VerificationOutcome.accepted()
