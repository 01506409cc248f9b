"""Challenge nonce generation."""

from __future__ import annotations

import logging
import secrets

from keyproof.core.settings import MIN_NONCE_BYTES

logger = logging.getLogger(__name__)


class NonceGenerator:
    """Mint unpredictable single-use challenge values.

    Issuance is stateless: nothing records which nonces were handed out, so a
    nonce stays usable until a successful verification consumes it.
    """

    def __init__(self, nonce_bytes: int = 32) -> None:
        if nonce_bytes < MIN_NONCE_BYTES:
            raise ValueError(f"Nonces need at least {MIN_NONCE_BYTES} bytes of entropy")
        self.nonce_bytes = nonce_bytes

    def issue(self) -> str:
        """Return a fresh hex-encoded nonce."""
        nonce = secrets.token_hex(self.nonce_bytes)
        logger.debug("Generated nonce: %s", nonce)
        return nonce
