"""Issuance and verification entry points used by the API layer."""

from __future__ import annotations

from keyproof.core.settings import Settings
from keyproof.services.nonce import NonceGenerator
from keyproof.services.replay import ReplayGuard
from keyproof.services.verification import VerificationEngine, VerificationOutcome


class AttestationService:
    """Sequence nonce issuance and proof verification.

    Holds no policy of its own; one instance (and therefore one replay guard)
    is created per application.
    """

    def __init__(
        self,
        generator: NonceGenerator,
        engine: VerificationEngine,
        replay_guard: ReplayGuard,
    ) -> None:
        self.generator = generator
        self.engine = engine
        self.replay_guard = replay_guard

    @classmethod
    def from_settings(cls, config: Settings) -> AttestationService:
        """Build an isolated service with its own replay guard."""
        replay_guard = ReplayGuard()
        engine = VerificationEngine(
            replay_guard,
            leeway=config.jwt_leeway_seconds,
            require_exp=config.jwt_require_exp,
        )
        return cls(NonceGenerator(config.nonce_bytes), engine, replay_guard)

    def request_nonce(self) -> str:
        return self.generator.issue()

    def submit_proof(self, signed_token: str, public_key_material: str) -> VerificationOutcome:
        return self.engine.verify(signed_token, public_key_material)

    def consumed_nonces(self) -> list[str]:
        return self.replay_guard.snapshot()

    def clear_consumed(self) -> int:
        return self.replay_guard.clear()
