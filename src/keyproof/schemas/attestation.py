"""Schemas for nonce issuance and proof verification."""

from pydantic import BaseModel, Field


class NonceResponse(BaseModel):
    """Freshly issued challenge nonce."""

    nonce: str = Field(..., description="Opaque single-use challenge value")


class VerificationRequest(BaseModel):
    """Proof of possession submitted by a holder."""

    jwt: str = Field(..., description="Compact ES256 JWS whose claims include the nonce")
    public_key_pem: str = Field(..., description="PEM-encoded P-256 public key")


class VerificationResponse(BaseModel):
    """Outcome of a verification request."""

    verified: bool
    message: str


class NonceListResponse(BaseModel):
    """Consumed nonces currently held by the replay guard."""

    nonce_count: int = Field(..., ge=0)
    nonces: list[str]


class ClearNoncesResponse(BaseModel):
    """Acknowledgement of a replay guard reset."""

    message: str
