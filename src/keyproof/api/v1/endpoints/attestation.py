"""Challenge issuance and proof verification endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from keyproof.api.v1.dependencies import AttestationServiceDep
from keyproof.schemas.attestation import (
    NonceResponse,
    VerificationRequest,
    VerificationResponse,
)

router = APIRouter(tags=["attestation"])


@router.get("/nonce", response_model=NonceResponse)
async def generate_nonce(service: AttestationServiceDep) -> NonceResponse:
    """Issue a single-use challenge for the holder to sign."""
    return NonceResponse(nonce=service.request_nonce())


@router.post("/verify", response_model=VerificationResponse)
def verify_attestation(
    payload: VerificationRequest,
    response: Response,
    service: AttestationServiceDep,
) -> VerificationResponse:
    """Verify a signed proof of key possession.

    Runs in the threadpool: signature checks are CPU-bound and concurrent
    requests are serialised only by the replay guard's lock.

    Returns:
        The outcome with 200 when verified and 400 when rejected
    """
    outcome = service.submit_proof(payload.jwt, payload.public_key_pem)
    if not outcome.verified:
        response.status_code = status.HTTP_400_BAD_REQUEST
    return VerificationResponse(verified=outcome.verified, message=outcome.reason)
