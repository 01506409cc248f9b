"""Operational endpoints for inspecting and resetting consumed nonces.

These are not part of the proof protocol; they exist for operators and test
harnesses and can be switched off with ``ADMIN_ENDPOINTS_ENABLED=false``.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from keyproof.api.v1.dependencies import AttestationServiceDep, require_admin_endpoints
from keyproof.schemas.attestation import ClearNoncesResponse, NonceListResponse

router = APIRouter(tags=["admin"], dependencies=[Depends(require_admin_endpoints)])


@router.get("/list-nonces", response_model=NonceListResponse)
async def list_nonces(service: AttestationServiceDep) -> NonceListResponse:
    """Return every nonce consumed since start-up or the last clear."""
    nonces = service.consumed_nonces()
    return NonceListResponse(nonce_count=len(nonces), nonces=nonces)


@router.post("/clear-nonces", response_model=ClearNoncesResponse)
async def clear_nonces(service: AttestationServiceDep) -> ClearNoncesResponse:
    """Forget all consumed nonces, re-opening them for use."""
    removed = service.clear_consumed()
    return ClearNoncesResponse(message=f"Cleared {removed} used nonces")
