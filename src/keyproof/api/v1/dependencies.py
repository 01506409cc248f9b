"""Shared API dependencies."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from keyproof.core.settings import Settings
from keyproof.services.attestation import AttestationService


def get_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""
    return request.app.state.settings


def get_attestation_service(request: Request) -> AttestationService:
    """Return the application's attestation service.

    The service (and its replay guard) is created once in ``create_app`` and
    shared by every request handled by that application.
    """
    return request.app.state.attestation_service


SettingsDep = Annotated[Settings, Depends(get_settings)]
AttestationServiceDep = Annotated[AttestationService, Depends(get_attestation_service)]


def require_admin_endpoints(config: SettingsDep) -> None:
    """Hide operational endpoints when they are disabled.

    Raises:
        HTTPException: 404 if ``admin_endpoints_enabled`` is false
    """
    if not config.admin_endpoints_enabled:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
