# src/keyproof/main.py
"""Main entry point for the key ownership verifier."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from keyproof.api.v1 import admin_router, attestation_router
from keyproof.core.logging_config import setup_logging
from keyproof.core.security import PINNED_ALGORITHM
from keyproof.core.settings import Settings, settings
from keyproof.schemas.attestation import VerificationResponse
from keyproof.services.attestation import AttestationService

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "internal verification error"


async def _internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Reported as an operational failure, never as a rejection; the replay
    # guard keeps its consumed set.
    logger.exception("Unhandled error while processing %s %s", request.method, request.url.path)
    body = VerificationResponse(verified=False, message=INTERNAL_ERROR_MESSAGE)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(),
    )


def create_app(config: Settings | None = None) -> FastAPI:
    """Build the FastAPI application with its own attestation service.

    Args:
        config: Settings to use; defaults to the process-wide settings

    Returns:
        A configured application. Each call owns a fresh replay guard.
    """
    config = config or settings
    application = FastAPI(
        title=config.app_name,
        description="Challenge-response proof of private key possession",
        version=config.app_version,
        debug=config.debug,
    )
    application.state.settings = config
    application.state.attestation_service = AttestationService.from_settings(config)

    application.include_router(attestation_router, prefix=config.api_prefix)
    application.include_router(admin_router, prefix=config.api_prefix)
    application.add_exception_handler(Exception, _internal_error_handler)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint to verify the service is running."""
        return {"status": "ok"}

    @application.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint with basic information about the API."""
        return {
            "name": config.app_name,
            "version": config.app_version,
            "algorithm": PINNED_ALGORITHM,
            "docs": "/docs",
        }

    return application


app = create_app()


def run() -> None:
    """Start the verifier with uvicorn."""
    import uvicorn

    setup_logging(settings)
    logger.info("Starting verifier service on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
