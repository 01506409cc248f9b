"""Process-wide logging setup for the verifier service."""

from __future__ import annotations

import logging

from keyproof.core.settings import Settings

# Third-party loggers that are chatty at INFO.
_QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")

TOKEN_PREVIEW_CHARS = 16


def setup_logging(config: Settings) -> None:
    """Configure the root logger from settings.

    Args:
        config: Settings providing ``log_level`` and ``log_format``
    """
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=config.log_format)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def preview_token(token: str) -> str:
    """Return a short, log-safe prefix of a signed token."""
    if len(token) <= TOKEN_PREVIEW_CHARS:
        return token
    return f"{token[:TOKEN_PREVIEW_CHARS]}..."
