"""Application settings and configuration.

This module defines all configuration options for the key ownership verifier.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 16 bytes keeps every nonce at or above 128 bits of entropy.
MIN_NONCE_BYTES = 16


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files. The
    signature algorithm is intentionally absent: it is pinned in
    ``keyproof.core.security`` and cannot be changed at runtime.
    """

    # Application metadata
    app_name: str = Field(default="Key Ownership Verifier", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")

    # HTTP server
    host: str = Field(default="0.0.0.0", alias="VERIFIER_HOST")
    port: int = Field(default=8080, alias="VERIFIER_PORT")
    api_prefix: str = Field(default="/api", alias="API_PREFIX")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        alias="LOG_FORMAT",
    )

    # Challenge issuance
    nonce_bytes: int = Field(default=32, ge=MIN_NONCE_BYTES, alias="NONCE_BYTES")

    # Proof validation
    jwt_leeway_seconds: int = Field(default=60, ge=0, alias="JWT_LEEWAY_SECONDS")
    jwt_require_exp: bool = Field(default=False, alias="JWT_REQUIRE_EXP")

    # Operational endpoints for listing and clearing consumed nonces
    admin_endpoints_enabled: bool = Field(default=True, alias="ADMIN_ENDPOINTS_ENABLED")

    # Holder demo client
    verifier_url: str = Field(default="http://verifier:8080", alias="VERIFIER_URL")
    proof_ttl_seconds: int = Field(default=300, gt=0, alias="PROOF_TTL_SECONDS")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
