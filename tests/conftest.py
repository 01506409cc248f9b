# tests/conftest.py
from __future__ import annotations

import base64
import hashlib
import hmac
import json
from collections.abc import Iterator
from typing import Any

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from fastapi import FastAPI
from fastapi.testclient import TestClient
from jose import jwt

from keyproof.core.settings import Settings
from keyproof.main import create_app
from keyproof.scripts.holder import generate_key_pair
from keyproof.services.attestation import AttestationService
from keyproof.services.replay import ReplayGuard
from keyproof.services.verification import VerificationEngine

TEST_BASE_URL = "http://test"


def b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode().rstrip("=")


def b64url_decode(data: str) -> bytes:
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def private_pem(private_key: ec.EllipticCurvePrivateKey) -> str:
    return private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")


def encode_claims(
    private_key: ec.EllipticCurvePrivateKey,
    claims: dict[str, Any],
    algorithm: str = "ES256",
) -> str:
    """Sign arbitrary claims without the holder's default iat/exp."""
    return jwt.encode(claims, private_pem(private_key), algorithm=algorithm)


def forge_hmac_token(secret: bytes, claims: dict[str, Any], algorithm: str = "HS256") -> str:
    """Build an HMAC-signed token by hand, keyed with ``secret``.

    Reproduces the classic confusion attack where the verifier's public key
    text is reused as an HMAC secret.
    """
    digest = {"HS256": hashlib.sha256, "HS384": hashlib.sha384, "HS512": hashlib.sha512}[algorithm]
    header = b64url(json.dumps({"alg": algorithm, "typ": "JWT"}).encode())
    payload = b64url(json.dumps(claims).encode())
    signing_input = f"{header}.{payload}".encode()
    signature = hmac.new(secret, signing_input, digest).digest()
    return f"{header}.{payload}.{b64url(signature)}"


def unsigned_token(claims: dict[str, Any]) -> str:
    header = b64url(json.dumps({"alg": "none", "typ": "JWT"}).encode())
    payload = b64url(json.dumps(claims).encode())
    return f"{header}.{payload}."


@pytest.fixture()
def test_settings() -> Settings:
    """Settings built from defaults, independent of any .env file."""
    return Settings(_env_file=None)


@pytest.fixture()
def app(test_settings: Settings) -> FastAPI:
    return create_app(test_settings)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url=TEST_BASE_URL) as test_client:
        yield test_client


@pytest.fixture()
def attestation_service(app: FastAPI) -> AttestationService:
    """The service instance owned by the ``app`` fixture."""
    return app.state.attestation_service


@pytest.fixture()
def replay_guard() -> ReplayGuard:
    return ReplayGuard()


@pytest.fixture()
def engine(replay_guard: ReplayGuard) -> VerificationEngine:
    return VerificationEngine(replay_guard)


@pytest.fixture()
def key_pair() -> tuple[ec.EllipticCurvePrivateKey, str]:
    """Fresh P-256 key pair as (private_key, public_key_pem)."""
    return generate_key_pair()


@pytest.fixture()
def other_key_pair() -> tuple[ec.EllipticCurvePrivateKey, str]:
    return generate_key_pair()
