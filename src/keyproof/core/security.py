"""Signature primitives pinned to a single algorithm.

Only ES256 (ECDSA over P-256 with SHA-256) is accepted. The algorithm is a
module constant rather than a setting, and it is checked against the token
header before any key material is used, so a token cannot select its own
verification algorithm.
"""
from __future__ import annotations

from typing import Any

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from jose import JWTError, jwt

PINNED_ALGORITHM = "ES256"
PINNED_CURVE = ec.SECP256R1


class InvalidPublicKeyError(ValueError):
    """Raised when submitted key material is not a P-256 public key."""


def load_pinned_public_key(material: str) -> str:
    """Parse PEM public key material for the pinned curve.

    Args:
        material: PEM-encoded SubjectPublicKeyInfo text.

    Returns:
        The key re-serialised as normalised PEM text.

    Raises:
        InvalidPublicKeyError: If the material does not parse, is not an
            elliptic-curve key, or uses a curve other than P-256.
    """
    try:
        public_key = serialization.load_pem_public_key(material.strip().encode("utf-8"))
    except (ValueError, TypeError, UnsupportedAlgorithm) as err:
        raise InvalidPublicKeyError(f"Unable to parse public key: {err}") from err

    if not isinstance(public_key, ec.EllipticCurvePublicKey):
        raise InvalidPublicKeyError("Public key is not an elliptic-curve key")
    if not isinstance(public_key.curve, PINNED_CURVE):
        raise InvalidPublicKeyError(f"Unsupported curve: {public_key.curve.name}")

    pem = public_key.public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return pem.decode("ascii")


def decode_pinned_token(
    token: str,
    public_key_pem: str,
    *,
    leeway: int = 0,
    require_exp: bool = False,
) -> dict[str, Any]:
    """Verify an ES256 token and return its claims.

    Args:
        token: Compact JWS serialization.
        public_key_pem: PEM text returned by ``load_pinned_public_key``.
        leeway: Clock-skew allowance in seconds for time claims.
        require_exp: Reject tokens that carry no ``exp`` claim.

    Returns:
        The validated claims payload.

    Raises:
        JWTError: If the header names another algorithm, the signature does
            not validate, or a registered time claim is out of range.
    """
    header = jwt.get_unverified_header(token)
    algorithm = header.get("alg")
    if algorithm != PINNED_ALGORITHM:
        raise JWTError(f"The specified alg value is not allowed: {algorithm}")

    claims: dict[str, Any] = jwt.decode(
        token,
        public_key_pem,
        algorithms=[PINNED_ALGORITHM],
        options={
            "verify_aud": False,
            "require_exp": require_exp,
            "leeway": leeway,
        },
    )
    return claims
