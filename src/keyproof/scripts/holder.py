# src/keyproof/scripts/holder.py
"""
Demonstration holder for the key ownership verifier.

Generates a fresh P-256 key pair, asks the verifier for a nonce, signs the
nonce into an ES256 JWT and submits the token with the public key:

    python -m keyproof.scripts.holder --verifier-url http://localhost:8080
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import Any

import httpx
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from jose import jwt

from keyproof.core.security import PINNED_ALGORITHM
from keyproof.core.settings import settings

HTTP_TIMEOUT_SECONDS = 10.0


def generate_key_pair() -> tuple[ec.EllipticCurvePrivateKey, str]:
    """Generate an ES256 key pair.

    Returns:
        Tuple of (private_key, public_key_pem)
    """
    private_key = ec.generate_private_key(ec.SECP256R1())
    public_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("ascii")
    return private_key, public_pem


def sign_nonce(
    private_key: ec.EllipticCurvePrivateKey,
    nonce: str,
    *,
    ttl_seconds: int | None = None,
    extra_claims: dict[str, Any] | None = None,
) -> str:
    """Sign a nonce into a compact ES256 JWT.

    Args:
        private_key: Holder's P-256 private key
        nonce: Nonce issued by the verifier
        ttl_seconds: Token lifetime placed in ``exp``; defaults to settings
        extra_claims: Additional claims merged into the payload

    Returns:
        Compact JWS string
    """
    ttl = settings.proof_ttl_seconds if ttl_seconds is None else ttl_seconds
    issued_at = int(time.time())
    claims: dict[str, Any] = {"nonce": nonce, "iat": issued_at, "exp": issued_at + ttl}
    if extra_claims:
        claims.update(extra_claims)
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")
    token: str = jwt.encode(claims, private_pem, algorithm=PINNED_ALGORITHM)
    return token


def run(verifier_url: str, client: httpx.Client, *, verbose: bool = False) -> dict[str, Any]:
    """Run the full proof flow against a verifier.

    Args:
        verifier_url: Base URL of the verifier service
        client: HTTP client used for both requests
        verbose: Print each step to stdout

    Returns:
        The verifier's JSON response (``verified`` and ``message``)

    Raises:
        httpx.HTTPError: If either request fails or the nonce request is rejected
    """
    base = verifier_url.rstrip("/")

    def _say(message: str) -> None:
        if verbose:
            print(message)

    _say("Generating a new ES256 key pair...")
    private_key, public_pem = generate_key_pair()

    _say("Requesting a nonce from the verifier...")
    nonce_response = client.get(f"{base}/api/nonce")
    nonce_response.raise_for_status()
    nonce = nonce_response.json()["nonce"]
    _say(f"Received nonce: {nonce}")

    _say("Signing the nonce with our private key...")
    token = sign_nonce(private_key, nonce)

    _say("Sending verification request to the verifier...")
    verify_response = client.post(
        f"{base}/api/verify",
        json={"jwt": token, "public_key_pem": public_pem},
    )
    result: dict[str, Any] = verify_response.json()
    return result


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Prove ownership of a fresh ES256 key")
    parser.add_argument(
        "--verifier-url",
        default=settings.verifier_url,
        help=f"Verifier base URL (default: {settings.verifier_url})",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    namespace = parse_args(sys.argv[1:] if argv is None else argv)

    print("Key Ownership Prover - Holder")
    print("================================\n")
    with httpx.Client(timeout=HTTP_TIMEOUT_SECONDS) as client:
        try:
            result = run(namespace.verifier_url, client, verbose=True)
        except httpx.HTTPError as exc:
            print(f"Request to verifier failed: {exc}", file=sys.stderr)
            return 1

    verified = bool(result.get("verified"))
    print(f"\nVerification result: {'SUCCESS' if verified else 'FAILED'}")
    print(f"Message: {result.get('message')}")
    return 0 if verified else 1


if __name__ == "__main__":
    raise SystemExit(main())
