"""Tests for the consumed-nonce listing and reset endpoints."""

from fastapi import status
from fastapi.testclient import TestClient

from keyproof.main import create_app
from keyproof.scripts.holder import sign_nonce
from tests.conftest import TEST_BASE_URL


def _verify(client, private_key, public_pem: str, nonce: str) -> int:
    response = client.post(
        "/api/verify",
        json={"jwt": sign_nonce(private_key, nonce), "public_key_pem": public_pem},
    )
    return response.status_code


def test_list_nonces_reports_consumed_values(client, key_pair) -> None:
    private_key, public_pem = key_pair
    _verify(client, private_key, public_pem, "b")
    _verify(client, private_key, public_pem, "a")

    response = client.get("/api/list-nonces")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"nonce_count": 2, "nonces": ["a", "b"]}


def test_clear_nonces_reopens_consumed_nonce(client, key_pair) -> None:
    private_key, public_pem = key_pair
    assert _verify(client, private_key, public_pem, "n1") == status.HTTP_200_OK
    assert _verify(client, private_key, public_pem, "n1") == status.HTTP_400_BAD_REQUEST

    response = client.post("/api/clear-nonces")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "Cleared 1 used nonces"}
    assert client.get("/api/list-nonces").json()["nonce_count"] == 0
    assert _verify(client, private_key, public_pem, "n1") == status.HTTP_200_OK


def test_admin_endpoints_can_be_disabled(test_settings) -> None:
    config = test_settings.model_copy(update={"admin_endpoints_enabled": False})

    with TestClient(create_app(config), base_url=TEST_BASE_URL) as client:
        assert client.get("/api/list-nonces").status_code == status.HTTP_404_NOT_FOUND
        assert client.post("/api/clear-nonces").status_code == status.HTTP_404_NOT_FOUND
        assert client.get("/api/nonce").status_code == status.HTTP_200_OK
