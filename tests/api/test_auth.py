import pytest
from unittest.mock import AsyncMock

from vacation_board.api.deps.dependencies import get_auth_service
from vacation_board.application.services.auth_service import AuthService
from vacation_board.boundary.graph import RemoteAPIError
from vacation_board.configs.identity import IdentitySettings


@pytest.fixture
def identity_client():
    return AsyncMock()


@pytest.fixture
def auth_client(client, identity_client):
    settings = IdentitySettings(
        _env_file=None,
        client_id="client-1",
        client_secret="s3cret",
        redirect_uri="http://localhost:5173",
        tenant_id="tenant-1",
    )
    service = AuthService(identity=identity_client, settings=settings)
    client.app.dependency_overrides[get_auth_service] = lambda: service
    return client


def test_client_config_hides_secret(auth_client):
    response = auth_client.get("/api/config")

    assert response.status_code == 200
    assert response.json() == {
        "clientId": "client-1",
        "redirectUri": "http://localhost:5173",
        "scope": "User.Read",
        "tenantId": "tenant-1",
    }


def test_token_exchange(auth_client, identity_client):
    identity_client.exchange_code.return_value = {"access_token": "tok", "token_type": "Bearer"}

    response = auth_client.post("/auth/token", json={"code": "c", "code_verifier": "v"})

    assert response.status_code == 200
    assert response.json() == {"access_token": "tok", "token_type": "Bearer"}
    identity_client.exchange_code.assert_called_once_with("c", "v")


@pytest.mark.parametrize("body", [{}, {"code": "c"}, {"code_verifier": "v"}])
def test_token_exchange_requires_code_and_verifier(auth_client, identity_client, body):
    response = auth_client.post("/auth/token", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing code or code_verifier in request body"}
    identity_client.exchange_code.assert_not_called()


def test_token_exchange_relays_provider_error(auth_client, identity_client):
    body = {"error": "invalid_grant"}
    identity_client.exchange_code.side_effect = RemoteAPIError(400, body)

    response = auth_client.post("/auth/token", json={"code": "c", "code_verifier": "v"})

    assert response.status_code == 400
    assert response.json() == body


def test_token_exchange_unexpected_failure(auth_client, identity_client):
    identity_client.exchange_code.side_effect = RuntimeError("boom")

    response = auth_client.post("/auth/token", json={"code": "c", "code_verifier": "v"})

    assert response.status_code == 500
    assert response.json() == {"error": "Error getting token"}
