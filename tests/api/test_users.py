import httpx
import pytest

from vacation_board.api.deps.dependencies import get_directory_service, get_employee_service
from vacation_board.application.errors import EmployeeNotFoundError
from vacation_board.application.services.directory_service import DirectoryService
from vacation_board.boundary.graph import GraphClient, PhotoPayload, RemoteAPIError


@pytest.fixture
def user_client(client, mock_directory_service, mock_employee_service):
    client.app.dependency_overrides[get_directory_service] = lambda: mock_directory_service
    client.app.dependency_overrides[get_employee_service] = lambda: mock_employee_service
    return client


@pytest.mark.parametrize(
    "path",
    ["/user/profile", "/user/profile_pic", "/user/1", "/user/1/photo", "/user/1/events"],
)
def test_missing_token_is_rejected(user_client, mock_directory_service, path):
    response = user_client.get(path)

    assert response.status_code == 401
    assert response.json() == {"error": "No token provided"}
    assert not mock_directory_service.method_calls


def test_header_without_token_is_rejected(user_client):
    response = user_client.get("/user/profile", headers={"Authorization": "Bearer"})
    assert response.status_code == 401


def test_profile(user_client, mock_directory_service, auth_headers):
    mock_directory_service.get_profile.return_value = {"displayName": "Ana"}

    response = user_client.get("/user/profile", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"displayName": "Ana"}
    mock_directory_service.get_profile.assert_called_once_with("test-token")


def test_profile_relays_remote_status_and_body(user_client, mock_directory_service, auth_headers):
    body = {"error": {"code": "InvalidAuthenticationToken"}}
    mock_directory_service.get_profile.side_effect = RemoteAPIError(401, body)

    response = user_client.get("/user/profile", headers=auth_headers)

    assert response.status_code == 401
    assert response.json() == body


def test_profile_transport_failure(user_client, mock_directory_service, auth_headers):
    mock_directory_service.get_profile.side_effect = httpx.ConnectError("unreachable")

    response = user_client.get("/user/profile", headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"error": "Error getting user profile"}


def test_profile_pic(user_client, mock_directory_service, auth_headers):
    mock_directory_service.get_profile_photo.return_value = PhotoPayload(b"\x89PNG", "image/png")

    response = user_client.get("/user/profile_pic", headers=auth_headers)

    assert response.status_code == 200
    assert response.content == b"\x89PNG"
    assert response.headers["content-type"] == "image/png"


def test_profile_pic_failure(user_client, mock_directory_service, auth_headers):
    mock_directory_service.get_profile_photo.side_effect = RemoteAPIError(404, {"error": "x"})

    response = user_client.get("/user/profile_pic", headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"error": "Failed to fetch photo"}


def test_user_name(user_client, mock_employee_service, auth_headers):
    mock_employee_service.get_employee_name.return_value = "Ana"

    response = user_client.get("/user/7", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"name": "Ana"}
    mock_employee_service.get_employee_name.assert_called_once_with(7)


def test_user_name_not_found(user_client, mock_employee_service, auth_headers):
    mock_employee_service.get_employee_name.side_effect = EmployeeNotFoundError(7)

    response = user_client.get("/user/7", headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"error": "Employee not found"}


def test_user_photo_failure_is_not_found(user_client, mock_directory_service, auth_headers):
    mock_directory_service.get_user_photo.side_effect = RemoteAPIError(403, {"error": "x"})

    response = user_client.get("/user/a@x.com/photo", headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"error": "No profile picture found"}


def test_user_events(user_client, mock_directory_service, mock_employee_service, auth_headers):
    mock_employee_service.get_employee_email.return_value = "a@x.com"
    mock_directory_service.get_vacation_events.return_value = {"value": [{"subject": "Vacaciones"}]}

    response = user_client.get("/user/7/events", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"value": [{"subject": "Vacaciones"}]}
    mock_directory_service.get_vacation_events.assert_called_once_with("test-token", "a@x.com")


def test_user_events_unknown_employee(user_client, mock_directory_service, mock_employee_service, auth_headers):
    mock_employee_service.get_employee_email.side_effect = EmployeeNotFoundError(7)

    response = user_client.get("/user/7/events", headers=auth_headers)

    assert response.status_code == 404
    mock_directory_service.get_vacation_events.assert_not_called()


def test_user_photo_through_graph_client(client, auth_headers):
    """Binary relay end to end over a mocked Graph transport."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=b"jpeg-bytes", headers={"Content-Type": "image/jpeg"})

    graph = GraphClient(
        httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        base_url="https://graph.example.test/v1.0",
    )
    client.app.dependency_overrides[get_directory_service] = lambda: DirectoryService(graph)

    response = client.get("/user/u-42/photo", headers=auth_headers)

    assert response.status_code == 200
    assert response.content == b"jpeg-bytes"
    assert seen[0].url.path == "/v1.0/users/u-42/photo/$value"
    assert seen[0].headers["Authorization"] == "Bearer test-token"
