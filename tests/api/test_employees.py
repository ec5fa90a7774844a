import pytest
from fastapi.testclient import TestClient

from vacation_board.api.deps.dependencies import get_employee_service, get_store
from vacation_board.application.errors import EmployeeNotFoundError
from vacation_board.application.services.department_sync import SyncResult


@pytest.fixture
def employee_client(client, mock_employee_service):
    client.app.dependency_overrides[get_employee_service] = lambda: mock_employee_service
    return client


def test_create_employee(employee_client, mock_employee_service):
    mock_employee_service.create_employee.return_value = (
        1,
        SyncResult(applied=True, linked=["Eng"], skipped=["Ops"]),
    )

    response = employee_client.post(
        "/employees",
        json={"email": "a@x.com", "name": "Ana", "departments": ["Eng", "Ops"]},
    )

    assert response.status_code == 201
    assert response.json() == {"message": "Employee added", "skipped_departments": ["Ops"]}
    mock_employee_service.create_employee.assert_called_once_with(
        email="a@x.com", name="Ana", admin=False, departments=["Eng", "Ops"]
    )


def test_create_employee_accepts_legacy_department_field(employee_client, mock_employee_service):
    response = employee_client.post("/employees", json={"email": "a@x.com", "department": "Eng"})

    assert response.status_code == 201
    assert mock_employee_service.create_employee.call_args.kwargs["departments"] == "Eng"


def test_create_employee_requires_email(employee_client, mock_employee_service):
    response = employee_client.post("/employees", json={"name": "Ana"})

    assert response.status_code == 400
    assert response.json() == {"error": "Email is required"}
    mock_employee_service.create_employee.assert_not_called()


def test_create_employee_rejects_malformed_departments(employee_client):
    response = employee_client.post("/employees", json={"email": "a@x.com", "departments": 5})

    assert response.status_code == 400
    assert "error" in response.json()


def test_create_employee_unexpected_failure(employee_client, mock_employee_service):
    mock_employee_service.create_employee.side_effect = RuntimeError("disk full")

    response = employee_client.post("/employees", json={"email": "a@x.com"})

    assert response.status_code == 500
    assert response.json() == {"error": "Error adding employee"}


def test_list_employees(employee_client, mock_employee_service):
    mock_employee_service.list_employees.return_value = [
        {"id": 1, "name": "Ana", "email": "a@x.com", "admin": True, "departments": ["Eng"]},
        {"id": 2, "name": None, "email": "b@x.com", "admin": False, "departments": []},
    ]

    response = employee_client.get("/employees")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 2
    assert data[0]["departments"] == ["Eng"]
    assert data[1]["departments"] == []


def test_update_employee_without_departments(employee_client, mock_employee_service):
    response = employee_client.put("/employees/3", json={"name": "Ana B"})

    assert response.status_code == 200
    assert response.json() == {"message": "Employee updated", "skipped_departments": None}
    mock_employee_service.update_employee.assert_called_once_with(
        employee_id=3, email=None, name="Ana B", admin=None, departments=None
    )


def test_update_employee_not_found(employee_client, mock_employee_service):
    mock_employee_service.update_employee.side_effect = EmployeeNotFoundError(3)

    response = employee_client.put("/employees/3", json={"name": "Ana B"})

    assert response.status_code == 404
    assert response.json() == {"error": "Employee not found"}


def test_update_employee_rejects_non_numeric_id(employee_client):
    response = employee_client.put("/employees/abc", json={"name": "Ana B"})
    assert response.status_code == 400


def test_delete_employee(employee_client, mock_employee_service):
    response = employee_client.delete("/employees/3")

    assert response.status_code == 200
    assert response.json() == {"message": "Employee deleted"}
    mock_employee_service.delete_employee.assert_called_once_with(3)


def test_is_admin(employee_client, mock_employee_service):
    mock_employee_service.is_admin.return_value = True

    response = employee_client.get("/api/isAdmin", params={"email": "boss@x.com"})

    assert response.status_code == 200
    assert response.json() == {"isAdmin": True}
    mock_employee_service.is_admin.assert_called_once_with("boss@x.com")


class TestEmployeesAgainstStore:
    """End-to-end employee flows on a real SQLite file."""

    @pytest.fixture
    def store_client(self, app, sync_store):
        app.dependency_overrides[get_store] = lambda: sync_store
        return TestClient(app)

    def test_employee_lifecycle(self, store_client):
        assert store_client.post("/departments", json={"department": "Eng"}).status_code == 201

        created = store_client.post(
            "/employees",
            json={"email": "a@x.com", "name": "Ana", "departments": ["Eng", "Ops"]},
        )
        assert created.status_code == 201
        assert created.json()["skipped_departments"] == ["Ops"]

        employees = store_client.get("/employees").json()
        assert employees == [
            {"id": 1, "name": "Ana", "email": "a@x.com", "admin": False, "departments": ["Eng"]}
        ]

        cleared = store_client.put("/employees/1", json={"departments": []})
        assert cleared.json() == {"message": "Employee updated", "skipped_departments": []}
        assert store_client.get("/employees").json()[0]["departments"] == []

        assert store_client.delete("/employees/1").status_code == 200
        assert store_client.get("/employees").json() == []

    def test_blank_department_name_is_skipped(self, store_client):
        store_client.post("/departments", json={"department": "Eng"})

        response = store_client.post(
            "/employees", json={"email": "a@x.com", "departments": ["Eng", ""]}
        )

        assert response.status_code == 201
        assert response.json() == {"message": "Employee added", "skipped_departments": [""]}
        assert store_client.get("/employees").json()[0]["departments"] == ["Eng"]

    def test_update_with_blank_department_name_is_skipped(self, store_client):
        store_client.post("/departments", json={"department": "Eng"})
        store_client.post("/employees", json={"email": "a@x.com"})

        response = store_client.put("/employees/1", json={"departments": ["  ", "Eng"]})

        assert response.status_code == 200
        assert response.json()["skipped_departments"] == ["  "]
        assert store_client.get("/employees").json()[0]["departments"] == ["Eng"]

    def test_duplicate_email_is_a_client_error(self, store_client):
        store_client.post("/employees", json={"email": "a@x.com"})

        response = store_client.post("/employees", json={"email": "a@x.com"})

        assert response.status_code == 400
        assert response.json()["error"].startswith("Error adding employee")

    def test_is_admin_without_email(self, store_client):
        response = store_client.get("/api/isAdmin")

        assert response.status_code == 400
        assert response.json() == {"error": "Email is required"}
