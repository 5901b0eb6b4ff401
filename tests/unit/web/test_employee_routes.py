"""
Tests des routes HTTP de l'annuaire.

Tests couvrant:
- POST / DELETE / GET /api/employees (enveloppe de reponse, camelCase)
- Correspondance type d'erreur -> code HTTP
- Pagination par defaut et parametres non numeriques
- /health, route inconnue, JSON invalide
- En-tetes de securite et CORS
"""

from unittest.mock import MagicMock

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from staffdir.container import Container
from staffdir.core.ports.repositories import IEmployeeRepository
from staffdir.web.app import create_app


@pytest.fixture
def container(test_settings):
    container = Container()
    container.config.override(providers.Object(test_settings))
    return container


@pytest.fixture
def client(container):
    with TestClient(create_app(container)) as client:
        yield client


def _create(client, first="John", last="Doe", email="john@example.com"):
    return client.post(
        "/api/employees",
        json={"firstName": first, "lastName": last, "email": email},
    )


# ============================================================================
# POST /api/employees
# ============================================================================


class TestCreateRoute:
    """Tests pour POST /api/employees."""

    def test_create_returns_201(self, client):
        response = _create(client, first="  John ", email=" JOHN@EXAMPLE.COM ")

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Employee created successfully: John Doe"
        data = body["data"]
        assert data["firstName"] == "John"
        assert data["lastName"] == "Doe"
        assert data["email"] == "john@example.com"
        assert set(data) == {"id", "firstName", "lastName", "email", "createdAt", "updatedAt"}

    def test_duplicate_returns_409(self, client):
        _create(client)

        response = _create(client, email="John@Example.com")

        assert response.status_code == 409
        assert response.json() == {
            "success": False,
            "error": "Employee with email john@example.com already exists",
        }

    def test_invalid_email_returns_400(self, client):
        response = _create(client, email="john@@x.com")

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert response.json()["error"].startswith("Invalid email format")

    def test_missing_fields_returns_400(self, client):
        response = client.post("/api/employees", json={"lastName": "Doe"})

        assert response.status_code == 400
        assert response.json()["error"] == "First name is required"

    def test_wrong_type_returns_400(self, client):
        response = client.post(
            "/api/employees",
            json={"firstName": 42, "lastName": "Doe", "email": "j@x.com"},
        )

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_non_object_body_returns_400(self, client):
        """Un corps JSON qui n.est pas un objet donne un message sans champ vide."""
        response = client.post("/api/employees", json=["John", "Doe"])

        assert response.status_code == 400
        error = response.json()["error"]
        assert not error.startswith(":")
        assert "valid dictionary" in error

    def test_invalid_json_returns_400(self, client):
        response = client.post(
            "/api/employees",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Invalid JSON format"}


# ============================================================================
# DELETE /api/employees
# ============================================================================


class TestDeleteRoute:
    """Tests pour DELETE /api/employees."""

    def test_delete_by_id(self, client):
        employee = _create(client).json()["data"]

        response = client.request("DELETE", "/api/employees", json={"id": employee["id"]})

        assert response.status_code == 200
        assert response.json()["data"] == employee
        assert response.json()["message"] == "Employee deleted successfully: John Doe"

    def test_delete_by_email(self, client):
        _create(client)

        response = client.request(
            "DELETE", "/api/employees", json={"email": "JOHN@example.com"}
        )

        assert response.status_code == 200
        assert client.get("/api/employees").json()["pagination"]["total"] == 0

    def test_delete_unknown_id_returns_404(self, client):
        response = client.request("DELETE", "/api/employees", json={"id": "nope"})

        assert response.status_code == 404
        assert response.json()["error"] == "Employee with id nope not found"

    def test_delete_unknown_email_returns_404(self, client):
        response = client.request(
            "DELETE", "/api/employees", json={"email": "ghost@example.com"}
        )

        assert response.status_code == 404
        assert response.json()["error"] == "Employee with email ghost@example.com not found"

    def test_delete_without_body_returns_400(self, client):
        response = client.request("DELETE", "/api/employees")

        assert response.status_code == 400
        assert response.json()["error"] == "Email or id is required"


# ============================================================================
# GET /api/employees
# ============================================================================


class TestListRoute:
    """Tests pour GET /api/employees."""

    @pytest.fixture
    def abc(self, client):
        return [
            _create(client, first=name, email=f"{name.lower()}@example.com").json()["data"]
            for name in ("A", "B", "C")
        ]

    def test_list_page(self, client, abc):
        response = client.get("/api/employees", params={"page": 2, "limit": 2})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Employees fetched successfully"
        assert body["data"] == [abc[2]]
        assert body["pagination"] == {
            "page": 2,
            "limit": 2,
            "total": 3,
            "totalPages": 2,
            "hasNext": False,
            "hasPrev": True,
        }

    def test_defaults_when_parameters_missing(self, client, abc):
        """Sans page et limit, page 1 et la limite par defaut sont utilisees."""
        response = client.get("/api/employees", params={"page": 2})

        pagination = response.json()["pagination"]
        assert pagination["page"] == 1
        assert pagination["limit"] == 10
        assert [e["firstName"] for e in response.json()["data"]] == ["A", "B", "C"]

    def test_non_numeric_parameters_return_400(self, client):
        response = client.get("/api/employees", params={"page": "one", "limit": "10"})

        assert response.status_code == 400
        assert response.json()["error"] == "Page and limit must be valid numbers"

    @pytest.mark.parametrize("page, limit", [("1.5", "10"), ("2abc", "10"), ("1", "ten")])
    def test_non_integer_strings_rejected(self, client, page, limit):
        """Seuls les entiers stricts sont acceptes pour page et limit."""
        response = client.get("/api/employees", params={"page": page, "limit": limit})

        assert response.status_code == 400
        assert response.json()["error"] == "Page and limit must be valid numbers"

    @pytest.mark.parametrize("page, limit", [(0, 10), (1, 0), (1, 101)])
    def test_out_of_bounds_return_400(self, client, page, limit):
        response = client.get("/api/employees", params={"page": page, "limit": limit})

        assert response.status_code == 400


# ============================================================================
# Application
# ============================================================================


class TestApplication:
    """Tests transverses : sante, 404, en-tetes."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "OK"
        assert body["uptime"] >= 0
        assert "timestamp" in body

    def test_unknown_route(self, client):
        response = client.get("/api/unknown")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Route /api/unknown not found"}

    def test_security_headers(self, client):
        response = client.get("/health")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"

    def test_cors_allowed_origin(self, client):
        response = client.get("/health", headers={"Origin": "http://example.test"})

        assert response.headers["access-control-allow-origin"] == "http://example.test"

    def test_each_app_has_its_own_store(self, test_settings):
        """Deux containers distincts ne partagent pas leurs employes."""
        first, second = Container(), Container()
        for container in (first, second):
            container.config.override(providers.Object(test_settings))

        with TestClient(create_app(first)) as client_a, TestClient(create_app(second)) as client_b:
            _create(client_a)

            assert client_b.get("/api/employees").json()["pagination"]["total"] == 0


# ============================================================================
# Erreurs internes
# ============================================================================


class TestInternalError:
    """Une erreur inattendue du store donne un 500 generique."""

    @pytest.fixture
    def failing_client(self, container):
        broken = MagicMock(spec=IEmployeeRepository)
        broken.list.return_value = []
        broken.count.side_effect = RuntimeError("index corrompu")
        container.employee_repository.override(providers.Object(broken))
        with TestClient(create_app(container), raise_server_exceptions=False) as client:
            yield client

    def test_unexpected_error_returns_500(self, failing_client):
        response = failing_client.get("/api/employees", params={"page": 1, "limit": 10})

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Internal server error"}

    def test_500_hides_internal_detail(self, failing_client):
        response = failing_client.get("/api/employees")

        assert "index corrompu" not in response.text

    def test_500_carries_security_headers(self, failing_client):
        response = failing_client.get("/api/employees")

        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["X-Content-Type-Options"] == "nosniff"
