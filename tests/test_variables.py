"""Variable resource tests."""
import pytest
from fastapi import status
from config_service import crud, schemas
from config_service.core.exceptions import ResourceNotFoundError, ResourceValidationError
from config_service.models import Environment
from tests.conftest import client, create_environment, create_variable


class TestVariables:
    """CRUD and per-environment uniqueness."""

    def test_create_variable(self):
        environment = create_environment("prod")
        response = client.post("/environments/prod/variables", json={
            "name": "DB_URL",
            "value": "postgres://db",
            "description": "Main database"
        })
        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["message"] == "Variable 'DB_URL' created in PROD"
        assert body["data"]["name"] == "DB_URL"
        assert body["data"]["value"] == "postgres://db"
        assert body["data"]["is_sensitive"] is False
        assert body["data"]["environment_id"] == environment["id"]

    def test_create_under_unknown_environment_returns_404(self):
        response = client.post("/environments/ghost/variables", json={"name": "A", "value": "1"})
        assert response.status_code == 404

    def test_missing_value_is_rejected(self):
        create_environment("prod")
        response = client.post("/environments/prod/variables", json={"name": "A"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Validation Error"
        assert "value" in response.json()["message"]

    def test_numeric_value_is_rejected_not_coerced(self):
        create_environment("prod")
        response = client.post("/environments/prod/variables", json={"name": "DB_PORT", "value": 5432})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "value" in response.json()["message"]
        assert client.get("/environments/prod.json").json() == {}

    def test_same_name_in_different_environments_is_allowed(self):
        create_environment("prod")
        create_environment("dev")
        create_variable("prod", "DB_URL", "postgres://prod")
        response = client.post("/environments/dev/variables", json={"name": "DB_URL", "value": "postgres://dev"})
        assert response.status_code == 201

    def test_same_name_in_same_environment_is_rejected(self):
        create_environment("prod")
        create_variable("prod", "DB_URL", "postgres://one")
        response = client.post("/environments/prod/variables", json={"name": "DB_URL", "value": "postgres://two"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "error": "Validation Error",
            "message": "Variable 'DB_URL' already exists in environment 'PROD'."
        }
        # The first row is untouched
        assert client.get("/environments/prod/variables/DB_URL").json()["data"]["value"] == "postgres://one"

    def test_get_variable(self):
        create_environment("prod")
        create_variable("prod", "API_KEY", "secret", is_sensitive=True)
        response = client.get("/environments/Prod/variables/API_KEY")
        assert response.status_code == 200
        assert response.json()["message"] == "Details for variable: API_KEY in PROD"
        assert response.json()["data"]["is_sensitive"] is True

    def test_variable_name_lookup_is_exact(self):
        create_environment("prod")
        create_variable("prod", "API_KEY", "secret")
        response = client.get("/environments/prod/variables/api_key")
        assert response.status_code == 404
        assert response.json()["message"] == "Variable 'api_key' not found in environment 'PROD'."

    def test_patch_only_description_preserves_other_fields(self):
        create_environment("prod")
        create_variable("prod", "DB_URL", "postgres://db", description="old", is_sensitive=True)

        response = client.patch("/environments/prod/variables/DB_URL", json={"description": "new"})
        assert response.status_code == 200
        data = response.json()["data"]
        assert response.json()["message"] == "Variable DB_URL in PROD partially updated"
        assert data["description"] == "new"
        assert data["name"] == "DB_URL"
        assert data["value"] == "postgres://db"
        assert data["is_sensitive"] is True

    def test_patch_can_clear_description(self):
        create_environment("prod")
        create_variable("prod", "DB_URL", "postgres://db", description="old")
        response = client.patch("/environments/prod/variables/DB_URL", json={"description": None})
        assert response.status_code == 200
        assert response.json()["data"]["description"] is None

    def test_patch_null_value_is_rejected(self):
        create_environment("prod")
        create_variable("prod", "DB_URL", "postgres://db")
        response = client.patch("/environments/prod/variables/DB_URL", json={"value": None})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert client.get("/environments/prod/variables/DB_URL").json()["data"]["value"] == "postgres://db"

    def test_put_merges_omitted_fields(self):
        """PUT keeps the current value of every field left out of the body."""
        create_environment("prod")
        create_variable("prod", "DB_URL", "postgres://db", description="keep", is_sensitive=True)

        response = client.put("/environments/prod/variables/DB_URL", json={"value": "postgres://new"})
        assert response.status_code == 200
        data = response.json()["data"]
        assert response.json()["message"] == "Variable DB_URL in PROD fully updated"
        assert data["value"] == "postgres://new"
        assert data["description"] == "keep"
        assert data["is_sensitive"] is True

    def test_put_can_rename_variable(self):
        create_environment("prod")
        create_variable("prod", "OLD_NAME", "1")
        response = client.put("/environments/prod/variables/OLD_NAME", json={"name": "NEW_NAME"})
        assert response.status_code == 200
        assert client.get("/environments/prod/variables/NEW_NAME").status_code == 200
        assert client.get("/environments/prod/variables/OLD_NAME").status_code == 404

    def test_put_rename_onto_existing_name_is_rejected(self):
        create_environment("prod")
        create_variable("prod", "A", "1")
        create_variable("prod", "B", "2")
        response = client.put("/environments/prod/variables/B", json={"name": "A"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert client.get("/environments/prod/variables/B").json()["data"]["value"] == "2"

    def test_update_unknown_variable_returns_404(self):
        create_environment("prod")
        assert client.put("/environments/prod/variables/NOPE", json={"value": "1"}).status_code == 404
        assert client.patch("/environments/prod/variables/NOPE", json={"value": "1"}).status_code == 404

    def test_delete_variable(self):
        create_environment("prod")
        create_variable("prod", "A", "1")
        create_variable("prod", "B", "2")

        response = client.delete("/environments/prod/variables/A")
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get("/environments/prod/variables/A").status_code == 404
        assert client.get("/environments/prod.json").json() == {"B": "2"}
        assert client.delete("/environments/prod/variables/A").status_code == 404


class TestVariablePagination:
    """Page/limit handling on GET /environments/<name>/variables."""

    def test_pages_are_scoped_to_environment(self):
        create_environment("prod")
        create_environment("dev")
        for i in range(15):
            create_variable("prod", f"VAR_{i:02d}", str(i))
        create_variable("dev", "ONLY_DEV", "x")

        first = client.get("/environments/prod/variables", params={"limit": 10}).json()
        assert first["environment_name"] == "PROD"
        assert first["total_items"] == 15
        assert first["total_pages"] == 2
        assert first["current_page"] == 1
        assert [v["name"] for v in first["variables"]] == [f"VAR_{i:02d}" for i in range(10)]

        second = client.get("/environments/prod/variables", params={"page": 2, "limit": 10}).json()
        assert [v["name"] for v in second["variables"]] == [f"VAR_{i:02d}" for i in range(10, 15)]

    def test_unknown_environment_returns_404(self):
        assert client.get("/environments/ghost/variables").status_code == 404


class TestVariableRepository:
    """Repository behavior that the routes cannot reach on their own."""

    def test_environment_deleted_between_lookup_and_insert_is_not_found(self, db_session):
        """The foreign key rejects the insert; that is a missing environment, not a duplicate."""
        vanished = Environment(id=987654, name="VANISHED")
        with pytest.raises(ResourceNotFoundError) as excinfo:
            crud.create_variable(db_session, vanished, schemas.VariableCreate(name="A", value="1"))
        assert excinfo.value.message == "Environment 'VANISHED' not found."

    def test_duplicate_is_still_a_validation_error(self, db_session):
        create_environment("prod")
        create_variable("prod", "A", "1")
        environment = crud.get_environment_by_name(db_session, "prod")
        with pytest.raises(ResourceValidationError):
            crud.create_variable(db_session, environment, schemas.VariableCreate(name="A", value="2"))
