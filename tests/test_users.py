"""Tests for users API endpoints."""

from unittest.mock import patch

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from user_service import models
from user_service.exceptions import StorageError
from user_service.infrastructure.identity.repositories.user_repository import UserRepository


class TestListUsers:
    """Test suite for GET /users endpoint."""

    def test_list_users_empty(self, client: TestClient) -> None:
        response = client.get("/users")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_users(self, client: TestClient, test_user: models.User) -> None:
        response = client.get("/users")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == [
            {"id": str(test_user.id), "email": "existing@example.com", "name": "Existing User"}
        ]

    def test_list_users_storage_failure(self, client: TestClient) -> None:
        with patch.object(UserRepository, "find_all", side_effect=StorageError("find_all")):
            response = client.get("/users")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert isinstance(response.json()["error"], str)


class TestCreateUser:
    """Test suite for POST /users endpoint."""

    def test_create_user_success(self, client: TestClient, db_session: Session) -> None:
        response = client.post("/users", json={"email": "a@b.com", "name": "A"})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["email"] == "a@b.com"
        assert data["name"] == "A"
        assert data["id"] is not None
        assert isinstance(data["id"], str)

        db_user = db_session.query(models.User).filter_by(email="a@b.com").first()
        assert db_user is not None
        assert str(db_user.id) == data["id"]

    def test_create_user_without_name(self, client: TestClient) -> None:
        response = client.post("/users", json={"email": "a@b.com"})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["name"] is None

    def test_created_user_appears_in_list(self, client: TestClient) -> None:
        client.post("/users", json={"email": "a@b.com", "name": "A"})

        response = client.get("/users")

        users = response.json()
        assert len(users) == 1
        assert users[0]["email"] == "a@b.com"
        assert users[0]["name"] == "A"
        assert users[0]["id"]

    def test_create_user_duplicate_email_is_server_error(
        self, client: TestClient, test_user: models.User
    ) -> None:
        response = client.post("/users", json={"email": test_user.email, "name": "Other"})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert "error" in response.json()

    def test_create_user_missing_email(self, client: TestClient) -> None:
        response = client.post("/users", json={"name": "A"})

        assert response.status_code == 422


class TestUpdateUser:
    """Test suite for PUT /users/:id endpoint."""

    def test_update_user_success(self, client: TestClient, test_user: models.User) -> None:
        response = client.put(f"/users/{test_user.id}", json={"name": "Renamed"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "id": str(test_user.id),
            "email": "existing@example.com",
            "name": "Renamed",
        }

    def test_update_user_clears_name(self, client: TestClient, test_user: models.User) -> None:
        response = client.put(f"/users/{test_user.id}", json={"name": None})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] is None

    def test_update_user_empty_body_changes_nothing(
        self, client: TestClient, test_user: models.User
    ) -> None:
        response = client.put(f"/users/{test_user.id}", json={})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "Existing User"

    def test_update_user_unknown_id(self, client: TestClient) -> None:
        response = client.put("/users/unknown-id", json={"name": "X"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "error" in response.json()

    def test_update_user_missing_numeric_id(self, client: TestClient) -> None:
        response = client.put("/users/99999", json={"email": "x@y.com"})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_user_id_beyond_key_range(self, client: TestClient) -> None:
        response = client.put("/users/99999999999999999999", json={"name": "X"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "error" in response.json()

    def test_update_user_non_canonical_id(
        self, client: TestClient, test_user: models.User
    ) -> None:
        for path_id in (f"+{test_user.id}", f"0{test_user.id}", f"{test_user.id}%20"):
            response = client.put(f"/users/{path_id}", json={"name": "X"})

            assert response.status_code == status.HTTP_404_NOT_FOUND, path_id

        assert client.get("/users").json()[0]["name"] == "Existing User"

    def test_update_user_null_email_rejected(
        self, client: TestClient, test_user: models.User
    ) -> None:
        response = client.put(f"/users/{test_user.id}", json={"email": None})

        assert response.status_code == 422

    def test_update_user_duplicate_email_is_server_error(
        self, client: TestClient, test_user: models.User
    ) -> None:
        other = client.post("/users", json={"email": "other@example.com"}).json()

        response = client.put(f"/users/{other['id']}", json={"email": test_user.email})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
