"""Tests for user CRUD routes."""

import unittest
import uuid
from fastapi.testclient import TestClient

from api.main import app
from api.dependencies import get_user_repo
from adapter.fake.user_repository import FakeUserRepository
from domain.model.claim import PrivateClaim
from services.token_service import create_jwt

NEW_USER = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "email": "a@example.com",
    "password": "secret1",
}


class UserRoutesTestCase(unittest.TestCase):
    """Registers one user and logs the client in as them."""

    def setUp(self):
        self.client = TestClient(app)
        self.repo = FakeUserRepository()
        app.dependency_overrides[get_user_repo] = lambda: self.repo

        response = self.client.post("/users", json=NEW_USER)
        assert response.status_code == 201
        self.user = response.json()

    def tearDown(self):
        app.dependency_overrides.clear()

    def login(self):
        response = self.client.post("/auth/login", json={"email": NEW_USER["email"], "password": NEW_USER["password"]})
        assert response.status_code == 200


class TestCreateUser(UserRoutesTestCase):
    """Tests for POST /users."""

    def test_create_is_public_and_self_owned(self):
        assert uuid.UUID(self.user["id"])
        assert self.user["created_by"] == self.user["id"]
        assert self.user["updated_by"] == self.user["id"]
        assert self.user["created_at"] == self.user["updated_at"]
        assert "password" not in self.user

    def test_create_hashes_password(self):
        stored = self.repo.store[self.user["id"]]
        assert stored.password != NEW_USER["password"]

    def test_create_ignores_client_supplied_id(self):
        response = self.client.post("/users", json={**NEW_USER, "id": "chosen-by-client", "email": "b@example.com"})

        assert response.status_code == 201
        assert response.json()["id"] != "chosen-by-client"

    def test_create_invalid_payload(self):
        response = self.client.post("/users", json={
            "first_name": "Al",
            "last_name": "Lo",
            "email": "nope",
            "password": "123",
        })

        assert response.status_code == 400
        assert response.json()["detail"] == [
            "first_name is required and must be at least 3 characters",
            "last_name is required and must be at least 3 characters",
            "email must be a valid email",
            "password is required and must be at least 6 characters",
        ]
        assert len(self.repo.store) == 1

    def test_create_body_that_is_not_an_object(self):
        response = self.client.post("/users", json=[NEW_USER])

        assert response.status_code == 400
        assert isinstance(response.json()["detail"], list)
        assert len(self.repo.store) == 1


class TestRequiresAuthentication(UserRoutesTestCase):
    """Every route other than POST /users needs a session."""

    def test_routes_reject_anonymous_callers(self):
        user_path = f"/users/{self.user['id']}"
        calls = [
            ("GET", "/users", None),
            ("GET", user_path, None),
            ("PUT", user_path, {"first_name": "Ada", "last_name": "King", "email": "a@example.com"}),
            ("DELETE", user_path, None),
        ]
        for method, path, body in calls:
            response = self.client.request(method, path, json=body)
            assert response.status_code == 401, (method, path)
            assert response.json()["detail"] == "Not authenticated"

    def test_tampered_token_is_rejected(self):
        response = self.client.get("/users", headers={"Authorization": "Bearer not.a.jwt"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid authentication credentials"

    def test_bearer_token_is_accepted(self):
        token = create_jwt(PrivateClaim.new(self.user["id"], NEW_USER["email"]))

        response = self.client.get("/users", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200


class TestReadUsers(UserRoutesTestCase):
    """Tests for GET /users and GET /users/{user_id}."""

    def test_list_users(self):
        self.login()

        response = self.client.get("/users")

        assert response.status_code == 200
        data = response.json()
        assert [u["id"] for u in data] == [self.user["id"]]
        assert "password" not in data[0]

    def test_get_user(self):
        self.login()

        response = self.client.get(f"/users/{self.user['id']}")

        assert response.status_code == 200
        assert response.json() == self.user

    def test_get_unknown_user(self):
        self.login()
        missing = str(uuid.uuid4())

        response = self.client.get(f"/users/{missing}")

        assert response.status_code == 404
        assert response.json()["detail"] == f"User {missing} not found"

    def test_get_malformed_id(self):
        self.login()

        response = self.client.get("/users/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid user id: not-a-uuid"


class TestUpdateUser(UserRoutesTestCase):
    """Tests for PUT /users/{user_id}."""

    def setUp(self):
        super().setUp()
        self.other = self.client.post("/users", json={**NEW_USER, "email": "other@example.com"}).json()
        self.login()

    def test_update_records_caller_as_updater(self):
        response = self.client.put(f"/users/{self.other['id']}", json={
            "first_name": "Augusta",
            "last_name": "King",
            "email": "augusta@example.com",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["first_name"] == "Augusta"
        assert data["email"] == "augusta@example.com"
        assert data["updated_by"] == self.user["id"]
        assert data["created_by"] == self.other["id"]
        assert data["created_at"] == self.other["created_at"]

    def test_update_does_not_change_password(self):
        before = self.repo.store[self.other["id"]].password

        self.client.put(f"/users/{self.other['id']}", json={
            "first_name": "Augusta",
            "last_name": "King",
            "email": "augusta@example.com",
            "password": "changed1",
        })

        assert self.repo.store[self.other["id"]].password == before

    def test_update_invalid_payload(self):
        response = self.client.put(f"/users/{self.other['id']}", json={
            "first_name": "Augusta",
            "last_name": "King",
            "email": "nope",
        })

        assert response.status_code == 400
        assert response.json()["detail"] == ["email must be a valid email"]

    def test_update_body_that_is_not_an_object(self):
        response = self.client.put(f"/users/{self.other['id']}", json="Augusta")

        assert response.status_code == 400
        assert isinstance(response.json()["detail"], list)

    def test_update_unknown_user(self):
        response = self.client.put(f"/users/{uuid.uuid4()}", json={
            "first_name": "Augusta",
            "last_name": "King",
            "email": "augusta@example.com",
        })

        assert response.status_code == 404


class TestDeleteUser(UserRoutesTestCase):
    """Tests for DELETE /users/{user_id}."""

    def setUp(self):
        super().setUp()
        self.login()

    def test_delete_then_get_is_not_found(self):
        response = self.client.delete(f"/users/{self.user['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "User deleted successfully"}
        assert self.client.get(f"/users/{self.user['id']}").status_code == 404

    def test_delete_unknown_user_succeeds(self):
        response = self.client.delete(f"/users/{uuid.uuid4()}")

        assert response.status_code == 200


if __name__ == '__main__':
    unittest.main()
