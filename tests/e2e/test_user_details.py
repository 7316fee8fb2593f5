"""End-to-end tests for user details endpoints."""

from storefront.config import Settings
from storefront.util.jwt import create_token
from tests.harness import bearer


class TestUserDetailsEndpoints:
    """End-to-end tests for /api/details and /api/updateDetails."""

    def test_details_without_auth_fails(self, client):
        response = client.get("/api/details")

        assert response.status_code == 401
        assert "Not authenticated" in response.json()["detail"]

    def test_details_with_invalid_token_fails(self, client):
        response = client.get(
            "/api/details", headers={"Authorization": "Bearer invalid-token"}
        )

        assert response.status_code == 401

    def test_details_with_non_uuid_subject_is_401(self, client):
        # Arrange - correctly signed, but the id claim is not a user id
        token = create_token("user-1", "alice", "a@x.com", "user", Settings().auth)

        # Act
        response = client.get("/api/details", headers=bearer(token))

        # Assert
        assert response.status_code == 401

    def test_details_hide_password_hash(self, client, user_headers):
        # Act
        response = client.get("/api/details", headers=user_headers)

        # Assert
        assert response.status_code == 200
        result = response.json()["result"]
        assert result["username"] == "alice"
        assert "password_hash" not in result

    def test_update_phone_number(self, client, user_headers):
        # Act
        response = client.post(
            "/api/updateDetails",
            json={"phone_number": "+1 555-123-4567"},
            headers=user_headers,
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["user"]["phone_number"] == "+1 555-123-4567"

    def test_update_to_taken_username_is_409(self, client, user_headers):
        # Arrange
        client.post(
            "/auth/signup",
            json={"username": "bob", "email": "b@x.com", "password": "secret1"},
        )

        # Act
        response = client.post(
            "/api/updateDetails", json={"username": "bob"}, headers=user_headers
        )

        # Assert
        assert response.status_code == 409
        assert response.json()["detail"] == "Username is already taken"

    def test_update_with_bad_picture_url_is_400(self, client, user_headers):
        response = client.post(
            "/api/updateDetails",
            json={"profile_picture": "not-a-url"},
            headers=user_headers,
        )

        assert response.status_code == 400
