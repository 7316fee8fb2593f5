"""End-to-end tests for search history endpoints."""

from tests.harness import bearer


class TestSearchEndpoints:
    """End-to-end tests for /searches routes."""

    def test_record_and_list(self, client, user_headers):
        # Act
        first = client.post("/searches/search", json={"data": "shoes"}, headers=user_headers)
        client.post("/searches/search", json={"data": "hats"}, headers=user_headers)
        client.post("/searches/search", json={"data": "shoes"}, headers=user_headers)
        listed = client.get("/searches/searched", headers=user_headers)

        # Assert
        assert first.status_code == 201
        assert first.json()["success"] is True
        body = listed.json()
        assert body["count"] == 2
        assert [s["search"] for s in body["data"]] == ["shoes", "hats"]

    def test_empty_term_is_400(self, client, user_headers):
        response = client.post("/searches/search", json={"data": " "}, headers=user_headers)

        assert response.status_code == 400

    def test_history_is_per_user(self, client, user_headers):
        # Arrange
        client.post("/searches/search", json={"data": "shoes"}, headers=user_headers)
        bob_token = client.post(
            "/auth/signup",
            json={"username": "bob", "email": "b@x.com", "password": "secret1"},
        ).json()["token"]

        # Act
        response = client.get("/searches/searched", headers=bearer(bob_token))

        # Assert
        assert response.json() == {"success": True, "count": 0, "data": []}

    def test_delete_own_entry_only(self, client, user_headers):
        # Arrange
        entry_id = client.post(
            "/searches/search", json={"data": "shoes"}, headers=user_headers
        ).json()["data"]["id"]
        bob_token = client.post(
            "/auth/signup",
            json={"username": "bob", "email": "b@x.com", "password": "secret1"},
        ).json()["token"]

        # Act
        bob_delete = client.delete(f"/searches/{entry_id}", headers=bearer(bob_token))
        own_delete = client.delete(f"/searches/{entry_id}", headers=user_headers)

        # Assert
        assert bob_delete.status_code == 404
        assert own_delete.status_code == 200

    def test_requires_auth(self, client):
        assert client.get("/searches/searched").status_code == 401
