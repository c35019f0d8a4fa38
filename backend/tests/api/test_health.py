"""Tests for health check endpoints."""


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client):
        """Health endpoint should return 200 with status."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"

    def test_health_response_structure(self, client):
        """Health response should have correct structure."""
        data = client.get("/health").json()
        assert set(data.keys()) == {"status", "version"}

    def test_health_needs_no_token(self, client):
        assert client.get("/health", headers={"Authorization": "Bearer junk"}).status_code == 200

    def test_unknown_route(self, client):
        assert client.get("/nope").status_code == 404
