"""
Integration tests for the system API
"""

from autocrop import __version__


class TestSystemAPI:
    """Tests for /api/system endpoints"""

    def test_health(self, client):
        """Test health check"""
        response = client.get("/api/system/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == __version__
        assert "timestamp" in data

    def test_config(self, client, output_dir):
        """Test that the active configuration is returned"""
        response = client.get("/api/system/config")

        assert response.status_code == 200
        data = response.json()
        assert data["crop"]["output_path"] == str(output_dir)
        assert data["crop"]["crop_mode"] == "exact"
        assert data["system"]["log_level"] == "INFO"

    def test_root(self, client):
        """Test root endpoint listing"""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "Autocrop"


class TestUnexpectedErrors:
    """Tests for the fallback handler of unexpected exceptions"""

    @staticmethod
    def _fail(**kwargs):
        raise RuntimeError("health check failed")

    def test_internal_error_body(self, client, monkeypatch):
        """Test that unexpected errors return a generic 500 body"""
        monkeypatch.setattr("autocrop.api.routers.system.HealthStatus", self._fail)

        response = client.get("/api/system/health")

        assert response.status_code == 500
        assert response.json() == {
            "error": "Internal server error",
            "details": {},
            "type": "InternalError",
        }

    def test_internal_error_debug_details(self, client, monkeypatch):
        """Test that debug mode adds the exception and traceback"""
        monkeypatch.setattr("autocrop.api.routers.system.HealthStatus", self._fail)
        monkeypatch.setattr(client.app.state, "debug", True)

        response = client.get("/api/system/health")

        assert response.status_code == 500
        data = response.json()
        assert data["type"] == "InternalError"
        assert data["details"]["type"] == "RuntimeError"
        assert data["details"]["exception"] == "health check failed"
        assert "traceback" in data["details"]
