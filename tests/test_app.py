"""
Tests for application wiring: health check, error rendering and
settings injection.
"""

from unittest.mock import patch
from fastapi.testclient import TestClient

from habity_api.config import AppSettings
from habity_api.main import create_app
from habity_api.services import HabitifyImportService


class TestApplication:
    """Test the application factory."""

    def test_health(self, client: TestClient):
        """Test the health endpoint."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["service"] == "habity-api"
        assert data["environment"] == "testing"

    def test_request_id_header(self, client: TestClient):
        """Test responses carry a request id."""
        response = client.get("/health")

        assert response.headers["X-Request-ID"]

    def test_unknown_route_error_body(self, client: TestClient):
        """Test router errors use the error body format."""
        response = client.get("/api/v1/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_method_not_allowed_error_body(self, client: TestClient):
        """Test wrong methods use the error body format."""
        response = client.get("/api/v1/import/habitify")

        assert response.status_code == 405
        assert "error" in response.json()

    def test_settings_on_state(self, app, test_settings: AppSettings):
        """Test the app keeps the settings it was created with."""
        assert app.state.settings is test_settings
        assert isinstance(app.state.import_service, HabitifyImportService)
        assert app.state.import_service.settings is test_settings

    def test_default_secret_warning(self, clean_env):
        """Test startup warns when the placeholder JWT secret is used."""
        app = create_app(AppSettings(_env_file=None, ENVIRONMENT="testing"))

        with patch("habity_api.main.logger") as mock_logger:
            with TestClient(app):
                pass

        warnings = [c.args[0] for c in mock_logger.warning.call_args_list]
        assert "Using default JWT secret" in warnings

    def test_no_warning_with_custom_secret(self, app):
        """Test no warning is emitted for a configured secret."""
        with patch("habity_api.main.logger") as mock_logger:
            with TestClient(app):
                pass

        mock_logger.warning.assert_not_called()


class TestErrorRendering:
    """Test framework and unexpected errors use the error body format."""

    def test_request_validation_error(self, app):
        """Test typed parameter failures are rendered as bad requests."""

        @app.get("/api/v1/test/typed/{count}")
        async def typed_route(count: int):
            return {"count": count}

        with TestClient(app) as client:
            ok = client.get("/api/v1/test/typed/3")
            response = client.get("/api/v1/test/typed/three")

        assert ok.status_code == 200
        assert response.status_code == 400
        assert response.json() == {"error": "invalid request"}

    def test_unhandled_exception(self, app):
        """Test unexpected failures are rendered as internal server errors."""
        with patch.object(
            HabitifyImportService,
            "get_import_status",
            side_effect=RuntimeError("status lookup failed"),
        ):
            with TestClient(app, raise_server_exceptions=False) as client:
                response = client.get("/api/v1/import/habitify/jobs/job_1")

        assert response.status_code == 500
        assert response.json() == {"error": "internal server error"}

    def test_unhandled_exception_logged(self, app):
        """Test unexpected failures are logged with the request path."""
        with patch.object(
            HabitifyImportService,
            "get_import_status",
            side_effect=RuntimeError("status lookup failed"),
        ), patch("habity_api.main.logger") as mock_logger:
            with TestClient(app, raise_server_exceptions=False) as client:
                client.get("/api/v1/import/habitify/jobs/job_1")

        mock_logger.error.assert_called_once()
        kwargs = mock_logger.error.call_args.kwargs
        assert kwargs["path"] == "/api/v1/import/habitify/jobs/job_1"
        assert kwargs["error"] == "status lookup failed"
