"""Integration tests for the FastAPI host."""

from unittest.mock import patch

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient

from affordance_forms import config
from affordance_forms.config import Settings
from affordance_forms.core.app_factory import create_app
from affordance_forms.exceptions import AffordanceFormException, TemplateLoadException


class TestHealth:
    """Tests for health endpoint."""

    def test_health(self, test_client):
        """Test health reports the compiled template."""
        response = test_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["template_loaded"] is True


class TestFormRoutes:
    """Tests for host routes returning rendered forms."""

    def test_form_rendered(self, test_client):
        """Test a resource route returns the rendered form."""
        response = test_client.get("/employees/form")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert 'action="http://localhost/employees"' in response.text
        assert response.text.count('class="field"') == 4

    def test_missing_self_link_is_error_response(self, test_client):
        """Test write failures become structured JSON errors."""
        response = test_client.get("/broken/form")

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == "LINK_NOT_FOUND"
        assert error["details"] == {"rel": "self"}


class TestLifespan:
    """Tests for application startup and shutdown."""

    def test_exception_handler_registered(self):
        """Test AffordanceFormException handler is registered."""
        app = create_app()

        assert AffordanceFormException in app.exception_handlers

    def test_converter_released_on_shutdown(self):
        """Test the converter is dropped from app state at shutdown."""
        app = create_app()

        with TestClient(app):
            assert app.state.form_converter is not None

        assert app.state.form_converter is None

    def test_template_dir_override(self, tmp_path, form_router):
        """Test a configured template directory replaces the bundled template."""
        (tmp_path / "form.html").write_text("<custom action=\"{{ target }}\"></custom>", encoding="utf-8")
        settings = Settings(_env_file=None, template_dir=tmp_path)

        with patch.object(config, "_settings_instance", settings):
            with TestClient(create_app(routers=[form_router])) as client:
                response = client.get("/employees/form")

        assert response.text == '<custom action="http://localhost/employees"></custom>'

    def test_missing_template_aborts_startup(self, tmp_path):
        """Test startup fails when the template cannot be loaded."""
        settings = Settings(_env_file=None, template_dir=tmp_path)

        with patch.object(config, "_settings_instance", settings):
            with pytest.raises(TemplateLoadException):
                with TestClient(create_app()):
                    pass


class TestMainModule:
    """Tests for the module-level application."""

    def test_main_app_serves_health(self):
        """Test the entry point app starts and answers health checks."""
        with patch("affordance_forms.logging_config.setup_logging"):
            from affordance_forms.main import app

            with TestClient(app) as client:
                response = client.get("/health")

        assert response.status_code == 200
        assert app.title == "Affordance Forms"


class TestTemplateRenderErrors:
    """Tests for templates that compile but fail when rendered."""

    def test_render_error_is_structured_write_failure(self, tmp_path, form_router):
        """Test a broken override template yields a FORM_WRITE_ERROR body."""
        (tmp_path / "form.html").write_text("<form action=\"{{ target }}\">{{ missing }}</form>", encoding="utf-8")
        settings = Settings(_env_file=None, template_dir=tmp_path)

        with patch.object(config, "_settings_instance", settings):
            with TestClient(create_app(routers=[form_router])) as client:
                response = client.get("/employees/form")

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "FORM_WRITE_ERROR"
        assert error["details"] == {"affordance": "createEmployee"}

    def test_unexpected_error_is_opaque(self):
        """Test errors outside the form pipeline answer with INTERNAL_ERROR only."""
        router = APIRouter()

        @router.get("/explode")
        async def explode():
            raise RuntimeError("secret detail")

        with TestClient(create_app(routers=[router]), raise_server_exceptions=False) as client:
            response = client.get("/explode")

        assert response.status_code == 500
        assert response.json() == {"error": {"code": "INTERNAL_ERROR", "message": "Internal server error"}}
