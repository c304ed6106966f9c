"""
Tests for middleware and infrastructure components.
"""

import logging
from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from portfolio_api.core.errors import register_exception_handlers, status_for
from portfolio_api.core.middlewares import (
    ContentTypeValidationMiddleware,
    SecurityHeadersMiddleware,
    register_middlewares,
)
from shared.config.logging import StructuredFormatter, get_logger, mask_owner_id
from shared.config.settings import Settings
from shared.infrastructure.correlation import (
    CorrelationIdFilter,
    CorrelationIdMiddleware,
    get_request_id,
    request_id_var,
)
from shared.infrastructure.db import safe_commit, translate_db_errors
from shared.utils.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
    SlugConflictError,
    UnavailableError,
)


def make_app(*middlewares) -> FastAPI:
    app = FastAPI()
    for middleware in middlewares:
        app.add_middleware(middleware)

    @app.get("/test")
    def get_endpoint():
        return {"request_id": get_request_id()}

    @app.post("/test")
    def post_endpoint(data: dict | None = None):
        return {"message": "ok"}

    return app


# =============================================================================
# SecurityHeadersMiddleware Tests
# =============================================================================

class TestSecurityHeadersMiddleware:
    """Tests for security headers middleware."""

    def test_adds_security_headers(self):
        client = TestClient(make_app(SecurityHeadersMiddleware))
        response = client.get("/test")

        assert response.headers.get("X-Content-Type-Options") == "nosniff"
        assert response.headers.get("X-Frame-Options") == "DENY"
        assert response.headers.get("Referrer-Policy") == "strict-origin-when-cross-origin"

    def test_adds_hsts_in_production(self):
        """Should add HSTS header only in production."""
        with patch("portfolio_api.core.middlewares.settings") as mock_settings:
            mock_settings.environment = "production"
            client = TestClient(make_app(SecurityHeadersMiddleware))
            response = client.get("/test")

        assert "max-age=31536000" in response.headers.get("Strict-Transport-Security", "")

    def test_no_hsts_in_development(self):
        with patch("portfolio_api.core.middlewares.settings") as mock_settings:
            mock_settings.environment = "development"
            client = TestClient(make_app(SecurityHeadersMiddleware))
            response = client.get("/test")

        assert "Strict-Transport-Security" not in response.headers


# =============================================================================
# ContentTypeValidationMiddleware Tests
# =============================================================================

class TestContentTypeValidationMiddleware:
    """Tests for content-type validation middleware."""

    def test_allows_json_content_type(self):
        client = TestClient(make_app(ContentTypeValidationMiddleware))
        response = client.post("/test", json={"key": "value"})

        assert response.status_code != 415

    def test_rejects_unsupported_content_type(self):
        client = TestClient(make_app(ContentTypeValidationMiddleware))
        response = client.post("/test", content="some data", headers={"Content-Type": "text/plain"})

        assert response.status_code == 415
        assert "Unsupported Media Type" in response.json()["detail"]

    def test_allows_get_without_content_type(self):
        client = TestClient(make_app(ContentTypeValidationMiddleware))
        assert client.get("/test").status_code == 200


# =============================================================================
# Correlation ID Tests
# =============================================================================

class TestCorrelationIdMiddleware:
    """Tests for correlation ID middleware."""

    def test_generates_request_id_when_not_provided(self):
        client = TestClient(make_app(CorrelationIdMiddleware))
        response = client.get("/test")

        request_id = response.headers.get("X-Request-ID")
        assert request_id is not None
        assert len(request_id) == 36  # UUID v4 length
        assert response.json()["request_id"] == request_id

    def test_uses_provided_request_id(self):
        client = TestClient(make_app(CorrelationIdMiddleware))
        response = client.get("/test", headers={"X-Request-ID": "my-request-12345"})

        assert response.headers.get("X-Request-ID") == "my-request-12345"


class TestCorrelationIdFilter:
    """Tests for correlation ID logging filter."""

    def test_adds_request_id_to_log_record(self):
        token = request_id_var.set("test-request-123")
        try:
            record = MagicMock()
            assert CorrelationIdFilter().filter(record) is True
            assert record.request_id == "test-request-123"
        finally:
            request_id_var.reset(token)

    def test_uses_dash_when_no_request_id(self):
        token = request_id_var.set("")
        try:
            record = MagicMock()
            CorrelationIdFilter().filter(record)
            assert record.request_id == "-"
        finally:
            request_id_var.reset(token)


# =============================================================================
# Database helper Tests
# =============================================================================

class TestSafeCommit:
    """Tests for safe_commit utility."""

    def test_commits_successfully(self):
        mock_db = MagicMock()

        safe_commit(mock_db)

        mock_db.commit.assert_called_once()
        mock_db.rollback.assert_not_called()

    def test_rollbacks_and_reraises_on_error(self):
        mock_db = MagicMock()
        mock_db.commit.side_effect = ValueError("Database error")

        with pytest.raises(ValueError, match="Database error"):
            safe_commit(mock_db)

        mock_db.rollback.assert_called_once()

    def test_connectivity_error_becomes_unavailable(self):
        mock_db = MagicMock()
        mock_db.commit.side_effect = OperationalError("COMMIT", {}, Exception("gone"))

        with pytest.raises(UnavailableError):
            safe_commit(mock_db)

        mock_db.rollback.assert_called_once()


class TestTranslateDbErrors:
    def test_connectivity_error_becomes_unavailable(self):
        mock_db = MagicMock()

        with pytest.raises(UnavailableError):
            with translate_db_errors(mock_db):
                raise OperationalError("SELECT 1", {}, Exception("timeout"))

        mock_db.rollback.assert_called_once()

    def test_other_errors_pass_through(self):
        mock_db = MagicMock()

        with pytest.raises(KeyError):
            with translate_db_errors(mock_db):
                raise KeyError("x")

        mock_db.rollback.assert_not_called()


# =============================================================================
# Exception handler Tests
# =============================================================================

class TestExceptionHandlers:
    @pytest.mark.parametrize(
        "exc, expected",
        [
            (NotFoundError("Project", "p1"), 404),
            (ForbiddenError("Project", "p1"), 403),
            (InvalidInputError("bad"), 400),
            (ConflictError("taken"), 409),
            (SlugConflictError("hello"), 409),
            (UnavailableError(), 503),
        ],
    )
    def test_status_for(self, exc, expected):
        assert status_for(exc) == expected

    def test_handler_body_and_retry_header(self):
        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/down")
        def down():
            raise UnavailableError()

        response = TestClient(app).get("/down")

        assert response.status_code == 503
        assert response.json() == {"detail": "Database temporarily unavailable"}
        assert response.headers["Retry-After"] == "5"


# =============================================================================
# Logging Tests
# =============================================================================

class TestLogging:
    def test_mask_owner_id(self):
        assert mask_owner_id("owner-alice") == "owne***"
        assert mask_owner_id(None) == "<no-owner>"

    def test_structured_formatter_outputs_json(self):
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)
        record.extra_data = {"entity_id": "p1"}

        output = StructuredFormatter().format(record)

        assert '"message": "hello"' in output
        assert '"entity_id": "p1"' in output

    def test_keyword_fields_land_on_record(self, caplog):
        logger = get_logger("tests.structured")

        with caplog.at_level(logging.INFO, logger="tests.structured"):
            logger.info("Project created", entity_id="p1", owner="owne***")

        record = caplog.records[-1]
        assert record.getMessage() == "Project created"
        assert record.extra_data == {"entity_id": "p1", "owner": "owne***"}


# =============================================================================
# Settings Tests
# =============================================================================

class TestProductionSecrets:
    def test_no_errors_outside_production(self):
        assert Settings(environment="development").validate_production_secrets() == []

    def test_unsafe_production_configuration(self):
        errors = Settings(
            environment="production",
            debug=True,
            jwt_secret="secret",
            allowed_origins="",
            database_url="sqlite://",
        ).validate_production_secrets()

        assert len(errors) == 4

    def test_safe_production_configuration(self):
        errors = Settings(
            environment="production",
            debug=False,
            jwt_secret="x" * 40,
            allowed_origins="https://portfolio.example.com",
            database_url="postgresql+psycopg://app@db/portfolio",
        ).validate_production_secrets()

        assert errors == []


# =============================================================================
# register_middlewares Tests
# =============================================================================

class TestRegisterMiddlewares:
    def test_registers_all_middlewares(self):
        app = FastAPI()

        register_middlewares(app)

        middleware_classes = [m.cls for m in app.user_middleware]
        assert SecurityHeadersMiddleware in middleware_classes
        assert ContentTypeValidationMiddleware in middleware_classes
        assert CorrelationIdMiddleware in middleware_classes
