"""
CORS configuration for the portfolio frontends (owner dashboard and public site).
"""

from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config.settings import settings
from shared.infrastructure.correlation import REQUEST_ID_HEADER


def cors_options() -> dict[str, Any]:
    """
    CORSMiddleware keyword arguments for the current environment.

    Origins come from ALLOWED_ORIGINS (comma-separated) or the local dev
    servers. Preflight responses are not cached in development so header
    changes show up immediately.
    """
    return {
        "allow_origins": settings.cors_origins,
        "allow_credentials": True,
        "allow_methods": ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        "allow_headers": ["Authorization", "Content-Type", "Accept", REQUEST_ID_HEADER],
        "expose_headers": [REQUEST_ID_HEADER],
        "max_age": 0 if settings.environment == "development" else 600,
    }


def configure_cors(app: FastAPI) -> None:
    app.add_middleware(CORSMiddleware, **cors_options())
