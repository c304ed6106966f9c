"""
HTTP middlewares: response hardening headers, JSON-only request bodies and
request correlation IDs.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from shared.config.settings import settings
from shared.infrastructure.correlation import CorrelationIdMiddleware

BASE_SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}
HSTS_VALUE = "max-age=31536000; includeSubDomains"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Stamp BASE_SECURITY_HEADERS on every response, plus HSTS in production."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.update(BASE_SECURITY_HEADERS)
        if settings.environment == "production":
            response.headers["Strict-Transport-Security"] = HSTS_VALUE
        return response


class ContentTypeValidationMiddleware(BaseHTTPMiddleware):
    """415 for a declared request body that is not JSON."""

    BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})

    @staticmethod
    def _is_json(content_type: str) -> bool:
        media_type = content_type.split(";", 1)[0].strip().lower()
        return media_type == "application/json" or media_type.endswith("+json")

    async def dispatch(self, request: Request, call_next):
        content_type = request.headers.get("content-type")
        if request.method in self.BODY_METHODS and content_type and not self._is_json(content_type):
            return JSONResponse(
                status_code=415,
                content={"detail": f"Unsupported Media Type '{content_type}'. Use application/json"},
            )
        return await call_next(request)


def register_middlewares(app: FastAPI) -> None:
    """
    Install the middlewares. Starlette runs the last one added first, so the
    correlation ID is bound before anything else logs.
    """
    for middleware in (
        SecurityHeadersMiddleware,
        ContentTypeValidationMiddleware,
        CorrelationIdMiddleware,
    ):
        app.add_middleware(middleware)
