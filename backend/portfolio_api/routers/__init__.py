"""
API routers.

- portfolio: owner-facing CRUD under /api/portfolio (bearer token)
- public: read-only portfolio under /api/public/portfolio/{handle}
- health: liveness and database checks
"""

from .health import router as health_router
from .portfolio import router as portfolio_router
from .public import router as public_router

__all__ = ["health_router", "portfolio_router", "public_router"]
