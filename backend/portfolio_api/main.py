"""
Portfolio API main application.
Entry point for the FastAPI REST server.
"""

from fastapi import FastAPI

from portfolio_api.core.cors import configure_cors
from portfolio_api.core.errors import register_exception_handlers
from portfolio_api.core.lifespan import lifespan
from portfolio_api.core.middlewares import register_middlewares
from portfolio_api.routers import health_router, portfolio_router, public_router
from shared.config.settings import settings


app = FastAPI(
    title="Portfolio API",
    description="Per-user portfolio content management and public portfolio",
    version="0.1.0",
    lifespan=lifespan,
)

register_middlewares(app)
configure_cors(app)
register_exception_handlers(app)

app.include_router(health_router)
app.include_router(portfolio_router)
app.include_router(public_router)


# =============================================================================
# Development entry point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "portfolio_api.main:app",
        host="0.0.0.0",
        port=settings.api_port,
        reload=settings.debug,
    )
