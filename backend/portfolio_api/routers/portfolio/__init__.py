"""
Owner-facing portfolio API, mounted at /api/portfolio.
"""

from fastapi import APIRouter

from .account_data import router as account_data_router
from .collections import router as collections_router
from .profile import router as profile_router

router = APIRouter(prefix="/api/portfolio")
router.include_router(profile_router)
router.include_router(account_data_router)
router.include_router(collections_router)

__all__ = ["router"]
