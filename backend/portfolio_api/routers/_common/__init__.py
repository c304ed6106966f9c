"""Helpers shared by routers."""

from .pagination import Pagination, get_pagination, get_public_pagination, page_output

__all__ = ["Pagination", "get_pagination", "get_public_pagination", "page_output"]
