"""
Domain exceptions for consistent error handling.

The services raise these and never encode HTTP status codes; the FastAPI
exception handlers in portfolio_api.core.errors translate each kind.

Usage:
    from shared.utils.exceptions import NotFoundError, ForbiddenError, InvalidInputError

    raise NotFoundError("Project", project_id)
    raise ForbiddenError("Project", project_id)
    raise InvalidInputError("start date must be before end date")
"""

from typing import Any

from shared.config.logging import get_logger

logger = get_logger(__name__)


class AppException(Exception):
    """
    Base exception with automatic logging.

    All domain errors inherit from this class so they are logged with their
    context at the point they are raised.
    """

    kind: str = "error"
    log_level: str = "warning"

    def __init__(self, detail: str, **log_context: Any):
        self.detail = detail
        self.context = log_context

        log_fn = getattr(logger, self.log_level, logger.warning)
        log_fn(detail, kind=self.kind, **log_context)

        super().__init__(detail)

    def __str__(self) -> str:
        return self.detail


# =============================================================================
# Not found
# =============================================================================


class NotFoundError(AppException):
    """
    Entity not found (or soft-deleted, which reads the same).

    Usage:
        raise NotFoundError("Project", project_id)
        raise NotFoundError("Portfolio")
    """

    kind = "not_found"

    def __init__(self, entity: str, entity_id: str | None = None, **log_context: Any):
        if entity_id is not None:
            detail = f"{entity} with ID {entity_id} not found"
        else:
            detail = f"{entity} not found"

        self.entity = entity
        self.entity_id = entity_id
        super().__init__(detail, entity=entity, entity_id=entity_id, **log_context)


# =============================================================================
# Forbidden
# =============================================================================


class ForbiddenError(AppException):
    """
    The record exists but belongs to another owner, or a batch referenced
    records the caller does not own.

    The message never names the real owner.
    """

    kind = "forbidden"

    def __init__(self, entity: str | None = None, entity_id: str | None = None, **log_context: Any):
        if entity and entity_id is not None:
            detail = f"Not authorized to access {entity} with ID {entity_id}"
        elif entity:
            detail = f"Not authorized to access one or more {entity} records"
        else:
            detail = "Access denied"

        self.entity = entity
        self.entity_id = entity_id
        super().__init__(detail, entity=entity, entity_id=entity_id, **log_context)


# =============================================================================
# Invalid input
# =============================================================================


class InvalidInputError(AppException):
    """
    A business rule rejected the payload.

    Usage:
        raise InvalidInputError("rating must be between 1 and 5", field="rating")
    """

    kind = "invalid_input"

    def __init__(self, detail: str, field: str | None = None, **log_context: Any):
        self.field = field
        super().__init__(detail, field=field, **log_context)


# =============================================================================
# Conflict
# =============================================================================


class ConflictError(AppException):
    """
    A uniqueness constraint would be violated (e.g. blog slug taken).
    """

    kind = "conflict"

    def __init__(self, detail: str, **log_context: Any):
        super().__init__(detail, **log_context)


class SlugConflictError(ConflictError):
    """The requested blog slug belongs to another post."""

    def __init__(self, slug: str, **log_context: Any):
        self.slug = slug
        super().__init__(f"Slug '{slug}' is already in use", slug=slug, **log_context)


# =============================================================================
# Unavailable
# =============================================================================


class UnavailableError(AppException):
    """
    The persistence layer is unreachable or timed out. Retryable.
    """

    kind = "unavailable"
    log_level = "error"

    def __init__(self, detail: str = "Database temporarily unavailable", **log_context: Any):
        super().__init__(detail, **log_context)
