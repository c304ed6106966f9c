"""
Utilities module: Exceptions, validators.
"""

from shared.utils.exceptions import (
    AppException,
    NotFoundError,
    ForbiddenError,
    InvalidInputError,
    ConflictError,
    SlugConflictError,
    UnavailableError,
)
from shared.utils.validators import (
    validate_url,
    validate_owner_id,
    validate_date_range,
    validate_rating,
    validate_choice,
    certification_status,
)

__all__ = [
    # exceptions
    "AppException",
    "NotFoundError",
    "ForbiddenError",
    "InvalidInputError",
    "ConflictError",
    "SlugConflictError",
    "UnavailableError",
    # validators
    "validate_url",
    "validate_owner_id",
    "validate_date_range",
    "validate_rating",
    "validate_choice",
    "certification_status",
]
