"""
Shared validators for portfolio content.
validate_url raises ValueError; the services re-raise it as InvalidInputError
for the offending field. Business rules raise InvalidInputError directly so
they can be applied to merged (stored + patch) values.
"""

from datetime import date
from urllib.parse import urlparse

from shared.config.constants import CertificationStatus, Limits
from shared.utils.exceptions import InvalidInputError

# URL schemes that never make sense for a link on a portfolio
BLOCKED_SCHEMES = {"javascript", "data", "file", "vbscript"}


def validate_url(url: str | None) -> str | None:
    """
    Validate and normalize an external link (project url, avatar, resume...).

    Returns:
        The stripped URL, or None for empty input.

    Raises:
        ValueError: If the URL is malformed, too long or uses a blocked scheme.
    """
    if url is None:
        return None

    url = url.strip()
    if not url:
        return None

    if len(url) > Limits.MAX_URL_LENGTH:
        raise ValueError(f"URL too long (max {Limits.MAX_URL_LENGTH} characters)")

    parsed = urlparse(url)
    scheme = parsed.scheme.lower()
    if scheme in BLOCKED_SCHEMES:
        raise ValueError(f"URL scheme not allowed: {scheme}")
    if scheme not in ("http", "https"):
        raise ValueError("Only HTTP/HTTPS URLs are allowed")
    if not parsed.netloc:
        raise ValueError("URL has no host")

    return url


def validate_owner_id(owner_id: str | None) -> str:
    """Reject a missing or blank owner ID."""
    if not owner_id or not owner_id.strip():
        raise InvalidInputError("owner_id must not be empty", field="owner_id")
    return owner_id


def validate_date_range(
    start: date | None,
    end: date | None,
    message: str = "start date must be before end date",
    field: str = "end_date",
) -> None:
    """
    Require start <= end when both are set.

    Raises:
        InvalidInputError: With the given message.
    """
    if start is not None and end is not None and start > end:
        raise InvalidInputError(message, field=field)


def validate_rating(rating: int | None) -> None:
    """Testimonial ratings are a closed 1..5 range."""
    if rating is None:
        return
    if rating < Limits.MIN_RATING or rating > Limits.MAX_RATING:
        raise InvalidInputError(
            f"rating must be between {Limits.MIN_RATING} and {Limits.MAX_RATING}",
            field="rating",
        )


def validate_choice(value: str | None, allowed: list[str], field: str) -> None:
    """Require value to be one of allowed when it is set."""
    if value is None:
        return
    if value not in allowed:
        raise InvalidInputError(
            f"{field} must be one of: {', '.join(allowed)}",
            field=field,
        )


def certification_status(
    expiry_date: date | None,
    today: date | None = None,
) -> tuple[str, int | None]:
    """
    Derive a certification's status from its expiry date.

    Returns:
        (status label, days until expiry or None when it never expires)
    """
    if expiry_date is None:
        return CertificationStatus.NO_EXPIRY, None

    today = today or date.today()
    days = (expiry_date - today).days
    if days < 0:
        return CertificationStatus.EXPIRED, days
    if days <= Limits.EXPIRING_SOON_DAYS:
        return CertificationStatus.EXPIRING_SOON, days
    return CertificationStatus.VALID, days
