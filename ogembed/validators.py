from __future__ import annotations

from urllib.parse import urlparse

from .models import EmbedParams, ValidationResult
from .sanitize import LIMITS, Limits

EMPTY_FIELD = "empty_field"
TOO_LONG = "too_long"
INVALID_FORMAT = "invalid_format"
SCHEME_NOT_ALLOWED = "scheme_not_allowed"

ALLOWED_IMAGE_SCHEMES = ("https",)

VALID = ValidationResult(valid=True)


def _required_text(value: str | None, label: str, max_length: int) -> ValidationResult:
    """Validate a required, length-bounded text field."""
    text = value or ""
    if not text.strip():
        return ValidationResult(False, f"{label} is required", EMPTY_FIELD)
    if len(text) > max_length:
        return ValidationResult(
            False, f"{label} must be {max_length} characters or less", TOO_LONG
        )
    return VALID


def validate_title(title: str | None, limits: Limits = LIMITS) -> ValidationResult:
    """Return whether a card title is present and within the title limit."""
    return _required_text(title, "Title", limits.title)


def validate_description(desc: str | None, limits: Limits = LIMITS) -> ValidationResult:
    """Return whether a description is present and within the description limit."""
    return _required_text(desc, "Description", limits.description)


def validate_footer(footer: str | None, limits: Limits = LIMITS) -> ValidationResult:
    """Return whether an optional footer fits the footer limit."""
    if footer and len(footer) > limits.footer:
        return ValidationResult(
            False, f"Footer must be {limits.footer} characters or less", TOO_LONG
        )
    return VALID


def validate_image_url(image_url: str | None) -> ValidationResult:
    """Validate an optional image URL.

    Any host is accepted, including ``localhost``, once the URL is absolute
    and uses HTTPS.

    Args:
        image_url: Raw image URL, possibly empty.

    Returns:
        A valid result for empty input or absolute HTTPS URLs.
    """
    candidate = (image_url or "").strip()
    if not candidate:
        return VALID
    invalid = ValidationResult(False, "Invalid URL format", INVALID_FORMAT)
    try:
        parsed = urlparse(candidate)
        parsed.port  # raises ValueError for a malformed or out-of-range port
    except ValueError:
        return invalid
    if not parsed.scheme:
        return invalid
    if parsed.scheme.lower() not in ALLOWED_IMAGE_SCHEMES:
        return ValidationResult(False, "Image URL must be HTTPS only", SCHEME_NOT_ALLOWED)
    hostname = parsed.hostname or ""
    if not hostname or any(ch.isspace() for ch in hostname):
        return invalid
    return VALID


def validate_params(
    params: EmbedParams, limits: Limits = LIMITS
) -> dict[str, ValidationResult]:
    """Validate all four embed fields after trimming.

    Args:
        params: Raw request parameters.
        limits: Length limits to apply.

    Returns:
        Results keyed by ``title``, ``description``, ``footer`` and ``image``.
    """
    cleaned = params.stripped()
    return {
        "title": validate_title(cleaned.title, limits),
        "description": validate_description(cleaned.desc, limits),
        "footer": validate_footer(cleaned.footer, limits),
        "image": validate_image_url(cleaned.image),
    }
