"""Compose Open Graph card fields from raw embed parameters."""

from __future__ import annotations

import logging

from .models import ComposedOutput, EmbedParams, ValidationResult
from .sanitize import LIMITS, Limits, merge_description, truncate
from .validators import validate_params

logger = logging.getLogger(__name__)

FOOTER_MODE_MERGE = "merge"
FOOTER_MODE_SEPARATE = "separate"
FOOTER_MODES = (FOOTER_MODE_MERGE, FOOTER_MODE_SEPARATE)

FALLBACK_TITLE = "Untitled Card"
FALLBACK_DESCRIPTION = "A shareable embed card created with Dynamic Embed Generator"
DEFAULT_IMAGE_TYPE = "image/*"
IMAGE_TYPES_BY_SUFFIX = (
    (".png", "image/png"),
    (".webp", "image/webp"),
    (".gif", "image/gif"),
    (".jpg", "image/jpeg"),
    (".jpeg", "image/jpeg"),
)


def image_type_for_url(image_url: str | None) -> str:
    """Guess an ``og:image:type`` value from the URL suffix.

    Args:
        image_url: Validated image URL, or an empty value.

    Returns:
        A MIME type, ``image/*`` for unknown suffixes, or an empty string
        when there is no image.
    """
    if not image_url:
        return ""
    lowered = image_url.lower()
    for suffix, mime_type in IMAGE_TYPES_BY_SUFFIX:
        if lowered.endswith(suffix):
            return mime_type
    return DEFAULT_IMAGE_TYPE


def _log_fallback(field: str, result: ValidationResult) -> None:
    if not result.valid:
        logger.debug(f"Falling back for {field}: {result.code}")


def compose_card(
    params: EmbedParams,
    footer_mode: str = FOOTER_MODE_MERGE,
    limits: Limits = LIMITS,
) -> ComposedOutput:
    """Build the card fields for one embed request.

    Invalid fields never fail the request: the title and description fall
    back to default text, and an invalid footer or image is dropped.

    Args:
        params: Raw request parameters.
        footer_mode: ``merge`` appends the footer to the description as bold
            markdown; ``separate`` leaves the description alone and only
            reports the footer text.
        limits: Length limits to enforce.

    Returns:
        Unescaped composed values. Call ``escaped()`` before templating.
    """
    if footer_mode not in FOOTER_MODES:
        raise ValueError(f"Unknown footer mode: {footer_mode!r}")

    cleaned = params.stripped()
    results = validate_params(cleaned, limits)
    for field, result in results.items():
        _log_fallback(field, result)

    title = (
        truncate(cleaned.title, limits.title)
        if results["title"].valid
        else FALLBACK_TITLE
    )
    footer = truncate(cleaned.footer, limits.footer) if results["footer"].valid else ""
    base_description = (
        truncate(cleaned.desc, limits.description)
        if results["description"].valid
        else FALLBACK_DESCRIPTION
    )
    if footer_mode == FOOTER_MODE_MERGE:
        description = merge_description(base_description, footer, limits)
    else:
        description = truncate(base_description, limits.description)

    image_url = cleaned.image if results["image"].valid else ""
    return ComposedOutput(
        title=title,
        description=description,
        footer_text=footer,
        image_url=image_url or "",
        image_type=image_type_for_url(image_url),
    )
