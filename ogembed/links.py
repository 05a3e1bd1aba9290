from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import parse_qs, urlencode

from .composer import FALLBACK_TITLE
from .models import EmbedParams

EMBED_PATH = "/embed"
SHARE_KEYS = ("title", "desc", "footer", "image")


def _first(query: Mapping, key: str) -> str:
    """Return the first value for a query key, accepting lists or scalars."""
    value = query.get(key)
    if isinstance(value, (list, tuple)):
        value = value[0] if value else ""
    return value if isinstance(value, str) else ""


def get_embed_params(query: str | Mapping | None) -> EmbedParams:
    """Map a query string into embed params.

    Args:
        query: Raw query string (a leading ``?`` is allowed) or a
            ``parse_qs``-style mapping.

    Returns:
        EmbedParams with empty-string defaults; ``image`` is ``None`` when
        absent or empty.
    """
    if query is None:
        query = {}
    elif isinstance(query, str):
        query = parse_qs(query.lstrip("?"), keep_blank_values=True)
    return EmbedParams(
        title=_first(query, "title"),
        desc=_first(query, "desc"),
        footer=_first(query, "footer"),
        image=_first(query, "image") or None,
    )


def build_shareable_url(params: EmbedParams | Mapping, path: str = EMBED_PATH) -> str:
    """Build a relative embed link, omitting empty fields.

    Args:
        params: EmbedParams or a mapping with any of the share keys.
        path: Route the link points at.

    Returns:
        A link such as ``/embed?title=X``.
    """
    if isinstance(params, EmbedParams):
        values = {key: getattr(params, key) for key in SHARE_KEYS}
    else:
        values = {key: params.get(key) for key in SHARE_KEYS}
    query = urlencode([(key, value) for key, value in values.items() if value])
    return f"{path}?{query}"


def build_discord_message(title: str | None, full_url: str) -> str:
    """Format a markdown link suitable for pasting into Discord."""
    safe_title = (title or "").strip() or FALLBACK_TITLE
    return f"[{safe_title}]({full_url})"
