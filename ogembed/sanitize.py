"""Limits, escaping and the budgeted description/footer merge."""

from __future__ import annotations

from dataclasses import dataclass, fields
from html import escape

FOOTER_PREFIX = "\n\n**"
FOOTER_SUFFIX = "**"
FOOTER_WRAPPER_LENGTH = len(FOOTER_PREFIX) + len(FOOTER_SUFFIX)
ELLIPSIS = "..."


@dataclass(frozen=True)
class Limits:
    title: int
    description: int
    footer: int

    def __post_init__(self) -> None:
        """Reject limits that are not positive integers."""
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"Limit {item.name!r} must be a positive integer")


LIMITS = Limits(title=200, description=1000, footer=200)


def escape_html(text: str | None) -> str:
    """Escape text for safe use in HTML element and attribute content."""
    return escape(text or "", quote=True)


def truncate(text: str | None, max_length: int) -> str:
    """Return at most ``max_length`` leading characters of ``text``."""
    return (text or "")[: max(0, max_length)]


def footer_markdown(content: str | None) -> str:
    """Wrap footer content as a bold markdown paragraph.

    Args:
        content: Footer text, already trimmed and bounded.

    Returns:
        ``"\\n\\n**content**"``, or an empty string for empty content.
    """
    if not content:
        return ""
    return f"{FOOTER_PREFIX}{content}{FOOTER_SUFFIX}"


def merge_description(
    base: str,
    footer_content: str = "",
    limits: Limits = LIMITS,
) -> str:
    """Append footer markdown to a description without exceeding the budget.

    When both fit, they are concatenated. When they do not, the description
    is cut and ellipsized so the full footer still fits. If the footer alone
    leaves no room for an ellipsis, the footer itself is shortened and used as
    the whole description. If nothing of it survives, the footer is dropped.

    Args:
        base: Description text.
        footer_content: Footer text without markdown wrapping.
        limits: Length limits; only ``limits.description`` is used.

    Returns:
        Merged description of at most ``limits.description`` characters.
    """
    budget = limits.description
    base = truncate(base, budget)
    markdown = footer_markdown(footer_content)
    if not markdown:
        return base
    if len(base) + len(markdown) <= budget:
        return base + markdown

    allowed_base = budget - len(markdown)
    if allowed_base > len(ELLIPSIS):
        return truncate(base, allowed_base - len(ELLIPSIS)).rstrip() + ELLIPSIS + markdown

    shrunk = footer_markdown(truncate(footer_content, budget - FOOTER_WRAPPER_LENGTH))
    shrunk = shrunk.lstrip()
    if shrunk:
        return shrunk
    return base
