from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Optional

from .sanitize import Limits, escape_html

__all__ = ["ComposedOutput", "EmbedParams", "Limits", "ValidationResult"]


@dataclass(frozen=True)
class EmbedParams:
    title: str = ""
    desc: str = ""
    footer: str = ""
    image: Optional[str] = None

    def stripped(self) -> "EmbedParams":
        """Return a copy with surrounding whitespace removed from every field.

        Returns:
            New params where missing values become empty strings.
        """
        return EmbedParams(
            title=(self.title or "").strip(),
            desc=(self.desc or "").strip(),
            footer=(self.footer or "").strip(),
            image=(self.image or "").strip(),
        )


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: Optional[str] = None
    code: Optional[str] = None

    def as_dict(self) -> dict[str, object]:
        return {"valid": self.valid, "error": self.error, "code": self.code}


@dataclass(frozen=True)
class ComposedOutput:
    title: str
    description: str
    footer_text: str = ""
    image_url: str = ""
    image_type: str = ""

    @property
    def has_image(self) -> bool:
        return bool(self.image_url)

    def escaped(self) -> "ComposedOutput":
        """Return a copy with every field HTML-escaped for templating.

        Returns:
            ComposedOutput whose values are safe for element and attribute
            content. Markdown asterisks are left untouched.
        """
        return replace(
            self,
            **{item.name: escape_html(getattr(self, item.name)) for item in fields(self)},
        )
