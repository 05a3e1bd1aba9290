"""HTML rendering helpers for the embed server."""

from __future__ import annotations

from ogembed.composer import FOOTER_MODE_MERGE
from ogembed.models import ComposedOutput, EmbedParams, ValidationResult
from ogembed.sanitize import LIMITS, Limits, escape_html

from .config import (
    APP_NAME,
    OG_IMAGE_HEIGHT,
    OG_IMAGE_WIDTH,
    OG_LOCALE,
    SITE_NAME,
    THEME_COLOR,
)

BASE_STYLES = """
    :root {
      --bg: #07080a;
      --panel: #0f1720;
      --muted: #9aa3b2;
      --text: #e6eef6;
      --accent: #00b4d8;
      --danger: #ff6b6b;
      --radius: 12px;
    }
    *, *::before, *::after { box-sizing: border-box; }
    body {
      margin: 0;
      min-height: 100vh;
      display: flex;
      align-items: center;
      justify-content: center;
      padding: 20px;
      background: var(--bg);
      color: var(--text);
      font-family: Inter, ui-sans-serif, system-ui, -apple-system, "Segoe UI", Roboto, Arial, sans-serif;
      line-height: 1.45;
    }
    .wrap { width: 100%; max-width: 760px; padding: 18px; }
    .card {
      background: var(--panel);
      border-radius: var(--radius);
      border: 1px solid rgba(255, 255, 255, 0.04);
      box-shadow: 0 10px 30px rgba(2, 6, 23, 0.6);
      overflow: hidden;
    }
    .media { display: block; width: 100%; max-height: 420px; object-fit: cover; background: #0b1220; }
    .content { padding: 20px 22px; }
    h1 { margin: 0 0 8px; font-size: 1.45rem; line-height: 1.15; word-break: break-word; }
    p.lead { margin: 0 0 12px; color: var(--muted); white-space: pre-line; word-break: break-word; }
    .footer { margin-top: 12px; color: var(--muted); font-size: 0.85rem; }
    .meta { margin-top: 14px; display: flex; justify-content: center; gap: 6px; color: var(--muted); font-size: 0.85rem; }
    a.home { color: var(--accent); font-weight: 600; text-decoration: none; }
    @media (max-width: 640px) {
      .wrap { padding: 10px; }
      .content { padding: 16px; }
      h1 { font-size: 1.2rem; }
    }
"""

BUILDER_STYLES = """
    label { display: block; margin: 14px 0 6px; font-weight: 600; }
    .hint { color: var(--muted); font-weight: 400; font-size: 0.8rem; }
    input, textarea {
      width: 100%;
      padding: 10px 12px;
      border-radius: 8px;
      border: 1px solid rgba(255, 255, 255, 0.1);
      background: #0b1220;
      color: var(--text);
      font: inherit;
    }
    textarea { min-height: 120px; resize: vertical; }
    .field-error { margin-top: 4px; color: var(--danger); font-size: 0.85rem; }
    .btn {
      margin-top: 18px;
      padding: 10px 16px;
      border: 0;
      border-radius: 8px;
      background: var(--accent);
      color: #041018;
      font-weight: 700;
      cursor: pointer;
    }
    .result { margin-top: 20px; }
    .result textarea { min-height: 0; }
"""


def _meta_property(name: str, content: str) -> str:
    return f'<meta property="{name}" content="{content}" />'


def _meta_name(name: str, content: str) -> str:
    return f'<meta name="{name}" content="{content}" />'


def _render_meta_tags(card: ComposedOutput, escaped_url: str) -> str:
    """Render Open Graph and Twitter tags for an already-escaped card.

    Args:
        card: Escaped card values.
        escaped_url: Escaped canonical URL of the current request.

    Returns:
        Newline-joined meta tag markup.
    """
    tags = [
        _meta_name("description", card.description),
        _meta_property("og:type", "website"),
        _meta_property("og:url", escaped_url),
        _meta_property("og:title", card.title),
        _meta_property("og:description", card.description),
        _meta_property("og:site_name", escape_html(SITE_NAME)),
        _meta_property("og:locale", OG_LOCALE),
    ]
    if card.has_image:
        tags.extend(
            [
                _meta_property("og:image", card.image_url),
                _meta_property("og:image:secure_url", card.image_url),
                _meta_property("og:image:width", str(OG_IMAGE_WIDTH)),
                _meta_property("og:image:height", str(OG_IMAGE_HEIGHT)),
                _meta_property("og:image:type", card.image_type),
                _meta_property("og:image:alt", card.title),
            ]
        )
    tags.extend(
        [
            _meta_name("twitter:card", "summary_large_image" if card.has_image else "summary"),
            _meta_name("twitter:title", card.title),
            _meta_name("twitter:description", card.description),
        ]
    )
    if card.has_image:
        tags.extend(
            [
                _meta_name("twitter:image", card.image_url),
                _meta_name("twitter:image:alt", card.title),
            ]
        )
    return "\n  ".join(tags)


def render_embed_page(
    composed: ComposedOutput,
    page_url: str,
    footer_mode: str = FOOTER_MODE_MERGE,
) -> bytes:
    """Render the embed document served to crawlers and people.

    Args:
        composed: Unescaped card values from ``compose_card``.
        page_url: Absolute URL of the current request, used for ``og:url``.
        footer_mode: In ``merge`` mode the footer already lives in the
            description; otherwise it is shown as its own block.

    Returns:
        UTF-8 encoded HTML document bytes.
    """
    card = composed.escaped()
    escaped_url = escape_html(page_url)
    meta_tags = _render_meta_tags(card, escaped_url)
    image_html = (
        f'<img src="{card.image_url}" alt="{card.title}" class="media" loading="eager" />'
        if card.has_image
        else ""
    )
    footer_html = (
        f'<div class="footer">{card.footer_text}</div>'
        if card.footer_text and footer_mode != FOOTER_MODE_MERGE
        else ""
    )
    html = f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>{card.title}</title>
  {meta_tags}
  <meta name="referrer" content="no-referrer-when-downgrade" />
  <meta name="theme-color" content="{THEME_COLOR}" />
  <style>{BASE_STYLES}</style>
</head>
<body>
  <main class="wrap" role="main" aria-label="Embed preview">
    <article class="card" aria-live="polite">
      {image_html}
      <div class="content">
        <h1>{card.title}</h1>
        <p class="lead">{card.description}</p>
        {footer_html}
        <div class="meta">
          <span>Created with</span>
          <a class="home" href="/" rel="noopener noreferrer">{escape_html(APP_NAME)}</a>
        </div>
      </div>
    </article>
  </main>
</body>
</html>
"""
    return html.encode("utf-8")


def _field_error_html(results: dict[str, ValidationResult], key: str) -> str:
    result = results.get(key)
    if result is None or result.valid:
        return ""
    return f'<div class="field-error" role="alert">{escape_html(result.error)}</div>'


def render_builder_page(
    params: EmbedParams | None = None,
    results: dict[str, ValidationResult] | None = None,
    share_url: str | None = None,
    discord_message: str | None = None,
    limits: Limits = LIMITS,
) -> bytes:
    """Render the card builder form.

    Args:
        params: Values to prefill in the form.
        results: Per-field validation results; only failures are shown.
        share_url: Absolute shareable link, shown when the form is valid.
        discord_message: Markdown link for Discord, shown with ``share_url``.
        limits: Limits shown next to each field label.

    Returns:
        UTF-8 encoded HTML document bytes.
    """
    params = params or EmbedParams()
    results = results or {}
    result_html = ""
    if share_url:
        escaped_share_url = escape_html(share_url)
        result_html = f"""
        <section class="result" aria-label="Shareable link">
          <label for="share-url">Shareable link</label>
          <input id="share-url" type="text" readonly value="{escaped_share_url}" />
          <label for="discord-message">Discord message</label>
          <textarea id="discord-message" rows="2" readonly>{escape_html(discord_message)}</textarea>
          <p><a class="home" href="{escaped_share_url}" target="_blank" rel="noopener noreferrer">Open preview</a></p>
        </section>
        """
    html = f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>{escape_html(APP_NAME)}</title>
  {_meta_name("description", "Generate shareable Open Graph embed cards with custom metadata.")}
  {_meta_property("og:type", "website")}
  {_meta_property("og:title", escape_html(APP_NAME))}
  {_meta_property("og:description", "Create social media preview cards")}
  <meta name="theme-color" content="{THEME_COLOR}" />
  <style>{BASE_STYLES}{BUILDER_STYLES}</style>
</head>
<body>
  <main class="wrap" role="main">
    <article class="card">
      <div class="content">
        <h1>{escape_html(APP_NAME)}</h1>
        <form method="get" action="/">
          <label for="title">Title <span class="hint">(max {limits.title})</span></label>
          <input id="title" name="title" type="text" value="{escape_html(params.title)}" />
          {_field_error_html(results, "title")}
          <label for="desc">Description <span class="hint">(max {limits.description})</span></label>
          <textarea id="desc" name="desc">{escape_html(params.desc)}</textarea>
          {_field_error_html(results, "description")}
          <label for="footer">Footer <span class="hint">(optional, max {limits.footer})</span></label>
          <input id="footer" name="footer" type="text" value="{escape_html(params.footer)}" />
          {_field_error_html(results, "footer")}
          <label for="image">Image URL <span class="hint">(optional, HTTPS only)</span></label>
          <input id="image" name="image" type="url" value="{escape_html(params.image)}" />
          {_field_error_html(results, "image")}
          <button class="btn" type="submit">Generate link</button>
        </form>
        {result_html}
      </div>
    </article>
  </main>
</body>
</html>
"""
    return html.encode("utf-8")
