"""Configuration and small env helpers for the embed server."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

from ogembed.composer import FOOTER_MODE_MERGE, FOOTER_MODES

load_dotenv()

logger = logging.getLogger(__name__)

SITE_NAME = "Dynamic OG Embed"
APP_NAME = "Dynamic Embed Generator"
OG_LOCALE = "en_US"
THEME_COLOR = "#0b1220"
OG_IMAGE_WIDTH = 1200
OG_IMAGE_HEIGHT = 630
MERGED_FOOTER_MAX_AGE_SECONDS = 5 * 60
SEPARATE_FOOTER_MAX_AGE_SECONDS = 60 * 60
STALE_WHILE_REVALIDATE_SECONDS = 60 * 60 * 24
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_footer_mode() -> str:
    """Return the footer mode served at ``/embed``, defaulting to merge."""
    raw = (os.environ.get("OGEMBED_FOOTER_MODE") or "").strip().lower()
    if not raw:
        return FOOTER_MODE_MERGE
    if raw not in FOOTER_MODES:
        logger.warning(f"Unknown OGEMBED_FOOTER_MODE {raw!r}; using {FOOTER_MODE_MERGE}.")
        return FOOTER_MODE_MERGE
    return raw


def get_public_url() -> str | None:
    """Return the configured public origin without a trailing slash."""
    raw = (os.environ.get("OGEMBED_PUBLIC_URL") or "").strip().rstrip("/")
    return raw or None


def get_default_host() -> str:
    return (os.environ.get("OGEMBED_HOST") or "").strip() or DEFAULT_HOST


def get_default_port() -> int:
    """Return the default listen port, ignoring malformed values."""
    raw = (os.environ.get("OGEMBED_PORT") or "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        logger.warning(f"Invalid OGEMBED_PORT {raw!r}; using {DEFAULT_PORT}.")
        return DEFAULT_PORT
    if not 0 <= port <= 65535:
        logger.warning(f"Out of range OGEMBED_PORT {port}; using {DEFAULT_PORT}.")
        return DEFAULT_PORT
    return port


def get_log_level() -> str:
    return (os.environ.get("LOG_LEVEL") or "INFO").upper()


def cache_control(max_age: int) -> str:
    """Build the public Cache-Control value for embed responses."""
    return (
        f"public, max-age={max_age}, "
        f"stale-while-revalidate={STALE_WHILE_REVALIDATE_SECONDS}"
    )


def max_age_for_mode(footer_mode: str) -> int:
    if footer_mode == FOOTER_MODE_MERGE:
        return MERGED_FOOTER_MAX_AGE_SECONDS
    return SEPARATE_FOOTER_MAX_AGE_SECONDS
