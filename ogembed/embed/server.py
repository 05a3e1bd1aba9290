"""HTTP server for Open Graph embed cards.

This module serves the embed document at ``/embed``, a legacy variant with a
separate footer block at ``/embed/simple``, a server-rendered link builder at
``/`` and small JSON validation/health APIs.
"""

from __future__ import annotations

import argparse
import json
import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

from ogembed.composer import FOOTER_MODE_SEPARATE, FOOTER_MODES, compose_card
from ogembed.links import build_discord_message, build_shareable_url, get_embed_params
from ogembed.validators import validate_params

from .config import (
    LOG_FORMAT,
    cache_control,
    get_default_host,
    get_default_port,
    get_footer_mode,
    get_log_level,
    get_public_url,
    max_age_for_mode,
)
from .pages import render_builder_page, render_embed_page

logger = logging.getLogger(__name__)

EMBED_FOOTER_MODE = get_footer_mode()
PUBLIC_URL = get_public_url()

SECURITY_HEADERS = (
    ("X-Content-Type-Options", "nosniff"),
    ("X-Frame-Options", "SAMEORIGIN"),
    ("Referrer-Policy", "no-referrer-when-downgrade"),
)
NO_STORE = "no-store, no-cache, must-revalidate, max-age=0"


class EmbedHandler(BaseHTTPRequestHandler):
    """HTTP handler for embed pages, the builder page and JSON APIs."""

    footer_mode = EMBED_FOOTER_MODE
    public_url = PUBLIC_URL

    def end_headers(self):
        """Attach security headers before completing every response."""
        for name, value in SECURITY_HEADERS:
            self.send_header(name, value)
        super().end_headers()

    def _send_body(self, status: int, content_type: str, body: bytes, cache: str) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Cache-Control", cache)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _send_json(self, status: int, payload: dict) -> None:
        """Write a non-cacheable JSON response.

        Args:
            status: HTTP status code.
            payload: JSON-serializable response payload.
        """
        data = json.dumps(payload).encode("utf-8")
        self._send_body(status, "application/json", data, NO_STORE)

    def _send_html(self, status: int, body: bytes, cache: str = NO_STORE) -> None:
        self._send_body(status, "text/html; charset=utf-8", body, cache)

    def _first_header(self, *names: str) -> str | None:
        """Return the first non-empty header value from a list of names.

        Args:
            *names: Candidate header names to inspect in order.

        Returns:
            The stripped first comma-separated value, otherwise ``None``.
        """
        for name in names:
            value = self.headers.get(name)
            if value and value.strip():
                return value.split(",")[0].strip()
        return None

    def _origin(self) -> str:
        """Resolve the public origin of this request.

        Returns:
            The configured public URL, or one derived from proxy/Host headers.
        """
        if self.public_url:
            return self.public_url
        proto = (self._first_header("X-Forwarded-Proto") or "http").lower()
        if proto not in ("http", "https"):
            proto = "http"
        host = self._first_header("X-Forwarded-Host", "Host")
        if not host:
            host = f"{self.server.server_address[0]}:{self.server.server_address[1]}"
        return f"{proto}://{host}"

    def _request_url(self) -> str:
        return f"{self._origin()}{self.path}"

    def _serve_embed(self, query: str, footer_mode: str) -> None:
        """Render an embed card; every input yields a 200 response.

        Args:
            query: Raw request query string.
            footer_mode: Footer handling for this route.
        """
        params = get_embed_params(query)
        composed = compose_card(params, footer_mode=footer_mode)
        body = render_embed_page(composed, self._request_url(), footer_mode=footer_mode)
        self._send_html(200, body, cache_control(max_age_for_mode(footer_mode)))

    def _serve_builder(self, query: str) -> None:
        params = get_embed_params(query)
        submitted = any([params.title, params.desc, params.footer, params.image])
        if not submitted:
            return self._send_html(200, render_builder_page())

        cleaned = params.stripped()
        results = validate_params(cleaned)
        share_url = None
        discord_message = None
        if all(result.valid for result in results.values()):
            share_url = f"{self._origin()}{build_shareable_url(cleaned)}"
            discord_message = build_discord_message(cleaned.title, share_url)
        body = render_builder_page(
            params=params,
            results=results,
            share_url=share_url,
            discord_message=discord_message,
        )
        return self._send_html(200, body)

    def _serve_validate(self, query: str) -> None:
        cleaned = get_embed_params(query).stripped()
        results = validate_params(cleaned)
        return self._send_json(
            200,
            {
                "valid": all(result.valid for result in results.values()),
                "fields": {key: result.as_dict() for key, result in results.items()},
                "url": build_shareable_url(cleaned),
            },
        )

    def do_GET(self):
        """Route GET requests to embed pages, the builder and JSON APIs."""
        parsed = urlsplit(self.path)
        if parsed.path == "/embed":
            return self._serve_embed(parsed.query, self.footer_mode)

        if parsed.path == "/embed/simple":
            return self._serve_embed(parsed.query, FOOTER_MODE_SEPARATE)

        if parsed.path == "/api/validate":
            return self._serve_validate(parsed.query)

        if parsed.path == "/api/health":
            return self._send_json(200, {"ok": True})

        if parsed.path in ("/", "/index.html"):
            return self._serve_builder(parsed.query)

        self.send_error(404, "Not Found")

    def log_message(self, fmt, *args):
        """Send access logs to the module logger instead of stderr."""
        logger.debug(f"{self.address_string()} {fmt % args}")


def make_server(
    host: str,
    port: int,
    footer_mode: str | None = None,
    public_url: str | None = None,
) -> ThreadingHTTPServer:
    """Create a threaded embed server without starting it.

    Args:
        host: Interface to bind.
        port: Port to bind; ``0`` picks a free port.
        footer_mode: Footer mode for ``/embed``; defaults to the configured one.
        public_url: Public origin override for ``og:url`` and share links.

    Returns:
        A bound ``ThreadingHTTPServer``.
    """
    attrs = {
        "footer_mode": footer_mode or EMBED_FOOTER_MODE,
        "public_url": public_url if public_url is not None else PUBLIC_URL,
    }
    handler = type("ConfiguredEmbedHandler", (EmbedHandler,), attrs)
    return ThreadingHTTPServer((host, port), handler)


def main() -> None:
    """Run the embed HTTP server from CLI arguments."""
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)
    parser = argparse.ArgumentParser(description="Serve Open Graph embed cards")
    parser.add_argument("--host", default=get_default_host())
    parser.add_argument("--port", type=int, default=get_default_port())
    parser.add_argument(
        "--footer-mode",
        choices=FOOTER_MODES,
        default=EMBED_FOOTER_MODE,
        help="How /embed handles the footer (default: %(default)s)",
    )
    args = parser.parse_args()

    server = make_server(args.host, args.port, footer_mode=args.footer_mode)
    logger.info(
        f"Embed server running at http://{args.host}:{server.server_address[1]} "
        f"(footer mode: {args.footer_mode})"
    )
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()


if __name__ == "__main__":
    main()
