from __future__ import annotations

import argparse

import requests

from .embed.config import get_default_port


def check(url: str, timeout: float = 5.0) -> bool:
    """Return True when the health endpoint answers ``{"ok": true}``."""
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except (requests.RequestException, ValueError):
        return False
    return isinstance(payload, dict) and payload.get("ok") is True


def main() -> None:
    parser = argparse.ArgumentParser(description="Probe a running embed server")
    parser.add_argument(
        "--url",
        default=f"http://127.0.0.1:{get_default_port()}/api/health",
    )
    parser.add_argument("--timeout", type=float, default=5.0)
    args = parser.parse_args()

    if not check(args.url, timeout=args.timeout):
        raise SystemExit(f"Health check failed: {args.url}")
    print("OK")


if __name__ == "__main__":
    main()
