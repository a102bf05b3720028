"""
Request header helpers.
"""

import base64
from typing import Mapping

import httpx


def basic_auth_header(user: str, password: str) -> dict[str, str]:
    """Return a header map carrying HTTP Basic credentials."""
    token = base64.b64encode(f"{user}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


def bearer_auth_header(token: str) -> dict[str, str]:
    """Return a header map carrying a bearer token."""
    return {"Authorization": f"Bearer {token}"}


def merge_headers(*sources: Mapping[str, str] | None) -> httpx.Headers:
    """Merge header maps left to right; later maps win on a name collision.

    Header names compare case-insensitively.
    """
    merged = httpx.Headers()
    for source in sources:
        if not source:
            continue
        for name, value in source.items():
            merged[name] = str(value)
    return merged


def parse_headers(header_strings: list[str]) -> dict[str, str]:
    """Parse header strings in 'Name: Value' format."""
    headers = {}
    for h in header_strings:
        if ":" in h:
            name, value = h.split(":", 1)
            headers[name.strip()] = value.strip()
    return headers
