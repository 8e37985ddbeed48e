"""Utility helpers for the catalog bridge."""

from __future__ import annotations

import re
from urllib.parse import urljoin


WHITESPACE_RE = re.compile(r"\s+")


def collapse_whitespace(value: str | None) -> str:
    """Trim and collapse internal runs of whitespace to single spaces."""

    if not value:
        return ""
    return WHITESPACE_RE.sub(" ", value).strip()


def absolute_url(origin: str, href: str | None) -> str:
    """Resolve ``href`` against ``origin``; empty or malformed input yields ``""``."""

    cleaned = (href or "").strip()
    if not cleaned:
        return ""
    try:
        return urljoin(f"{origin.rstrip('/')}/", cleaned)
    except ValueError:
        # urljoin rejects malformed hosts such as "http://[broken".
        return ""


def join_source_url(origin: str, path: str) -> str:
    """Append a site-relative source path such as ``/popular?page=2``."""

    return f"{origin.rstrip('/')}/{path.lstrip('/')}"
