"""Anime catalog bridge: scrape listing pages and republish them as JSON."""

from __future__ import annotations

__version__ = "1.0.0"
