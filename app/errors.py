"""Exception types raised by the scraping pipeline."""

from __future__ import annotations

from pathlib import Path


class ScraperError(Exception):
    """Base class for errors surfaced by the catalog bridge."""


class FetchError(ScraperError):
    """A source page could not be retrieved."""

    def __init__(self, url: str, cause: BaseException | str):
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to fetch {url}: {cause}")


class ExtractError(ScraperError):
    """An extraction profile could not be applied to a page."""

    def __init__(self, profile: str, cause: BaseException | str):
        self.profile = profile
        self.cause = cause
        super().__init__(f"Extraction profile {profile!r} failed: {cause}")


class FallbackUnavailableError(ScraperError):
    """The fallback snapshot is missing or unreadable."""

    def __init__(self, path: Path | str, cause: BaseException | str):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Fallback snapshot {self.path} unavailable: {cause}")


class EmptyResultError(ScraperError):
    """A live run produced no records and no fallback applies."""

    def __init__(self, failures: list[str] | None = None, message: str | None = None):
        self.failures = list(failures or [])
        if message is None:
            message = self.failures[-1] if self.failures else "No anime records were found"
        super().__init__(message)
