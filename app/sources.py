"""Fixed source page lists scraped by each endpoint."""

from __future__ import annotations

from dataclasses import dataclass

from .profiles import (
    DETAIL_PROFILE,
    GRID_EPISODES_PROFILE,
    GRID_PROFILE,
    ExtractionProfile,
)
from .utils import join_source_url


@dataclass(frozen=True)
class SourcePlan:
    """An ordered set of listing pages read with a single profile."""

    key: str
    paths: tuple[str, ...]
    profile: ExtractionProfile
    timeout: float
    delay: float = 1.0
    snapshot_filename: str | None = None
    download_filename: str | None = None
    archive_entry: str = "series.json"

    def urls(self, origin: str) -> list[str]:
        return [join_source_url(origin, path) for path in self.paths]


def _paged(path: str, pages: int) -> tuple[str, ...]:
    return (path,) + tuple(f"{path}?page={page}" for page in range(2, pages + 1))


SERIES_PLAN = SourcePlan(
    key="series",
    paths=("/recently-updated",),
    profile=GRID_PROFILE,
    timeout=15.0,
    download_filename="series.zip",
)

RECENTLY_UPDATED_PLAN = SourcePlan(
    key="recently-updated",
    paths=("/recently-updated",),
    profile=DETAIL_PROFILE,
    timeout=10.0,
)

COMPREHENSIVE_PLAN = SourcePlan(
    key="comprehensive",
    paths=(
        *_paged("/recently-updated", 5),
        *_paged("/popular", 3),
        *_paged("/trending", 2),
        *_paged("/latest", 2),
    ),
    profile=GRID_PROFILE,
    timeout=15.0,
    delay=1.0,
    snapshot_filename="comprehensive_anime.json",
)

MEGA_PLAN = SourcePlan(
    key="mega",
    paths=(
        *_paged("/recently-updated", 6),
        *_paged("/popular", 4),
        *_paged("/trending", 3),
        *_paged("/latest", 3),
        *_paged("/genre/action", 2),
        "/genre/adventure",
        "/genre/comedy",
        "/genre/drama",
        "/genre/fantasy",
        "/genre/romance",
        "/genre/supernatural",
    ),
    profile=GRID_EPISODES_PROFILE,
    timeout=20.0,
    delay=1.5,
    snapshot_filename="mega_anime_collection.json",
    download_filename="mega_anime_collection.zip",
)
