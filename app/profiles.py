"""Extraction profiles for the listing layouts served by the source site."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


Layout = Literal["grid", "detail"]
ImageScope = Literal["item", "parent"]
YearPolicy = Literal["current", "none"]


@dataclass(frozen=True)
class ExtractionProfile:
    """Describes how to read catalog entries out of one page layout."""

    key: str
    layout: Layout
    item_selector: str
    link_selector: str
    image_selector: str
    genres: str
    plot_template: str
    image_scope: ImageScope = "item"
    image_attributes: tuple[str, ...] = ("data-src", "src")
    episode_selector: str | None = None
    year_policy: YearPolicy = "current"

    def render_plot(self, title: str, episode_info: str = "") -> str:
        # The episode slot carries its own leading space so it can vanish cleanly.
        slot = f" {episode_info}" if episode_info else ""
        return self.plot_template.format(title=title, episode_info=slot)

    def render_title(self, title: str, year: int) -> str:
        if self.year_policy == "current":
            return f"{title} ({year})"
        return title


GRID_PROFILE = ExtractionProfile(
    key="grid",
    layout="grid",
    item_selector=".flw-item",
    link_selector=".film-name a",
    image_selector=".film-poster img",
    genres="Action, Adventure, Anime",
    plot_template="Watch {title} online for free. Latest episodes available on 9anime.",
)

GRID_EPISODES_PROFILE = ExtractionProfile(
    key="grid-episodes",
    layout="grid",
    item_selector=".flw-item",
    link_selector=".film-name a",
    image_selector=".film-poster img",
    genres="Action, Adventure, Anime",
    plot_template=(
        "Watch {title} online for free.{episode_info} "
        "Latest episodes available on 9anime."
    ),
    episode_selector=".fdi-item",
)

DETAIL_PROFILE = ExtractionProfile(
    key="detail",
    layout="detail",
    item_selector=".film-detail",
    link_selector=".film-name a",
    image_selector=".film-poster-img",
    image_scope="parent",
    genres="Anime",
    plot_template="Watch {title} online for free on 9anime",
    year_policy="none",
)

PROFILES: tuple[ExtractionProfile, ...] = (
    GRID_PROFILE,
    GRID_EPISODES_PROFILE,
    DETAIL_PROFILE,
)


def get_profile(key: str) -> ExtractionProfile:
    """Return the profile registered under ``key``."""

    for profile in PROFILES:
        if profile.key == key:
            return profile
    raise KeyError(f"Unknown extraction profile: {key}")
