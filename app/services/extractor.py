"""Turn listing markup into catalog records using an extraction profile."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Iterable

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from ..errors import ExtractError
from ..models import Record
from ..profiles import ExtractionProfile
from ..utils import absolute_url, collapse_whitespace

logger = logging.getLogger(__name__)

Resolver = Callable[[Tag], str]


def _title_attribute(link: Tag) -> str:
    return (link.get("title") or "").strip()


def _link_text(link: Tag) -> str:
    return link.get_text().strip()


TITLE_RESOLVERS: tuple[Resolver, ...] = (_title_attribute, _link_text)


def first_resolved(resolvers: Iterable[Resolver], element: Tag) -> str:
    """Return the first non-empty value produced by ``resolvers``."""

    for resolver in resolvers:
        value = resolver(element)
        if value:
            return value
    return ""


def attribute_resolvers(attributes: Iterable[str]) -> tuple[Resolver, ...]:
    """Build resolvers that read each attribute in order."""

    def reader(name: str) -> Resolver:
        def resolve(element: Tag) -> str:
            value = element.get(name)
            if isinstance(value, list):
                value = " ".join(value)
            return (value or "").strip()

        return resolve

    return tuple(reader(name) for name in attributes)


class ItemExtractor:
    """Locate repeated item blocks and map them to :class:`Record` objects."""

    def __init__(self, origin: str, *, today: Callable[[], date] = date.today):
        self._origin = origin
        self._today = today

    def extract(self, markup: str, profile: ExtractionProfile) -> list[Record]:
        """Return records in document order.

        A page whose layout no longer matches the profile yields an empty list.
        Duplicates are left in place for the caller to resolve.
        """

        soup = BeautifulSoup(markup, "html.parser")
        try:
            items = soup.select(profile.item_selector)
        except SelectorSyntaxError as exc:
            raise ExtractError(profile.key, exc) from exc

        if not items:
            logger.info("No %s items matched %r", profile.key, profile.item_selector)
            return []

        # The source pages carry no release year; the display year is the
        # current one, which downstream clients have come to expect.
        year = self._today().year
        image_resolvers = attribute_resolvers(profile.image_attributes)

        records: list[Record] = []
        for item in items:
            try:
                record = self._extract_item(item, profile, image_resolvers, year)
            except SelectorSyntaxError as exc:
                raise ExtractError(profile.key, exc) from exc
            if record is not None:
                records.append(record)
        return records

    def _extract_item(
        self,
        item: Tag,
        profile: ExtractionProfile,
        image_resolvers: tuple[Resolver, ...],
        year: int,
    ) -> Record | None:
        link = item.select_one(profile.link_selector)
        if link is None:
            return None

        title = first_resolved(TITLE_RESOLVERS, link)
        url = absolute_url(self._origin, link.get("href"))
        if not title or not url:
            return None

        img_url = ""
        image = self._image_scope(item, profile).select_one(profile.image_selector)
        if image is not None:
            img_url = first_resolved(image_resolvers, image)

        episode_info = ""
        if profile.episode_selector:
            episode_info = " ".join(
                text
                for text in (
                    collapse_whitespace(node.get_text())
                    for node in item.select(profile.episode_selector)
                )
                if text
            )

        return Record(
            url=url,
            title_with_year=profile.render_title(title, year),
            genres=profile.genres,
            img_url=img_url,
            plot=profile.render_plot(title, episode_info),
        )

    @staticmethod
    def _image_scope(item: Tag, profile: ExtractionProfile) -> Tag:
        if profile.image_scope == "parent" and isinstance(item.parent, Tag):
            return item.parent
        return item
