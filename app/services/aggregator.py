"""Sequential multi-page scraping with cross-page deduplication."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Sequence

from ..errors import EmptyResultError, ExtractError, FetchError
from ..models import Record
from ..profiles import ExtractionProfile
from .extractor import ItemExtractor
from .fetcher import PageFetcher

logger = logging.getLogger(__name__)

Sleeper = Callable[[float], Awaitable[None]]


@dataclass(slots=True)
class SourceOutcome:
    """What happened to one source URL during a run."""

    url: str
    extracted: int = 0
    added: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class AggregationResult:
    """Deduplicated records plus the per-source log of a run."""

    records: list[Record] = field(default_factory=list)
    sources: list[SourceOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.records)

    @property
    def failures(self) -> int:
        return sum(1 for outcome in self.sources if not outcome.ok)

    def failure_messages(self) -> list[str]:
        return [outcome.error for outcome in self.sources if outcome.error]


class Aggregator:
    """Drive source URLs through the fetcher and extractor one at a time."""

    def __init__(
        self,
        fetcher: PageFetcher,
        extractor: ItemExtractor,
        *,
        sleep: Sleeper = asyncio.sleep,
    ):
        self._fetcher = fetcher
        self._extractor = extractor
        self._sleep = sleep

    async def run(
        self,
        urls: Sequence[str],
        profile: ExtractionProfile,
        *,
        timeout: float,
        delay: float,
        require_records: bool = False,
    ) -> AggregationResult:
        """Scrape ``urls`` in order and merge the records they yield.

        A failing URL is logged and skipped. The first occurrence of each
        record URL wins. ``delay`` seconds elapse between consecutive URLs.
        With ``require_records`` the run raises :class:`EmptyResultError` when
        every source failed.
        """

        result = AggregationResult()
        seen: set[str] = set()

        for index, url in enumerate(urls):
            outcome = SourceOutcome(url=url)
            result.sources.append(outcome)
            logger.info("Scraping %s", url)
            try:
                markup = await self._fetcher.fetch(url, timeout=timeout)
                records = self._extractor.extract(markup, profile)
            except (FetchError, ExtractError) as exc:
                logger.warning("Skipping %s: %s", url, exc)
                outcome.error = str(exc)
            else:
                outcome.extracted = len(records)
                for record in records:
                    if record.url in seen:
                        continue
                    seen.add(record.url)
                    result.records.append(record)
                    outcome.added += 1
                logger.info(
                    "Found %s anime on %s. Total: %s",
                    outcome.added,
                    url,
                    result.total,
                )

            if index < len(urls) - 1:
                await self._sleep(delay)

        logger.info(
            "Scrape of %s source(s) completed with %s anime and %s failure(s)",
            len(result.sources),
            result.total,
            result.failures,
        )

        if require_records and result.sources and result.failures == len(result.sources):
            raise EmptyResultError(result.failure_messages())
        return result
