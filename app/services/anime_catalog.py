"""High level orchestration behind the HTTP endpoints."""

from __future__ import annotations

import logging

from ..config import Settings
from ..errors import EmptyResultError, FallbackUnavailableError
from ..models import Record
from ..sources import (
    COMPREHENSIVE_PLAN,
    MEGA_PLAN,
    RECENTLY_UPDATED_PLAN,
    SERIES_PLAN,
    SourcePlan,
)
from .aggregator import AggregationResult, Aggregator
from .fallback import FallbackStore, write_snapshot
from .packager import to_json, to_zip

logger = logging.getLogger(__name__)


class AnimeCatalogService:
    """Run source plans and shape their output for the downstream client."""

    def __init__(
        self,
        settings: Settings,
        aggregator: Aggregator,
        fallback: FallbackStore,
    ):
        self._settings = settings
        self._aggregator = aggregator
        self._fallback = fallback

    async def _run(
        self, plan: SourcePlan, *, require_records: bool = False
    ) -> AggregationResult:
        logger.info("Starting %s scrape of %s", plan.key, self._settings.source_origin)
        return await self._aggregator.run(
            plan.urls(self._settings.source_origin),
            plan.profile,
            timeout=plan.timeout,
            delay=plan.delay,
            require_records=require_records,
        )

    async def series_archive(self) -> bytes:
        """Return the recently updated listing as a ZIP, falling back when empty."""

        records: list[Record] = []
        live_error: Exception | None = None
        try:
            result = await self._run(SERIES_PLAN, require_records=True)
            records = result.records
        except EmptyResultError as exc:
            logger.warning("Live series scrape failed: %s", exc)
            live_error = exc
        except Exception as exc:  # any live failure is answered with the snapshot
            logger.exception("Live series scrape raised unexpectedly")
            live_error = exc

        if not records:
            try:
                records = self._fallback.load()
            except FallbackUnavailableError as exc:
                message = str(live_error) if live_error is not None else str(exc)
                raise EmptyResultError(message=message) from exc
            logger.info("Using fallback data")

        archive = to_zip(to_json(records), SERIES_PLAN.archive_entry)
        logger.info("Serving series archive with %s anime", len(records))
        return archive

    async def recently_updated(self) -> list[Record]:
        """Return the recently updated listing; failures propagate."""

        result = await self._run(RECENTLY_UPDATED_PLAN, require_records=True)
        return result.records

    async def comprehensive(self) -> AggregationResult:
        """Scrape the comprehensive page set and save it as a snapshot."""

        result = await self._run(COMPREHENSIVE_PLAN)
        self._save_snapshot(COMPREHENSIVE_PLAN, to_json(result.records))
        return result

    async def mega_archive(self) -> tuple[bytes, AggregationResult]:
        """Scrape the mega page set, save a snapshot and return it zipped."""

        result = await self._run(MEGA_PLAN)
        payload = to_json(result.records)
        self._save_snapshot(MEGA_PLAN, payload)
        return to_zip(payload, MEGA_PLAN.archive_entry), result

    def fallback_json(self) -> str:
        """Return the baseline snapshot exactly as stored."""

        return self._fallback.read_text()

    def _save_snapshot(self, plan: SourcePlan, payload: bytes) -> None:
        if not plan.snapshot_filename:
            return
        write_snapshot(self._settings.snapshot_path(plan.snapshot_filename), payload)
