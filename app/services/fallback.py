"""Access to the static fallback snapshot and archival snapshot files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..errors import FallbackUnavailableError
from ..models import RECORD_LIST, Record

logger = logging.getLogger(__name__)


class FallbackStore:
    """Read-only view of the last-known-good record snapshot."""

    def __init__(self, path: Path | str):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read_text(self) -> str:
        """Return the snapshot file contents verbatim."""

        try:
            return self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FallbackUnavailableError(self._path, exc) from exc

    def load(self) -> list[Record]:
        """Parse the snapshot into records."""

        raw = self.read_text()
        try:
            payload = json.loads(raw)
            records = RECORD_LIST.validate_python(payload)
        except (json.JSONDecodeError, ValidationError) as exc:
            raise FallbackUnavailableError(self._path, exc) from exc
        logger.info("Loaded %s fallback anime from %s", len(records), self._path)
        return records


def write_snapshot(path: Path | str, payload: bytes) -> Path:
    """Persist an archival snapshot. The fallback file is never a target."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(payload)
    logger.info("Saved snapshot to %s (%s bytes)", target, len(payload))
    return target
