"""JSON and ZIP serialization of record collections."""

from __future__ import annotations

import io
import json
import zipfile
from typing import Iterable

from ..models import RECORD_LIST, Record

DEFAULT_ENTRY_NAME = "series.json"


def to_json(records: Iterable[Record]) -> bytes:
    """Serialize records as a pretty-printed JSON array."""

    payload = [record.model_dump() for record in records]
    return json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")


def to_zip(payload: bytes, entry_name: str = DEFAULT_ENTRY_NAME) -> bytes:
    """Wrap ``payload`` in a single-entry, maximally compressed archive."""

    buffer = io.BytesIO()
    with zipfile.ZipFile(
        buffer, mode="w", compression=zipfile.ZIP_DEFLATED, compresslevel=9
    ) as archive:
        archive.writestr(entry_name, payload)
    return buffer.getvalue()


def from_zip(archive: bytes, entry_name: str = DEFAULT_ENTRY_NAME) -> list[Record]:
    """Read records back out of an archive produced by :func:`to_zip`."""

    with zipfile.ZipFile(io.BytesIO(archive)) as bundle:
        payload = bundle.read(entry_name)
    return RECORD_LIST.validate_json(payload)
