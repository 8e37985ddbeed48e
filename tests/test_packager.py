from __future__ import annotations

import io
import json
import zipfile

from app.models import SAMPLE_RECORDS, Record
from app.services.packager import from_zip, to_json, to_zip


def test_to_json_is_pretty_printed_in_field_order():
    payload = to_json(SAMPLE_RECORDS[:1])
    text = payload.decode("utf-8")

    assert text.startswith("[\n  {\n    \"url\"")
    assert list(json.loads(text)[0]) == [
        "url",
        "title_with_year",
        "genres",
        "img_url",
        "plot",
    ]


def test_to_json_keeps_non_ascii_titles():
    record = Record(url="https://9animetv.to/watch/x", title_with_year="Shingeki no Kyojin 進撃の巨人")

    assert "進撃の巨人".encode("utf-8") in to_json([record])


def test_zip_round_trip_preserves_records():
    records = list(SAMPLE_RECORDS)

    archive = to_zip(to_json(records))

    assert from_zip(archive) == records


def test_zip_has_single_deflated_entry_with_fixed_name():
    archive = to_zip(b"[]", "series.json")

    with zipfile.ZipFile(io.BytesIO(archive)) as bundle:
        infos = bundle.infolist()

    assert [info.filename for info in infos] == ["series.json"]
    assert infos[0].compress_type == zipfile.ZIP_DEFLATED


def test_empty_collection_serializes_to_empty_array():
    assert json.loads(to_json([])) == []
