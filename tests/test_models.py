import pytest
from pydantic import ValidationError

from app.models import RECORD_LIST, SAMPLE_RECORDS, Record


def test_record_serializes_fields_in_catalog_order():
    record = Record(url="https://9animetv.to/watch/x-1", title_with_year="X")

    assert list(record.model_dump()) == [
        "url",
        "title_with_year",
        "genres",
        "img_url",
        "plot",
    ]
    assert record.genres == "Anime"
    assert record.img_url == ""


def test_record_strips_and_requires_url_and_title():
    record = Record(url="  https://9animetv.to/watch/x-1 ", title_with_year=" X ")
    assert record.url == "https://9animetv.to/watch/x-1"
    assert record.title_with_year == "X"

    with pytest.raises(ValidationError):
        Record(url="   ", title_with_year="X")
    with pytest.raises(ValidationError):
        Record(url="https://9animetv.to/watch/x-1", title_with_year="")


def test_record_list_ignores_unknown_keys():
    records = RECORD_LIST.validate_python(
        [
            {
                "url": "https://9animetv.to/watch/x-1",
                "title_with_year": "X",
                "rating": 9,
            }
        ]
    )
    assert records[0].model_dump()["url"] == "https://9animetv.to/watch/x-1"
    assert "rating" not in records[0].model_dump()


def test_sample_records_are_the_two_static_entries():
    assert [record.title_with_year for record in SAMPLE_RECORDS] == [
        "One Piece",
        "Naruto: Shippuden",
    ]
