"""Pydantic models describing catalog payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Record(BaseModel):
    """A single catalog entry in the shape the downstream client expects.

    Field order is significant: it is the serialization order of the JSON
    payloads and snapshot files.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    url: str = Field(min_length=1)
    title_with_year: str = Field(min_length=1)
    genres: str = "Anime"
    img_url: str = ""
    plot: str = ""


RECORD_LIST = TypeAdapter(list[Record])


SAMPLE_RECORDS: tuple[Record, ...] = (
    Record(
        url="https://9animetv.to/watch/one-piece-100",
        title_with_year="One Piece",
        genres="Action, Adventure, Comedy",
        img_url="https://cdn.noitatnemucod.net/thumbnail/300x400/100/bcd84731a3eda4f4a306250769675065.jpg",
        plot="Watch One Piece online for free on 9anime",
    ),
    Record(
        url="https://9animetv.to/watch/naruto-shippuden-355",
        title_with_year="Naruto: Shippuden",
        genres="Action, Martial Arts, Ninja",
        img_url="https://cdn.noitatnemucod.net/thumbnail/300x400/100/9cbcf87f54194742e7686119089478f8.jpg",
        plot="Watch Naruto: Shippuden online for free on 9anime",
    ),
)
