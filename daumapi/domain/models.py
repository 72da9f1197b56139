"""Pydantic response shapes for each search service."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    model_validator,
)


class Service(str, Enum):
    WEB = "web"
    VCLIP = "vclip"
    IMAGE = "image"
    BLOG = "blog"
    TIP = "tip"
    BOOK = "book"
    CAFE = "cafe"

    def __str__(self) -> str:
        return self.value


class _Shape(BaseModel):
    # Provider-owned schema: missing, null and unknown keys are tolerated,
    # present scalars must already have the declared JSON type.
    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Meta(_Shape):
    total_count: StrictInt = 0
    pageable_count: StrictInt = 0
    is_end: StrictBool = False


class WebDocument(_Shape):
    title: StrictStr = ""
    contents: StrictStr = ""
    url: StrictStr = ""
    datetime: StrictStr = ""


class VclipDocument(_Shape):
    title: StrictStr = ""
    url: StrictStr = ""
    datetime: StrictStr = ""
    play_time: StrictInt = 0
    thumbnail: StrictStr = ""
    author: StrictStr = ""


class ImageDocument(_Shape):
    collection: StrictStr = ""
    thumbnail_url: StrictStr = ""
    image_url: StrictStr = ""
    width: StrictInt = 0
    height: StrictInt = 0
    display_sitename: StrictStr = ""
    doc_url: StrictStr = ""
    datetime: StrictStr = ""


class BlogDocument(_Shape):
    title: StrictStr = ""
    contents: StrictStr = ""
    url: StrictStr = ""
    blogname: StrictStr = ""
    thumbnail: StrictStr = ""
    datetime: StrictStr = ""


class TipDocument(_Shape):
    title: StrictStr = ""
    contents: StrictStr = ""
    url: StrictStr = ""
    q_url: StrictStr = ""
    a_url: StrictStr = ""
    thumbnails: list[StrictStr] = Field(default_factory=list)
    type: StrictStr = ""
    datetime: StrictStr = ""


class BookDocument(_Shape):
    title: StrictStr = ""
    contents: StrictStr = ""
    url: StrictStr = ""
    isbn: StrictStr = ""
    datetime: StrictStr = ""
    authors: list[StrictStr] = Field(default_factory=list)
    publisher: StrictStr = ""
    translators: list[StrictStr] = Field(default_factory=list)
    price: StrictInt = 0
    sale_price: StrictInt = 0
    thumbnail: StrictStr = ""
    status: StrictStr = ""


class CafeDocument(_Shape):
    title: StrictStr = ""
    contents: StrictStr = ""
    url: StrictStr = ""
    cafename: StrictStr = ""
    thumbnail: StrictStr = ""
    datetime: StrictStr = ""


class WebResponse(_Shape):
    meta: Meta = Field(default_factory=Meta)
    documents: list[WebDocument] = Field(default_factory=list)


class VclipResponse(_Shape):
    meta: Meta = Field(default_factory=Meta)
    documents: list[VclipDocument] = Field(default_factory=list)


class ImageResponse(_Shape):
    meta: Meta = Field(default_factory=Meta)
    documents: list[ImageDocument] = Field(default_factory=list)


class BlogResponse(_Shape):
    meta: Meta = Field(default_factory=Meta)
    documents: list[BlogDocument] = Field(default_factory=list)


class TipResponse(_Shape):
    meta: Meta = Field(default_factory=Meta)
    documents: list[TipDocument] = Field(default_factory=list)


class BookResponse(_Shape):
    meta: Meta = Field(default_factory=Meta)
    documents: list[BookDocument] = Field(default_factory=list)


class CafeResponse(_Shape):
    meta: Meta = Field(default_factory=Meta)
    documents: list[CafeDocument] = Field(default_factory=list)


SearchResponse = (
    WebResponse
    | VclipResponse
    | ImageResponse
    | BlogResponse
    | TipResponse
    | BookResponse
    | CafeResponse
)

RESPONSE_MODELS: dict[Service, type[_Shape]] = {
    Service.WEB: WebResponse,
    Service.VCLIP: VclipResponse,
    Service.IMAGE: ImageResponse,
    Service.BLOG: BlogResponse,
    Service.TIP: TipResponse,
    Service.BOOK: BookResponse,
    Service.CAFE: CafeResponse,
}


__all__ = [
    "Service",
    "Meta",
    "WebDocument",
    "VclipDocument",
    "ImageDocument",
    "BlogDocument",
    "TipDocument",
    "BookDocument",
    "CafeDocument",
    "WebResponse",
    "VclipResponse",
    "ImageResponse",
    "BlogResponse",
    "TipResponse",
    "BookResponse",
    "CafeResponse",
    "SearchResponse",
    "RESPONSE_MODELS",
]
