"""JSON decoding into service shapes and canonical re-encoding."""

from __future__ import annotations

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from daumapi.domain.models import RESPONSE_MODELS, SearchResponse, Service
from daumapi.logging import logger
from daumapi.services.exceptions import DecodeError, EncodeError, UnknownServiceError

ResponseShape = Service | str | type[BaseModel]


def resolve_service(service: Service | str) -> Service:
    if isinstance(service, Service):
        return service
    try:
        return Service(service)
    except ValueError as exc:
        raise UnknownServiceError(f"Unknown search service: {service!r}") from exc


def _resolve_model(shape: ResponseShape) -> type[BaseModel]:
    if isinstance(shape, type) and issubclass(shape, BaseModel):
        return shape
    return RESPONSE_MODELS[resolve_service(shape)]


def decode(shape: ResponseShape, contents: bytes | str) -> SearchResponse:
    """Parse ``contents`` into the model for ``shape``.

    Missing fields fall back to zero values; malformed JSON or values of the
    wrong type raise :class:`DecodeError`.
    """

    model = _resolve_model(shape)
    try:
        return model.model_validate_json(contents)
    except ValidationError as exc:
        logger.warning("decode_failed", model=model.__name__, errors=exc.error_count())
        raise DecodeError(f"Cannot decode {model.__name__}: {exc}") from exc


def encode(value: BaseModel) -> bytes:
    try:
        return value.model_dump_json().encode("utf-8")
    except (PydanticSerializationError, AttributeError, TypeError) as exc:
        logger.warning("encode_failed", value_type=type(value).__name__)
        raise EncodeError(f"Cannot encode {type(value).__name__}: {exc}") from exc


__all__ = ["ResponseShape", "decode", "encode", "resolve_service"]
