"""Tagged success/failure variant returned by non-raising search calls."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator


class SearchErrorPayload(BaseModel):
    error_code: str = Field(..., description="Stable identifier for the failure")
    message: str = Field(..., description="Short diagnostic hint")


class SearchOutcome(BaseModel):
    service: str
    status: Literal["SUCCESS", "TRANSPORT_FAILURE", "DECODE_FAILURE", "ENCODE_FAILURE"] = Field(
        ...,
        description="SUCCESS carries the canonical JSON payload, every other status carries an error",
    )
    payload: str | None = Field(
        default=None,
        description="Re-encoded JSON returned when status is SUCCESS",
    )
    error: SearchErrorPayload | None = Field(
        default=None,
        description="Structured error information returned when status is not SUCCESS",
    )

    @model_validator(mode="after")
    def _validate_payload_error(self) -> "SearchOutcome":
        if self.payload is not None and self.error is not None:
            raise ValueError("payload and error cannot be used at the same time")
        if self.payload is None and self.error is None:
            raise ValueError("either payload or error must be provided")
        if (self.status == "SUCCESS") != (self.payload is not None):
            raise ValueError("payload is only allowed for SUCCESS outcomes")
        return self

    @property
    def ok(self) -> bool:
        return self.status == "SUCCESS"


__all__ = ["SearchErrorPayload", "SearchOutcome"]
