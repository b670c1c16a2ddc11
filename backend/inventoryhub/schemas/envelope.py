"""Uniform response envelope returned by every product operation.

The envelope is a tagged union of ``SuccessResponse[T]`` and
``FailureResponse``; both serialize to the same flat JSON object:

    {"success", "statusCode", "message", "data", "errors", "timestamp"}
"""

from datetime import datetime, timezone
from typing import Any, Generic, Literal, TypeVar, Union

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")

DEFAULT_SUCCESS_MESSAGE = "Request completed successfully"

# Client-side transport failures never reached a server, so they carry no HTTP status
TRANSPORT_FAILURE_STATUS = 0


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class _EnvelopeBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status_code: int
    message: str
    timestamp: datetime = Field(default_factory=_utcnow)


class SuccessResponse(_EnvelopeBase, Generic[T]):
    success: Literal[True] = True
    data: T
    errors: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("status_code")
    @classmethod
    def check_status(cls, value: int) -> int:
        if not 200 <= value < 300:
            raise ValueError(f"success envelopes need a 2xx status, got {value}")
        return value

    @field_validator("errors")
    @classmethod
    def check_errors(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        if value:
            raise ValueError("success envelopes carry no field errors")
        return value


class FailureResponse(_EnvelopeBase):
    success: Literal[False] = False
    data: None = None
    errors: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("status_code")
    @classmethod
    def check_status(cls, value: int) -> int:
        if value != TRANSPORT_FAILURE_STATUS and not 400 <= value < 600:
            raise ValueError(f"failure envelopes need a 4xx/5xx status, got {value}")
        return value


ApiResponse = Union[SuccessResponse[T], FailureResponse]


def success(data: Any, message: str = DEFAULT_SUCCESS_MESSAGE, status_code: int = 200) -> SuccessResponse:
    return SuccessResponse(data=data, message=message, status_code=status_code)


def failure(
    message: str,
    status_code: int = 400,
    errors: dict[str, list[str]] | None = None,
) -> FailureResponse:
    return FailureResponse(message=message, status_code=status_code, errors=errors or {})


def to_response(envelope: SuccessResponse | FailureResponse, headers: dict[str, str] | None = None) -> JSONResponse:
    """Render an envelope with its own status code as the HTTP status."""
    return JSONResponse(
        status_code=envelope.status_code,
        content=envelope.model_dump(mode="json", by_alias=True),
        headers=headers,
    )
