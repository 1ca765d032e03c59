"""JSON-friendly payloads for results crossing a process boundary.

Wire shape::

    {"status": "success", "data": ...}
    {"status": "error", "tag": "NOT_FOUND",
     "error": {"type": "PublicError", "message": "User not found"}}

Only the error's type name and message are sent. The cause chain stays in
the process that produced it; decoded errors come back as ``PublicError``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from tagresult.errors import PublicError
from tagresult.result import Failure, Success, error, ok

__all__ = ["ErrorInfo", "ErrorPayload", "SuccessPayload", "from_payload", "to_payload"]


class SuccessPayload(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    status: Literal["success"] = "success"
    data: Any = None


class ErrorInfo(BaseModel):
    """Displayable part of an error."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str = Field(..., min_length=1, description="Exception class name")
    message: str = Field(..., description="Externally safe message")


class ErrorPayload(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    status: Literal["error"] = "error"
    error: ErrorInfo
    # ``error()`` does not validate tags, so neither does the wire format.
    tag: str


ResultPayload = Annotated[
    SuccessPayload | ErrorPayload, Field(discriminator="status")
]

_adapter: TypeAdapter[SuccessPayload | ErrorPayload] = TypeAdapter(ResultPayload)


def to_payload(result: Success[Any] | Failure[Any, Any]) -> dict[str, Any]:
    """Encode a result as a JSON-ready dict.

    ``data`` goes through pydantic's JSON mode: types with a JSON form are
    converted (``date`` becomes an ISO string, ``set`` a list) and decode back
    as that form, not the original type. A ``PublicError`` is written under its
    ``type_name`` so decoded errors re-encode unchanged.

    Raises:
        pydantic_core.PydanticSerializationError: ``data`` has no JSON form.
        TypeError: ``result`` is not a ``Success`` or ``Failure``.
    """
    match result:
        case Success(data=data):
            payload: SuccessPayload | ErrorPayload = SuccessPayload(data=data)
        case Failure(error=exc, tag=tag):
            payload = ErrorPayload(
                error=ErrorInfo(type=_type_name(exc), message=str(exc)),
                tag=tag,
            )
        case _:
            raise TypeError(f"Not a result: {result!r}")
    return payload.model_dump(mode="json")


def from_payload(payload: Mapping[str, Any]) -> Success[Any] | Failure[PublicError, str]:
    """Decode a payload produced by ``to_payload``.

    Errors come back as ``PublicError`` carrying the encoded type name on
    ``type_name``.

    Raises:
        pydantic.ValidationError: ``payload`` is not a valid result shape.
    """
    parsed = _adapter.validate_python(payload)
    if isinstance(parsed, SuccessPayload):
        return ok(parsed.data)
    exc = PublicError(parsed.error.message, type_name=parsed.error.type)
    return error(exc, parsed.tag)


def _type_name(exc: Exception) -> str:
    if isinstance(exc, PublicError):
        return exc.type_name
    return type(exc).__name__
