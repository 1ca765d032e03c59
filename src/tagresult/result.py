"""Tagged success/error records.

A ``Result`` is either a ``Success`` carrying ``data`` or a ``Failure``
carrying an exception and a caller-chosen ``tag``. The ``status`` field is the
only discriminant; branch on it (or pattern-match) before reading payloads::

    match load_user(42):
        case Success(data=user):
            render(user)
        case Failure(tag="NOT_FOUND"):
            render_404()
        case Failure(error=exc, tag=tag):
            log.warning("load_user failed [%s]: %s", tag, exc)
"""

from __future__ import annotations

import dataclasses
import typing

__all__ = [
    "Failure",
    "Result",
    "Success",
    "error",
    "is_failure",
    "is_success",
    "ok",
]


@dataclasses.dataclass(frozen=True, slots=True)
class Success[TSuccess]:
    """A successful result."""

    status: typing.Literal["success"] = dataclasses.field(
        default="success", init=False
    )
    data: TSuccess | None = None


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[TError: Exception, TTag: str]:
    """A failed result: the error plus the tag classifying it."""

    status: typing.Literal["error"] = dataclasses.field(default="error", init=False)
    error: TError
    tag: TTag


type Result[TSuccess, TError: Exception, TTag: str] = (
    Success[TSuccess] | Failure[TError, TTag]
)

type _AnyResult = Success[typing.Any] | Failure[typing.Any, typing.Any]


def ok[D](data: D | None = None) -> Success[D]:
    """Build a success record. ``ok()`` carries no data."""
    return Success(data)


def error[E: Exception, T: str](exc: E, tag: T) -> Failure[E, T]:
    """Build an error record; ``exc`` is stored as-is (same identity)."""
    return Failure(exc, tag)


def is_success(result: _AnyResult) -> typing.TypeGuard[Success[typing.Any]]:
    return result.status == "success"


def is_failure(
    result: _AnyResult,
) -> typing.TypeGuard[Failure[typing.Any, typing.Any]]:
    return result.status == "error"
