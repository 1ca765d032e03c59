"""What an adapter does with a caught exception.

An ``ErrorPolicy`` is either a ``Tag`` (wrap the error under that tag) or a
``Handler`` (hand the error to a callable that builds the ``Failure``). Bare
strings and bare callables are accepted wherever a policy is and are
normalized by ``as_policy``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging
from typing import Any

from tagresult.errors import TagRequiredError, ThrownValueError
from tagresult.result import Failure, error

__all__ = [
    "ErrorHandler",
    "ErrorPolicy",
    "Handler",
    "PolicyLike",
    "Tag",
    "apply_policy",
    "as_policy",
    "normalize_error",
]

log = logging.getLogger(__name__)

type ErrorHandler = Callable[[Exception], Failure[Any, Any]]


@dataclass(frozen=True, slots=True)
class Tag:
    """Wrap caught errors under ``name``."""

    name: str


@dataclass(frozen=True, slots=True)
class Handler:
    """Delegate caught errors to ``fn``; its ``Failure`` is returned unchanged."""

    fn: ErrorHandler


type ErrorPolicy = Tag | Handler
type PolicyLike = ErrorPolicy | str | ErrorHandler


def as_policy(value: PolicyLike | None) -> ErrorPolicy:
    """Normalize a tag string, handler callable, or policy into an ``ErrorPolicy``.

    Raises:
        TagRequiredError: ``value`` is missing or an empty tag.
    """
    match value:
        case Tag(name=name) if name:
            return value
        case Handler():
            return value
        case str() if value:
            return Tag(value)
        case None | "" | Tag():
            pass
        case _ if callable(value):
            return Handler(value)
    raise TagRequiredError


def normalize_error(caught: object) -> Exception:
    """Return ``caught`` if it is already an exception, else wrap it.

    Exceptions pass through untouched (identity, message and cause chain
    preserved). Anything else becomes a ``ThrownValueError`` whose message is
    ``str(caught)``.
    """
    if isinstance(caught, Exception):
        return caught
    log.debug("Coercing non-exception failure value of type %s", type(caught).__name__)
    return ThrownValueError(caught)


def apply_policy(policy: PolicyLike | None, caught: Exception) -> Failure[Any, Any]:
    """Turn an exception caught by an adapter into a ``Failure``."""
    try:
        resolved = as_policy(policy)
    except TagRequiredError as exc:
        log.debug("No tag or handler for caught %s", type(caught).__name__)
        raise exc from caught

    match resolved:
        case Handler(fn=fn):
            return fn(caught)
        case Tag(name=name):
            return error(normalize_error(caught), name)
