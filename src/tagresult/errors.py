"""Exception hierarchy for tagresult."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class TagResultError(Exception):
    """Base exception for errors raised by tagresult itself."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class TagRequiredError(TagResultError):
    """An adapter caught an error but was given neither a tag nor a handler.

    This is a usage error: it is raised, never returned as a ``Failure``.
    """

    def __init__(self, *, hint: str | None = None) -> None:
        super().__init__(
            "Tag is required",
            hint=hint
            or "Pass a non-empty tag string or a handler returning a Failure.",
        )


class ThrownValueError(TagResultError):
    """A failure value that was not an exception, coerced into one.

    The message is ``str(value)``; the original object is kept on ``value``.
    """

    def __init__(self, value: object) -> None:
        super().__init__(str(value))
        self.value = value


class PublicError(Exception):
    """Error whose message is safe to show outside the process.

    Internal detail travels on ``__cause__`` so it stays available to logs and
    tracebacks without leaking into the displayed message. Attaching a cause
    suppresses the implicit ``__context__``, as ``raise ... from`` does.

    ``type_name`` names the error on the wire; it defaults to the class name
    and is set from the payload when an error is decoded.

    Example:
        try:
            row = db.fetch(user_id)
        except LookupError as exc:
            return error(PublicError("User not found", cause=exc), "NOT_FOUND")
    """

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        type_name: str | None = None,
    ) -> None:
        super().__init__(message)
        self.type_name = type_name or type(self).__name__
        if cause is not None:
            self.__cause__ = cause

    @property
    def message(self) -> str:
        return str(self)


class NotAwaitableError(TagResultError, TypeError):
    """``try_catch_async`` was given a callable that returned a non-awaitable."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f"Expected an awaitable, got {type(value).__name__}",
            hint="Pass an async function or a callable returning a coroutine or future.",
        )
        self.value = value


def cause_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield *exc* and the chain of errors behind it, innermost last.

    Follows ``__cause__`` always and ``__context__`` only where the context was
    not suppressed (``raise ... from`` or ``PublicError(cause=...)``), matching
    what a traceback would show. Cycles are cut.
    """
    seen: set[int] = set()
    cur: BaseException | None = exc
    while cur is not None and id(cur) not in seen:
        seen.add(id(cur))
        yield cur
        if cur.__cause__ is not None:
            cur = cur.__cause__
        elif not cur.__suppress_context__:
            cur = cur.__context__
        else:
            cur = None
