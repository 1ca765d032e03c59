"""Exception-to-Result adapters.

``try_catch`` and ``try_catch_async`` run a zero-argument computation and
return a ``Result`` instead of letting an ``Exception`` escape:

- normal return ``v`` becomes ``ok(v)``;
- a raised exception goes through the error policy: a tag wraps it with
  ``error(exc, tag)``, a handler's ``Failure`` is returned as-is.

Only ``Exception`` is caught. Cancellation, ``KeyboardInterrupt`` and other
``BaseException`` signals propagate, and nothing is logged or retried.
"""

from __future__ import annotations

import functools
import inspect
from typing import TYPE_CHECKING, Any, Protocol, cast, overload

from tagresult.errors import NotAwaitableError
from tagresult.policy import apply_policy
from tagresult.result import Failure, Success, ok

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Coroutine

    from tagresult.policy import PolicyLike

__all__ = ["catching", "try_catch", "try_catch_async"]


def try_catch[R](
    fn: Callable[[], R], tag_or_handler: PolicyLike
) -> Success[R] | Failure[Any, Any]:
    """Run ``fn`` and capture its outcome as a ``Result``.

    Args:
        fn: Zero-argument computation to run.
        tag_or_handler: A tag string (or ``Tag``) to wrap caught errors with, or
            a handler (or ``Handler``) that builds the ``Failure`` itself.

    Returns:
        ``ok(fn())``, or the ``Failure`` produced by the error policy.

    Raises:
        TagRequiredError: ``fn`` raised and no usable tag or handler was given.

    Example:
        result = try_catch(lambda: json.loads(raw), "PARSE_ERROR")
    """
    try:
        return ok(fn())
    except Exception as exc:
        return apply_policy(tag_or_handler, exc)


async def try_catch_async[R](
    fn: Callable[[], Awaitable[R]], tag_or_handler: PolicyLike
) -> Success[R] | Failure[Any, Any]:
    """Await ``fn()`` once and capture its outcome as a ``Result``.

    Same contract as ``try_catch``. No timeout is applied: if the awaitable
    never settles, neither does this coroutine.

    Raises:
        NotAwaitableError: ``fn()`` returned something that cannot be awaited.
        TagRequiredError: ``fn`` failed and no usable tag or handler was given.

    Example:
        result = await try_catch_async(lambda: client.get(url), "FETCH_ERROR")
    """
    try:
        awaitable = fn()
    except Exception as exc:
        return apply_policy(tag_or_handler, exc)

    if not inspect.isawaitable(awaitable):
        raise NotAwaitableError(awaitable)

    try:
        return ok(await awaitable)
    except Exception as exc:
        return apply_policy(tag_or_handler, exc)


class _Catcher(Protocol):
    @overload
    def __call__[**P, R](
        self, func: Callable[P, Coroutine[Any, Any, R]], /
    ) -> Callable[P, Coroutine[Any, Any, Success[R] | Failure[Any, Any]]]: ...

    @overload
    def __call__[**P, R](
        self, func: Callable[P, R], /
    ) -> Callable[P, Success[R] | Failure[Any, Any]]: ...


def catching(tag_or_handler: PolicyLike) -> _Catcher:
    """Decorate a function so each call returns a ``Result``.

    Works for plain functions and ``async def`` functions alike; arguments are
    forwarded unchanged and the signature is kept for type checkers.

    Example:
        @catching("DB_ERROR")
        async def load_user(user_id: int) -> User: ...

        match await load_user(1):
            case Success(data=user): ...
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                return await try_catch_async(
                    lambda: func(*args, **kwargs), tag_or_handler
                )

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return try_catch(lambda: func(*args, **kwargs), tag_or_handler)

        return wrapper

    return cast("_Catcher", decorator)
