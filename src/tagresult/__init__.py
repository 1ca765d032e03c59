"""tagresult: tagged success/error values in place of raised exceptions.

Public API:
    - ok() / error(): Build Success and Failure records
    - try_catch() / try_catch_async(): Capture a computation's outcome as a Result
    - catching(): Decorator form of the adapters
    - Tag / Handler: Explicit error policies
"""

from __future__ import annotations

import logging

from tagresult.adapters import catching, try_catch, try_catch_async
from tagresult.errors import (
    NotAwaitableError,
    PublicError,
    TagRequiredError,
    TagResultError,
    ThrownValueError,
    cause_chain,
)
from tagresult.policy import ErrorPolicy, Handler, Tag, as_policy, normalize_error
from tagresult.result import (
    Failure,
    Result,
    Success,
    error,
    is_failure,
    is_success,
    ok,
)
from tagresult.serialization import from_payload, to_payload

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("tagresult")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("tagresult").addHandler(logging.NullHandler())

__all__ = [
    "ErrorPolicy",
    "Failure",
    "Handler",
    "NotAwaitableError",
    "PublicError",
    "Result",
    "Success",
    "Tag",
    "TagRequiredError",
    "TagResultError",
    "ThrownValueError",
    "as_policy",
    "catching",
    "cause_chain",
    "error",
    "from_payload",
    "is_failure",
    "is_success",
    "normalize_error",
    "ok",
    "to_payload",
    "try_catch",
    "try_catch_async",
]
