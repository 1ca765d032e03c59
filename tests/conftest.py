"""Pytest configuration and fixtures.

Provides shared test doubles for computations that succeed or fail, and
logging setup for tests that assert on library log records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any

import pytest

from tagresult import Failure, PublicError, error

# =============================================================================
# Test Doubles
# =============================================================================


class BoomError(Exception):
    """Domain error raised by failing computations."""


@dataclass
class RecordingHandler:
    """Error handler test double.

    Records every caught exception and answers with a ``Failure`` built from a
    displayable ``PublicError`` that chains the original.
    """

    tag: str = "HANDLED"
    message: str = "Something went wrong"
    seen: list[Exception] = field(default_factory=list)
    returned: list[Failure[Any, Any]] = field(default_factory=list)

    def __call__(self, caught: Exception) -> Failure[PublicError, str]:
        self.seen.append(caught)
        result = error(PublicError(self.message, cause=caught), self.tag)
        self.returned.append(result)
        return result


@pytest.fixture
def boom() -> BoomError:
    """A fresh domain error instance."""
    return BoomError("boom")


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture tagresult debug records."""
    caplog.set_level(logging.DEBUG, logger="tagresult")
    return caplog
