"""Soft test failures.

Expectation accessors report read and decode problems here instead of
raising, so a test keeps running after the first bad message and is marked
failed at the end.
"""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class FailureReporter(Protocol):
    """Sink for non-fatal test failures."""

    def error(self, message: str) -> None: ...


class FailureRecorder:
    """Collects soft failures for a single test."""

    def __init__(self) -> None:
        self.failures: list[str] = []

    def error(self, message: str) -> None:
        logger.error("%s", message)
        self.failures.append(message)

    @property
    def failed(self) -> bool:
        return bool(self.failures)

    def clear(self) -> None:
        self.failures.clear()

    def check(self) -> None:
        """Raise ``AssertionError`` listing every recorded failure, if any."""
        if not self.failures:
            return
        lines = "\n".join(f"  - {failure}" for failure in self.failures)
        msg = f"{len(self.failures)} soft failure(s) recorded:\n{lines}"
        raise AssertionError(msg)
