"""Base reporter protocol for fixtura test output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from fixtura.testing.discovery import TestDefinition
    from fixtura.testing.runner import RunResult, TestResult


class Reporter(Protocol):
    """Protocol defining the interface for test reporters.

    All methods are async so reporters may do I/O. Sync reporters can
    implement them without awaiting anything.
    """

    async def on_no_tests_found(self) -> None:
        """Called when selection leaves no tests to run."""
        ...

    async def on_collection_complete(self, tests: list[TestDefinition]) -> None:
        """Called with the selected tests before any of them runs."""
        ...

    async def on_test_complete(self, result: TestResult) -> None:
        """Called after each test parameter combination completes."""
        ...

    async def on_run_complete(self, run_result: RunResult) -> None:
        """Called after all tests complete."""
        ...
