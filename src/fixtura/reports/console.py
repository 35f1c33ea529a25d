"""Console reporter built on rich."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.traceback import Traceback

from fixtura.reports.base import Reporter
from fixtura.testing.runner import TestStatus

if TYPE_CHECKING:
    from fixtura.testing.discovery import TestDefinition
    from fixtura.testing.runner import RunResult, TestResult


_STYLES = {
    TestStatus.PASSED: ("PASSED", "green", "."),
    TestStatus.FAILED: ("FAILED", "red", "F"),
    TestStatus.ERROR: ("ERROR", "red", "E"),
    TestStatus.SETUP_ERROR: ("SETUP ERROR", "magenta", "S"),
}


class ConsoleReporter(Reporter):
    """Prints progress, failure details and a summary.

    Verbosity below 0 prints only the summary, 0 prints one character per
    test, 1 and above one line per test.
    """

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console()
        self.verbosity = verbosity

    async def on_no_tests_found(self) -> None:
        self.console.print("[yellow]No tests found.[/yellow]")

    async def on_collection_complete(self, tests: list[TestDefinition]) -> None:
        if self.verbosity >= 0:
            self.console.print(f"[bold]Collected {len(tests)} test(s)[/bold]")

    async def on_test_complete(self, result: TestResult) -> None:
        label, color, char = _STYLES[result.status]
        if result.teardown_errors and result.status is TestStatus.PASSED:
            label, color, char = "TEARDOWN ERROR", "yellow", "T"

        if self.verbosity >= 1:
            self.console.print(
                f"[{color}]{label}[/{color}] {escape(result.display_name)} "
                f"[dim]({result.duration_ms:.1f}ms)[/dim]",
                highlight=False,
            )
        elif self.verbosity == 0:
            self.console.print(f"[{color}]{char}[/{color}]", end="")

    async def on_run_complete(self, run_result: RunResult) -> None:
        if self.verbosity == 0:
            self.console.print()

        for result in run_result.results:
            if result.ok:
                continue
            self.console.rule(f"[red]{escape(result.display_name)}[/red]")
            if result.error is not None:
                phase = "setup" if result.status is TestStatus.SETUP_ERROR else "call"
                self.console.print(f"[bold]{phase}:[/bold]")
                self._print_exception(result.error)
            for error in result.teardown_errors:
                self.console.print(f"[bold]teardown of {escape(repr(error.fixture))}:[/bold]")
                self._print_exception(error.cause)

        self.console.print(self._summary(run_result))

    def _print_exception(self, exc: BaseException) -> None:
        if self.verbosity >= 1 and exc.__traceback__ is not None:
            self.console.print(Traceback.from_exception(type(exc), exc, exc.__traceback__))
        else:
            self.console.print(f"  {type(exc).__name__}: {escape(str(exc))}", highlight=False)

    def _summary(self, run_result: RunResult) -> str:
        parts = []
        for count, label, color in (
            (run_result.passed, "passed", "green"),
            (run_result.failed, "failed", "red"),
            (run_result.errors, "errors", "red"),
            (run_result.setup_errors, "setup errors", "magenta"),
            (run_result.teardown_errors, "teardown errors", "yellow"),
        ):
            if count:
                parts.append(f"[{color}]{count} {label}[/{color}]")
        body = ", ".join(parts) if parts else "no tests ran"
        return f"{body} in {run_result.total_duration_ms / 1000:.2f}s"


__all__ = ["ConsoleReporter"]
