"""Error types raised by the fixture engine."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class FixturaError(Exception):
    """Base class for all fixtura errors."""


class ConfigurationError(FixturaError):
    """Raised when fixtures, tests or settings are malformed.

    Configuration errors are fatal: they abort the run before any test executes.
    """


class UnknownFixtureError(ConfigurationError):
    """Raised when a fixture or test requests a name nobody registered."""

    def __init__(self, name: str, requested_by: str | None = None) -> None:
        self.name = name
        self.requested_by = requested_by
        if requested_by:
            message = f"Unknown fixture '{name}' requested by '{requested_by}'"
        else:
            message = f"Unknown fixture '{name}'"
        super().__init__(message)


class AmbiguousFixtureError(ConfigurationError):
    """Raised when a name is requested that several other modules define."""

    def __init__(
        self,
        name: str,
        modules: Sequence[str | None],
        requested_by: str | None = None,
    ) -> None:
        self.name = name
        self.modules = tuple(modules)
        self.requested_by = requested_by
        owners = ", ".join(str(module) for module in self.modules)
        message = f"Fixture '{name}' is defined in several modules ({owners})"
        if requested_by:
            message += f" and requested by '{requested_by}'"
        super().__init__(message)


class CyclicDependencyError(ConfigurationError):
    """Raised when fixture dependencies do not form a DAG."""

    def __init__(self, cycle: list[str]) -> None:
        self.cycle = cycle
        super().__init__(f"Cyclic fixture dependency: {' -> '.join(cycle)}")


class TestRootNotFoundError(ConfigurationError):
    """Raised when no ancestor directory holds the test root marker."""

    __test__ = False

    def __init__(self, path: Path, marker: str) -> None:
        self.path = path
        self.marker = marker
        super().__init__(
            f"Reached the filesystem root while looking for '{marker}' above {path}"
        )


class ProducerProtocolError(FixturaError):
    """Raised when a fixture body breaks the single-yield contract."""


class ProducerStateError(FixturaError):
    """Raised when a producer is driven from the wrong lifecycle state."""


class TeardownError(FixturaError):
    """A failure raised while tearing down one fixture."""

    def __init__(self, fixture: str, cause: BaseException) -> None:
        self.fixture = fixture
        self.cause = cause
        super().__init__(f"Teardown of fixture '{fixture}' failed: {cause!r}")


__all__ = [
    "AmbiguousFixtureError",
    "ConfigurationError",
    "CyclicDependencyError",
    "FixturaError",
    "ProducerProtocolError",
    "ProducerStateError",
    "TeardownError",
    "TestRootNotFoundError",
    "UnknownFixtureError",
]
