"""fixtura - fixture-oriented test runner."""

from .config import FixturaConfig, load_config
from .errors import ConfigurationError, FixturaError, TeardownError
from .testing import Request, Runner, collect, fixture, run
from .version import __version__


__all__ = [
    # Core testing
    "fixture",
    "collect",
    "run",
    "Runner",
    "Request",
    # Configuration
    "FixturaConfig",
    "load_config",
    # Errors
    "FixturaError",
    "ConfigurationError",
    "TeardownError",
    "__version__",
]
