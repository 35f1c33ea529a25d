"""CLI module for the fixtura test runner."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from fixtura.config import FixturaConfig, load_config
from fixtura.errors import ConfigurationError
from fixtura.reports import ConsoleReporter
from fixtura.testing import Runner, TestDefinition, collect


EXIT_OK = 0
EXIT_FAILURES = 1
EXIT_CONFIG_ERROR = 2
EXIT_NO_TESTS = 5

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the fixtura CLI."""
    console = Console()
    try:
        config = load_config()
    except ConfigurationError as exc:
        console.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
        raise SystemExit(EXIT_CONFIG_ERROR) from None

    parser = _build_parser()
    raw_args = list(sys.argv[1:] if argv is None else argv)
    args = parser.parse_args(_apply_addopts(raw_args, config.addopts))

    if args.command == "test":
        exit_code = asyncio.run(_run_tests(args, config, console))
        raise SystemExit(exit_code)

    parser.print_help()
    raise SystemExit(EXIT_OK)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fixtura", description="Fixture-based test runner")
    subparsers = parser.add_subparsers(dest="command")

    test_parser = subparsers.add_parser("test", help="Run tests")
    test_parser.add_argument(
        "selectors",
        nargs="*",
        help="Run only tests whose qualified name contains one of these strings",
    )
    test_parser.add_argument(
        "-p",
        "--path",
        dest="paths",
        action="append",
        help="Test file or directory to collect from (repeatable)",
    )
    test_parser.add_argument("--root-marker", help="File name marking the test root")
    test_parser.add_argument("--pattern", help="Glob for test files inside directories")
    test_parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    test_parser.add_argument("-q", "--quiet", action="count", default=0, help="Reduce CLI output")
    test_parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase CLI output"
    )
    return parser


def _apply_addopts(argv: list[str], addopts: Sequence[str]) -> list[str]:
    """Insert configured default options right after the subcommand."""
    if not addopts or not argv or argv[0].startswith("-"):
        return argv
    return [argv[0], *addopts, *argv[1:]]


def _resolve_config(args: argparse.Namespace, config: FixturaConfig) -> FixturaConfig:
    updates: dict[str, Any] = {
        "verbosity": config.verbosity + args.verbose - args.quiet,
    }
    if args.selectors:
        updates["selectors"] = args.selectors
    if args.paths:
        updates["test_paths"] = args.paths
    if args.root_marker:
        updates["root_marker"] = args.root_marker
    if args.pattern:
        updates["file_pattern"] = args.pattern
    if args.log_level:
        updates["log_level"] = args.log_level

    try:
        return FixturaConfig.model_validate({**config.model_dump(), **updates})
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


def _collect_tests(config: FixturaConfig) -> list[TestDefinition]:
    tests: list[TestDefinition] = []
    for path in config.test_paths:
        tests.extend(collect(path, marker=config.root_marker, pattern=config.file_pattern))
    return tests


async def _run_tests(
    args: argparse.Namespace,
    config: FixturaConfig,
    console: Console,
) -> int:
    try:
        config = _resolve_config(args, config)
        logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
        tests = _collect_tests(config)
        reporter = ConsoleReporter(console=console, verbosity=config.verbosity)
        runner = Runner(config=config, reporters=[reporter])
        run_result = await runner.run(tests)
    except ConfigurationError as exc:
        console.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
        return EXIT_CONFIG_ERROR

    if run_result.total == 0:
        return EXIT_NO_TESTS
    return EXIT_OK if run_result.ok else EXIT_FAILURES


__all__ = ["main"]
