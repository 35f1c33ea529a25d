"""Reporting module for fixtura test output."""

from fixtura.reports.base import Reporter
from fixtura.reports.console import ConsoleReporter


__all__ = ["ConsoleReporter", "Reporter"]
