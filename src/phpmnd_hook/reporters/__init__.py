"""Outcome reporters for phpmnd-hook."""

from phpmnd_hook.reporters.base import Reporter
from phpmnd_hook.reporters.console_reporter import ConsoleReporter
from phpmnd_hook.reporters.json_reporter import JSONReporter

__all__ = ["Reporter", "ConsoleReporter", "JSONReporter"]
