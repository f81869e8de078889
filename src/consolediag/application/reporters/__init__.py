"""Reporters: consume diagnostic events and track exit status."""

from consolediag.application.reporters.console import ConsoleReporter, SynchronizedReporter

__all__ = [
    "ConsoleReporter",
    "SynchronizedReporter",
]
