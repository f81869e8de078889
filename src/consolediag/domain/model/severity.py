"""Diagnostic severity enumeration."""

from enum import Enum


class Severity(Enum):
    """Level of a diagnostic message.

    Ordering matters only for label selection, never for suppression.
    """

    INFORMATION = "information"  # message text only
    VERBOSE = "verbose"  # non-info layout, no label
    WARNING = "warning"
    ERROR = "error"  # updates the exit status
