"""Domain model: immutable value objects and reporter state."""

from consolediag.domain.model.configuration import RendererConfig
from consolediag.domain.model.event import DiagnosticEvent
from consolediag.domain.model.location import SourceLocation
from consolediag.domain.model.severity import Severity
from consolediag.domain.model.state import SUCCESS_ERROR_NUMBER, ReporterState
from consolediag.domain.model.strings import MessageStrings

__all__ = [
    "SUCCESS_ERROR_NUMBER",
    "DiagnosticEvent",
    "MessageStrings",
    "RendererConfig",
    "ReporterState",
    "Severity",
    "SourceLocation",
]
