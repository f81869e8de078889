"""consolediag - console diagnostics for build and compilation tools."""

__version__ = "0.1.0"

from consolediag.application.catalog import MessageCatalog
from consolediag.application.rendering.renderer import MessageRenderer, render
from consolediag.application.reporters.console import ConsoleReporter, SynchronizedReporter
from consolediag.domain.model.configuration import RendererConfig
from consolediag.domain.model.event import DiagnosticEvent
from consolediag.domain.model.location import SourceLocation
from consolediag.domain.model.severity import Severity
from consolediag.domain.model.state import SUCCESS_ERROR_NUMBER, ReporterState
from consolediag.domain.model.strings import MessageStrings

__all__ = [
    "SUCCESS_ERROR_NUMBER",
    "ConsoleReporter",
    "DiagnosticEvent",
    "MessageCatalog",
    "MessageRenderer",
    "MessageStrings",
    "RendererConfig",
    "ReporterState",
    "Severity",
    "SourceLocation",
    "SynchronizedReporter",
    "__version__",
    "render",
]
