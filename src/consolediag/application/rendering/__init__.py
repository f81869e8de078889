"""Message rendering: DiagnosticEvent -> display string."""

from consolediag.application.rendering.renderer import (
    MessageRenderer,
    format_location,
    primary_origin,
    render,
    severity_label,
    trace_lines,
)

__all__ = [
    "MessageRenderer",
    "format_location",
    "primary_origin",
    "render",
    "severity_label",
    "trace_lines",
]
