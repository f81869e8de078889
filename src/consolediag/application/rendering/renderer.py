"""Message renderer: DiagnosticEvent + RendererConfig -> display string.

Pure functions. No state, no I/O. The reporter owns side effects.

Layout (English defaults):
    a.wxs(12) : warning CNDL1001 : bad attribute
    candle.exe : error CNDL0500 : fatal config error

With source trace enabled the message is followed by:

    Source trace:
        at a.wxs(12)
        at b.wxi
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from consolediag.domain.exceptions.message import MessageFormatError
from consolediag.domain.model.severity import Severity

if TYPE_CHECKING:
    from collections.abc import Sequence

    from consolediag.domain.model.configuration import RendererConfig
    from consolediag.domain.model.event import DiagnosticEvent
    from consolediag.domain.model.location import SourceLocation
    from consolediag.domain.model.strings import MessageStrings

NEWLINE = "\n"


def _format(template: str, **fields: object) -> str:
    """str.format wrapper that reports template defects as MessageFormatError."""
    try:
        return template.format(**fields)
    except (KeyError, IndexError, ValueError) as e:
        raise MessageFormatError(template, f"{type(e).__name__}: {e}") from e


def format_location(location: SourceLocation, template: str) -> str:
    """Format location with template if it has a line, else bare file name."""
    if location.line_number is None:
        return location.file_name
    return _format(template, file=location.file_name, line=location.line_number)


def primary_origin(locations: Sequence[SourceLocation], config: RendererConfig) -> str:
    """Leading identifier of a message.

    First location wins. No locations -> the tool's long name.
    """
    if not locations:
        return config.long_name
    return format_location(locations[0], config.strings.first_line_number)


def trace_lines(locations: Sequence[SourceLocation], strings: MessageStrings) -> list[str]:
    """One entry per location, in order, first location included."""
    return [format_location(loc, strings.line_number) for loc in locations]


def severity_label(severity: Severity, strings: MessageStrings) -> str:
    """Localized label for severity. Empty for INFORMATION and VERBOSE."""
    match severity:
        case Severity.WARNING:
            return strings.warning_label
        case Severity.ERROR:
            return strings.error_label
        case _:
            return ""


def _render_trace(lines: list[str], strings: MessageStrings) -> str:
    """Source trace appendix, terminated by a blank line."""
    if not lines:
        parts = [_format(strings.source_trace_unavailable, newline=NEWLINE)]
    else:
        parts = [_format(strings.source_trace, newline=NEWLINE)]
        parts.extend(
            _format(strings.source_trace_location, location=line, newline=NEWLINE)
            for line in lines
        )
    parts.append(NEWLINE)
    return "".join(parts)


def render(event: DiagnosticEvent, config: RendererConfig) -> str | None:
    """Render event to its display string.

    Args:
        event: Event to render.
        config: Names, trace flag and string table.

    Returns:
        Formatted message, or None if the event is suppressed (text is None).

    Raises:
        MessageFormatError: A template in config.strings cannot be formatted.
    """
    if event.text is None:
        return None

    strings = config.strings
    origin = primary_origin(event.locations, config)
    lines = trace_lines(event.locations, strings)

    if event.severity is Severity.INFORMATION:
        body = _format(strings.info_message, message=event.text)
    else:
        body = _format(
            strings.non_info_message,
            origin=origin,
            label=severity_label(event.severity, strings),
            short_name=config.short_name,
            id=event.id,
            message=event.text,
        )

    if not config.source_trace:
        return body
    return body + _render_trace(lines, strings)


class MessageRenderer:
    """render() bound to one RendererConfig.

    Stateless beyond the immutable config. Safe to share between reporters.
    """

    def __init__(self, config: RendererConfig) -> None:
        """Initialize renderer.

        Args:
            config: Renderer configuration.
        """
        self._config = config

    @property
    def config(self) -> RendererConfig:
        """Configuration this renderer was built with."""
        return self._config

    def render(self, event: DiagnosticEvent) -> str | None:
        """Render event. See module-level render()."""
        return render(event, self._config)
