"""Localized string table used by the message renderer.

Templates use str.format named fields. Defaults are the English strings.
"""

import re
from dataclasses import dataclass
from string import Formatter

from consolediag.domain.exceptions.configuration import ConfigurationError

_REQUIRED_FIELDS: dict[str, frozenset[str]] = {
    "first_line_number": frozenset({"file", "line"}),
    "line_number": frozenset({"file", "line"}),
    "info_message": frozenset({"message"}),
    "non_info_message": frozenset({"origin", "label", "short_name", "id", "message"}),
    "source_trace_location": frozenset({"location"}),
}


def _field_names(template: str) -> set[str]:
    """Top-level field names referenced by a str.format template.

    Raises:
        ValueError: Template is not valid format syntax.
    """
    return {
        re.split(r"[.\[]", field_name, maxsplit=1)[0]
        for _, field_name, _, _ in Formatter().parse(template)
        if field_name
    }


@dataclass(frozen=True, slots=True)
class MessageStrings:
    """Templates and labels for message composition.

    Attributes:
        warning_label: Label shown for WARNING messages
        error_label: Label shown for ERROR messages
        first_line_number: Primary origin when the first location has a line.
            Fields: file, line.
        line_number: Trace entry for a location with a line. Fields: file, line.
        info_message: INFORMATION body. Fields: message.
        non_info_message: Body for every other severity.
            Fields: origin, label, short_name, id, message.
        source_trace: Trace header. Fields: newline.
        source_trace_location: One trace entry. Fields: location, newline.
        source_trace_unavailable: Notice when no locations exist. Fields: newline.
    """

    warning_label: str = "warning"
    error_label: str = "error"
    first_line_number: str = "{file}({line})"
    line_number: str = "{file}({line})"
    info_message: str = "{message}"
    non_info_message: str = "{origin} : {label} {short_name}{id:04d} : {message}"
    source_trace: str = "{newline}Source trace:{newline}"
    source_trace_location: str = "\tat {location}{newline}"
    source_trace_unavailable: str = "{newline}Source trace unavailable.{newline}"

    def __post_init__(self) -> None:
        """Validate that templates carry their required fields. FAIL-FIRST."""
        for name, fields in _REQUIRED_FIELDS.items():
            template = getattr(self, name)
            try:
                present = _field_names(template)
            except ValueError as e:
                raise ConfigurationError(name, f"invalid template: {e}") from e
            missing = sorted(fields - present)
            if missing:
                raise ConfigurationError(name, f"template is missing {', '.join(missing)}")
