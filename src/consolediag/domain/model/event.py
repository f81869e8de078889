"""Diagnostic event value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from consolediag.domain.model.location import SourceLocation
    from consolediag.domain.model.severity import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticEvent:
    """One occurrence of a diagnostic message.

    Created by the upstream tool per message and not retained after
    rendering.

    Attributes:
        id: Numeric message identifier (also the exit code for errors)
        severity: Level after upstream suppression/elevation policy
        locations: Ordered source locations, primary first. May be empty.
        text: Resolved, localized message text. None = suppressed.
        args: Data the text was resolved from
    """

    id: int
    severity: Severity
    locations: tuple[SourceLocation, ...] = ()
    text: str | None = None
    args: tuple[object, ...] = ()

    @property
    def is_suppressed(self) -> bool:
        """True if nothing should be displayed for this event."""
        return self.text is None
