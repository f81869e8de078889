"""Message catalog: resolve message text by id and build events.

Stands in for the tool's localized resource tables. Templates use
str.format positional placeholders ({0}, {1}, ...) filled from the
event's data.

Example:
    catalog = MessageCatalog({1001: "The {0} attribute is not valid here."})
    event = catalog.event(1001, Severity.WARNING, "Foo", locations=(loc,))
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from consolediag.domain.exceptions.message import MessageFormatError, UnknownMessageError
from consolediag.domain.model.event import DiagnosticEvent

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from consolediag.domain.model.location import SourceLocation
    from consolediag.domain.model.severity import Severity


class MessageCatalog:
    """Immutable id -> template table with optional suppression set.

    Suppression here only means "resolve to None". Deciding which ids to
    suppress is the caller's policy.
    """

    def __init__(
        self,
        templates: Mapping[int, str],
        *,
        suppressed: Iterable[int] = (),
    ) -> None:
        """Initialize catalog.

        Args:
            templates: Message id -> format template.
            suppressed: Ids that resolve to None (not displayed).
        """
        self._templates = MappingProxyType(dict(templates))
        self._suppressed = frozenset(suppressed)

    def __contains__(self, message_id: object) -> bool:
        return message_id in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    @property
    def suppressed(self) -> frozenset[int]:
        """Ids that resolve to None."""
        return self._suppressed

    def resolve(self, message_id: int, *args: object) -> str | None:
        """Format the template for message_id.

        Args:
            message_id: Message identifier.
            *args: Positional substitution data.

        Returns:
            Resolved text, or None if message_id is suppressed or its
            template resolves to an empty string.

        Raises:
            UnknownMessageError: No template for message_id.
            MessageFormatError: args do not fit the template.
        """
        template = self._templates.get(message_id)
        if template is None:
            raise UnknownMessageError(message_id)
        if message_id in self._suppressed:
            return None

        try:
            text = template.format(*args)
        except (IndexError, KeyError, ValueError) as e:
            raise MessageFormatError(template, f"{type(e).__name__}: {e}") from e

        return text or None

    def event(
        self,
        message_id: int,
        severity: Severity,
        *args: object,
        locations: tuple[SourceLocation, ...] = (),
    ) -> DiagnosticEvent:
        """Build a DiagnosticEvent with resolved text.

        Args:
            message_id: Message identifier.
            severity: Event severity.
            *args: Substitution data, kept on the event.
            locations: Source locations, primary first.

        Returns:
            Event ready for ConsoleReporter.report().
        """
        return DiagnosticEvent(
            id=message_id,
            severity=severity,
            locations=locations,
            text=self.resolve(message_id, *args),
            args=args,
        )
