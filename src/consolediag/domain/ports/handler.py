"""Message handler protocol: anything that consumes diagnostic events."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from consolediag.domain.model.event import DiagnosticEvent


class MessageHandler(Protocol):
    """Contract for event consumers subscribed to the tool's message stream."""

    def on_message(self, event: DiagnosticEvent) -> None:
        """Handle one diagnostic event.

        Args:
            event: Event raised by the upstream tool
        """
        ...
