"""Message sink protocol: where rendered diagnostics go.

The console is one sink among others. Debug duplicates, files or test
buffers satisfy the same Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from consolediag.domain.model.severity import Severity


class MessageSink(Protocol):
    """Contract for rendered message destinations.

    Example:
        class ListSink:
            def __init__(self) -> None:
                self.lines: list[str] = []

            def emit(self, message: str, severity: Severity) -> None:
                self.lines.append(message)
    """

    def emit(self, message: str, severity: Severity) -> None:
        """Write one fully formed message as a single line.

        The message may contain internal newlines (source trace block).
        The sink appends the terminating newline. Write failures propagate.

        Args:
            message: Rendered message text
            severity: Severity of the originating event
        """
        ...
