"""Message sinks: rich console and plain text streams.

Both satisfy MessageSink. Neither buffers nor retries: write failures
(OSError, BrokenPipeError) propagate to the reporter's caller.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, TextIO

from rich.console import Console

from consolediag.domain.model.severity import Severity

if TYPE_CHECKING:
    from collections.abc import Mapping


DEFAULT_STYLES: Mapping[Severity, str] = MappingProxyType(
    {
        Severity.WARNING: "yellow",
        Severity.ERROR: "bold red",
    }
)


@dataclass(frozen=True, slots=True)
class RichConsoleConfig:
    """Configuration for RichConsoleSink.

    Attributes:
        stderr: Write to stderr instead of stdout.
        color: Style messages by severity when the console supports it.
        styles: Severity -> rich style. Missing severity = unstyled.
    """

    stderr: bool = False
    color: bool = True
    styles: Mapping[Severity, str] | None = None


class RichConsoleSink:
    """Primary console writer backed by rich.console.Console.

    Markup, emoji and highlighting are disabled and soft wrapping keeps long
    lines intact. Tabs (source trace entries) become spaces at
    console.tab_size stops; rich never writes literal tabs. Everything else
    is printed as given. StreamSink keeps tabs.
    Colour codes are emitted only when rich detects a terminal.
    """

    def __init__(
        self,
        config: RichConsoleConfig | None = None,
        *,
        console: Console | None = None,
    ) -> None:
        """Initialize sink.

        Args:
            config: Sink configuration. Uses defaults if None.
            console: Pre-built console (tests, shared consoles). Overrides
                config.stderr.
        """
        self._config = config or RichConsoleConfig()
        self._console = console or Console(stderr=self._config.stderr)
        self._styles = self._config.styles if self._config.styles is not None else DEFAULT_STYLES

    @property
    def console(self) -> Console:
        """Underlying rich console."""
        return self._console

    def emit(self, message: str, severity: Severity) -> None:
        """Print message as one line, tabs expanded."""
        style = self._styles.get(severity) if self._config.color else None
        self._console.print(
            message.expandtabs(self._console.tab_size),
            style=style,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )


class StreamSink:
    """Plain text writer for any TextIO.

    Used as secondary (debug) sink, e.g. StreamSink(sys.stderr, prefix="CNDL: ").
    """

    def __init__(self, output: TextIO | None = None, *, prefix: str = "") -> None:
        """Initialize sink.

        Args:
            output: Output stream (default: sys.stderr)
            prefix: Text written before every message (category tag)
        """
        self._output = output if output is not None else sys.stderr
        self._prefix = prefix

    def emit(self, message: str, severity: Severity) -> None:
        """Write prefix + message + newline in a single write call."""
        self._output.write(f"{self._prefix}{message}\n")
