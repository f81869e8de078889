"""Console reporter: DiagnosticEvent -> console line + exit status."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from consolediag.application.rendering.renderer import MessageRenderer
from consolediag.domain.model.severity import Severity
from consolediag.domain.model.state import ReporterState
from consolediag.infrastructure.sinks import RichConsoleSink

if TYPE_CHECKING:
    from collections.abc import Sequence

    from consolediag.domain.model.configuration import RendererConfig
    from consolediag.domain.model.event import DiagnosticEvent
    from consolediag.domain.ports.sink import MessageSink


class ConsoleReporter:
    """The only stateful actor: renders events, writes them, tracks exit status.

    Synchronous. Each report() call renders and writes one complete message
    before returning. Not thread-safe; wrap in SynchronizedReporter when
    several producers report concurrently.
    """

    def __init__(
        self,
        config: RendererConfig,
        sink: MessageSink | None = None,
        *,
        secondary_sinks: Sequence[MessageSink] = (),
        state: ReporterState | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            config: Renderer configuration.
            sink: Primary destination. Default: RichConsoleSink on stdout.
            secondary_sinks: Extra destinations (e.g. debug output) that
                receive every displayed message after the primary sink.
            state: Exit status holder. Default: fresh ReporterState.
        """
        self._renderer = MessageRenderer(config)
        self._sink = sink if sink is not None else RichConsoleSink()
        self._secondary_sinks = tuple(secondary_sinks)
        self._state = state if state is not None else ReporterState()

    @property
    def config(self) -> RendererConfig:
        """Renderer configuration."""
        return self._renderer.config

    @property
    def state(self) -> ReporterState:
        """Owned exit status state."""
        return self._state

    @property
    def last_error_number(self) -> int:
        """Id of the most recent error. 0 = success, used as process exit code."""
        return self._state.last_error_number

    def report(self, event: DiagnosticEvent) -> None:
        """Render event and write it.

        Suppressed events (text None) produce no output and no state change.
        Sink write failures propagate to the caller.

        Args:
            event: Event to display.
        """
        message = self._renderer.render(event)
        if message is None:
            return

        if event.severity is Severity.ERROR:
            self._state.record_error(event.id)

        self._sink.emit(message, event.severity)
        for sink in self._secondary_sinks:
            sink.emit(message, event.severity)

    def on_message(self, event: DiagnosticEvent) -> None:
        """MessageHandler entry point. Same as report()."""
        self.report(event)


class SynchronizedReporter:
    """Serializes report() calls of a ConsoleReporter with a Lock.

    For hosts that raise events from several worker threads. Guarantees
    messages are written whole and last_error_number follows write order.
    """

    def __init__(self, reporter: ConsoleReporter) -> None:
        """Initialize wrapper.

        Args:
            reporter: Reporter to guard. Must not be used directly afterwards.
        """
        self._reporter = reporter
        self._lock = threading.Lock()

    @property
    def last_error_number(self) -> int:
        """Id of the most recent error. 0 = success."""
        with self._lock:
            return self._reporter.last_error_number

    def report(self, event: DiagnosticEvent) -> None:
        """Report event while holding the lock."""
        with self._lock:
            self._reporter.report(event)

    def on_message(self, event: DiagnosticEvent) -> None:
        """MessageHandler entry point. Same as report()."""
        self.report(event)
