"""Reporter state: exit status bookkeeping."""

from dataclasses import dataclass

SUCCESS_ERROR_NUMBER = 0


@dataclass(slots=True)
class ReporterState:
    """Process-lifetime mutable state owned by one reporter.

    No internal locking. Callers that report from several threads must
    serialize access (see SynchronizedReporter).

    Attributes:
        last_error_number: Id of the most recently reported error.
            SUCCESS_ERROR_NUMBER until an error is reported.
    """

    last_error_number: int = SUCCESS_ERROR_NUMBER

    @property
    def succeeded(self) -> bool:
        """True if no error has been recorded."""
        return self.last_error_number == SUCCESS_ERROR_NUMBER

    def record_error(self, error_number: int) -> None:
        """Record an error. Last error wins."""
        self.last_error_number = error_number
