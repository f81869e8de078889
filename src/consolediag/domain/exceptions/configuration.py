"""Renderer configuration exceptions."""

from consolediag.domain.exceptions.base import ConsoleDiagError


class ConfigurationError(ConsoleDiagError):
    """Invalid renderer configuration.

    Raised when RendererConfig or MessageStrings is constructed with bad values.
    FAIL-FIRST: validates inputs immediately.

    Attributes:
        field: Name of the offending field (must not be empty)
        reason: Why the value is invalid (must not be empty)
    """

    def __init__(self, field: str, reason: str) -> None:
        if not field:
            raise ValueError("field must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.field = field
        self.reason = reason
        super().__init__(f"Invalid configuration '{field}': {reason}")
