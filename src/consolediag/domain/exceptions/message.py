"""Message lookup and formatting exceptions."""

from consolediag.domain.exceptions.base import ConsoleDiagError


class UnknownMessageError(ConsoleDiagError):
    """No template registered for a message id.

    Attributes:
        message_id: The id that was looked up
    """

    def __init__(self, message_id: int) -> None:
        self.message_id = message_id
        super().__init__(f"No message template registered for id {message_id}")


class MessageFormatError(ConsoleDiagError):
    """Template could not be formatted with the supplied data.

    A configuration defect (template and data disagree), never a
    suppression signal.

    Attributes:
        template: Template that failed (must not be None)
        reason: Underlying formatting failure (must not be empty)
    """

    def __init__(self, template: str, reason: str) -> None:
        if template is None:
            raise TypeError("template must not be None")
        if not reason:
            raise ValueError("reason must not be empty")

        self.template = template
        self.reason = reason
        super().__init__(f"Cannot format template {template!r}: {reason}")
