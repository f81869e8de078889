"""Domain exceptions."""

from consolediag.domain.exceptions.base import ConsoleDiagError
from consolediag.domain.exceptions.configuration import ConfigurationError
from consolediag.domain.exceptions.message import MessageFormatError, UnknownMessageError

__all__ = [
    "ConsoleDiagError",
    "ConfigurationError",
    "MessageFormatError",
    "UnknownMessageError",
]
