"""Domain ports (Protocols)."""

from consolediag.domain.ports.handler import MessageHandler
from consolediag.domain.ports.sink import MessageSink

__all__ = [
    "MessageHandler",
    "MessageSink",
]
