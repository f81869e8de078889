"""Renderer configuration supplied at reporter construction."""

from __future__ import annotations

from dataclasses import dataclass, field

from consolediag.domain.exceptions.configuration import ConfigurationError
from consolediag.domain.model.strings import MessageStrings


@dataclass(frozen=True, slots=True)
class RendererConfig:
    """Immutable renderer configuration DTO.

    Attributes:
        short_name: Short application name, usually 4 uppercase characters.
            Prefixes the message id (e.g. CNDL1001).
        long_name: Long application name, usually the executable name.
            Used as origin when an event has no locations.
        source_trace: Append the source trace block to every message.
        strings: Localized templates and labels.
    """

    short_name: str
    long_name: str
    source_trace: bool = False
    strings: MessageStrings = field(default_factory=MessageStrings)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.short_name:
            raise ConfigurationError("short_name", "must not be empty")
        if not self.long_name:
            raise ConfigurationError("long_name", "must not be empty")
