"""Source location value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """A file, optionally narrowed to one line.

    Several locations may describe one logical event, for example an error
    traced through an include chain (innermost first).

    Preconditions (caller contract, not validated here):
        file_name is non-empty.
        line_number is >= 1 when present.

    Attributes:
        file_name: Path of the source file as the tool refers to it
        line_number: 1-based line, or None when only the file is known
    """

    file_name: str
    line_number: int | None = None

    @property
    def has_line_number(self) -> bool:
        """True if the location points at a specific line."""
        return self.line_number is not None

    def __str__(self) -> str:
        """Format as file(line) or bare file."""
        if self.line_number is None:
            return self.file_name
        return f"{self.file_name}({self.line_number})"
