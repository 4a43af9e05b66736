"""Exception classes for vernac.

Reconciliation never raises; these cover misuse at construction time.
"""

from __future__ import annotations


class VernacError(Exception):
    """Base exception for all vernac errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidPositionError(VernacError, ValueError):
    """A Position was built with a negative line or character."""

    def __init__(self, line: int, character: int) -> None:
        self.line = line
        self.character = character
        super().__init__(f"Invalid position {line}:{character}: coordinates must be >= 0")


class InvalidRangeError(VernacError, ValueError):
    """A Range was built with its start after its end.

    Attributes:
        start: The offending start position
        end: The offending end position
    """

    def __init__(self, start: object, end: object) -> None:
        """Initialize range error.

        Args:
            start: Start position of the rejected range
            end: End position of the rejected range
        """
        self.start = start
        self.end = end
        super().__init__(f"Invalid range {start}-{end}: start must not be after end")
