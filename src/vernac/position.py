"""Document coordinates and the pure arithmetic over them.

Positions are 0-indexed ``(line, character)`` pairs, ranges are half-open
spans of positions, and a RangeDelta describes how one edit shifts every
position located after it.

Line breaks are ``\\n``, ``\\r\\n`` and a lone ``\\r``.  A ``\\r\\n`` pair is a
single break two characters wide.

Translation functions assume the caller already knows where the position
lies relative to the edit; they do no bounds checking.

Thread Safety:
    All types are frozen dataclasses and every function is pure.

"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass

from vernac.errors import InvalidPositionError, InvalidRangeError


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A 0-indexed line/character coordinate.

    Ordering is lexicographic: first by line, then by character.

    Examples:
        >>> Position(0, 5) < Position(1, 0)
        True
        >>> str(Position(2, 3))
        '2:3'

    """

    line: int
    character: int

    def __post_init__(self) -> None:
        if self.line < 0 or self.character < 0:
            raise InvalidPositionError(self.line, self.character)

    def __str__(self) -> str:
        return f"{self.line}:{self.character}"


@dataclass(frozen=True, slots=True)
class Range:
    """Half-open span ``[start, end)`` in document coordinates.

    Ranges are values: nothing in vernac mutates one in place, so a range can
    be shared freely between a sentence and its caller.

    Raises:
        InvalidRangeError: If ``start`` is after ``end``.

    """

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise InvalidRangeError(self.start, self.end)

    def __str__(self) -> str:
        return f"[{self.start}-{self.end})"

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @classmethod
    def create(cls, start_line: int, start_character: int, end_line: int, end_character: int) -> Range:
        """Build a range from four coordinates."""
        return cls(Position(start_line, start_character), Position(end_line, end_character))


@dataclass(frozen=True, slots=True)
class RangeDelta:
    """How a single edit shifts the positions that follow it.

    Attributes:
        start: Start of the replaced range (old document)
        end: End of the replaced range (old document)
        lines_delta: Lines added by the edit; negative when lines were removed
        end_characters_delta: Column shift for positions on ``end.line``
            at or after ``end``

    """

    start: Position
    end: Position
    lines_delta: int
    end_characters_delta: int


# =============================================================================
# Line tables
# =============================================================================


def _line_starts(text: str) -> list[int]:
    """Offsets at which each line of ``text`` begins (always starts with 0)."""
    starts = [0]
    pos = 0
    while True:
        nl = text.find("\n", pos)
        cr = text.find("\r", pos)
        if cr != -1 and (nl == -1 or cr < nl):
            pos = cr + 2 if nl == cr + 1 else cr + 1
        elif nl != -1:
            pos = nl + 1
        else:
            return starts
        starts.append(pos)


def _line_content_end(text: str, starts: list[int], line: int) -> int:
    """Offset of the first line-break character of ``line`` (or end of text)."""
    if line + 1 >= len(starts):
        return len(text)
    next_start = starts[line + 1]
    if next_start >= 2 and text[next_start - 2 : next_start] == "\r\n":
        return next_start - 2
    return next_start - 1


# =============================================================================
# Offset / position conversion
# =============================================================================


def position_at_relative(origin: Position, text: str, local_offset: int) -> Position:
    """Position reached after walking ``local_offset`` characters of ``text``.

    Args:
        origin: Document position of ``text[0]``
        text: The text being walked
        local_offset: Character offset into ``text`` (clamped to its bounds)

    Returns:
        The absolute document position of ``text[local_offset]``.

    """
    local_offset = max(0, min(local_offset, len(text)))
    starts = _line_starts(text)
    line = bisect_right(starts, local_offset) - 1
    if line == 0:
        return Position(origin.line, origin.character + local_offset)
    return Position(origin.line + line, local_offset - starts[line])


def relative_offset_at_absolute_position(text: str, origin: Position, position: Position) -> int:
    """Offset into ``text`` of an absolute document position.

    Args:
        text: Text whose first character sits at ``origin``
        origin: Document position of ``text[0]``
        position: Absolute document position to look up

    Returns:
        Offset in ``[0, len(text)]``, or -1 if ``position`` does not fall
        within the text (before ``origin``, past the last line, or past the
        end of its line).

    """
    if position < origin:
        return -1
    starts = _line_starts(text)
    line = position.line - origin.line
    if line >= len(starts):
        return -1
    base = origin.character if line == 0 else 0
    offset = starts[line] + position.character - base
    # A position may address any offset up to the last break character
    limit = starts[line + 1] - 1 if line + 1 < len(starts) else len(text)
    if offset > limit:
        return -1
    return offset


def offset_at(document: str, position: Position) -> int:
    """Absolute offset of ``position`` in ``document``.

    Characters past the end of a line clamp to the line's end; lines past the
    end of the document clamp to its length.
    """
    starts = _line_starts(document)
    if position.line >= len(starts):
        return len(document)
    line_start = starts[position.line]
    return min(line_start + position.character, _line_content_end(document, starts, position.line))


def position_at(document: str, offset: int) -> Position:
    """Document position of an absolute offset (inverse of offset_at)."""
    return position_at_relative(Position(0, 0), document, offset)


# =============================================================================
# Comparisons
# =============================================================================


def position_is_before(a: Position, b: Position) -> bool:
    return a < b


def position_is_before_or_equal(a: Position, b: Position) -> bool:
    return a <= b


def position_is_after(a: Position, b: Position) -> bool:
    return a > b


def position_is_after_or_equal(a: Position, b: Position) -> bool:
    return a >= b


def position_is_equal(a: Position, b: Position) -> bool:
    return a == b


def range_contains(range_: Range, position: Position) -> bool:
    """True if ``position`` lies in the half-open ``range_``."""
    return range_.start <= position < range_.end


def range_intersects(a: Range, b: Range) -> bool:
    """True if the two half-open ranges overlap.

    An empty range intersects another only when it lies strictly inside it.
    """
    return a.start < b.end and b.start < a.end


def range_touches(a: Range, b: Range) -> bool:
    """True if the ranges overlap or share an endpoint."""
    return a.start <= b.end and b.start <= a.end


# =============================================================================
# Delta translation
# =============================================================================


def position_range_delta_translate(position: Position, delta: RangeDelta) -> Position:
    """Shift a position that lies at or after the edit described by ``delta``.

    Positions strictly before the end of the replaced range are returned
    unchanged.
    """
    if position < delta.end:
        return position
    if position.line == delta.end.line:
        return Position(
            position.line + delta.lines_delta,
            position.character + delta.end_characters_delta,
        )
    return Position(position.line + delta.lines_delta, position.character)


def position_range_delta_translate_end(position: Position, delta: RangeDelta) -> Position:
    """Shift the end position of a range that the edit falls inside.

    Unlike position_range_delta_translate, a pure insertion exactly at
    ``position`` does not move it: the inserted text lands after the
    half-open end.
    """
    if delta.start == delta.end == position:
        return position
    return position_range_delta_translate(position, delta)


def range_delta_translate(range_: Range, delta: RangeDelta) -> Range:
    """Shift a range lying entirely after the edit described by ``delta``."""
    return Range(
        position_range_delta_translate(range_.start, delta),
        position_range_delta_translate(range_.end, delta),
    )


__all__ = [
    "Position",
    "Range",
    "RangeDelta",
    "offset_at",
    "position_at",
    "position_at_relative",
    "position_is_after",
    "position_is_after_or_equal",
    "position_is_before",
    "position_is_before_or_equal",
    "position_is_equal",
    "position_range_delta_translate",
    "position_range_delta_translate_end",
    "range_contains",
    "range_delta_translate",
    "range_intersects",
    "range_touches",
    "relative_offset_at_absolute_position",
]
