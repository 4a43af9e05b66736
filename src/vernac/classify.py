"""Geometric classification of an edit against a sentence's range.

Example:
    >>> from vernac.position import Range
    >>> classify(Range.create(0, 5, 0, 9), Range.create(0, 0, 0, 0))
    <Containment.BEFORE: 1>

"""

from __future__ import annotations

from enum import Enum, auto

from vernac.position import Range


class Containment(Enum):
    """Where an edit falls relative to a sentence.

    - BEFORE: The edit ends at or before the sentence start; the sentence
      only shifts.
    - AFTER: The edit starts at or after the sentence end; the sentence is
      untouched.
    - CROSSES: The edit straddles a sentence boundary; the sentence can no
      longer be reconciled.
    - CONTAINS: The edit lies within the sentence; its text is spliced.

    """

    BEFORE = auto()
    AFTER = auto()
    CROSSES = auto()
    CONTAINS = auto()


def classify(sentence_range: Range, edit_range: Range) -> Containment:
    """Classify ``edit_range`` against ``sentence_range``."""
    if edit_range.end <= sentence_range.start:
        return Containment.BEFORE
    if edit_range.start >= sentence_range.end:
        return Containment.AFTER
    if sentence_range.start <= edit_range.start and edit_range.end <= sentence_range.end:
        return Containment.CONTAINS
    return Containment.CROSSES


def touches_end(sentence_range: Range, edit_range: Range) -> bool:
    """True if the edit starts exactly where the sentence ends."""
    return edit_range.start == sentence_range.end


__all__ = ["Containment", "classify", "touches_end"]
