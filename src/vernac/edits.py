"""Edit records and the helpers a document owner uses to process a batch.

A batch is an ordered sequence of TextEdit values.  Each edit's range is
expressed against the document as left by the edits before it, which is the
convention used by incremental document sync.

Example:
    >>> doc = "Lemma a.\\nQed."
    >>> edit = TextEdit(Range.create(0, 6, 0, 7), 1, "b")
    >>> apply_edits(doc, [edit])
    'Lemma b.\\nQed.'

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from vernac.position import (
    Position,
    Range,
    RangeDelta,
    offset_at,
    position_at_relative,
)


@dataclass(frozen=True, slots=True)
class TextEdit:
    """Replace ``range_length`` characters at ``range`` with ``text``.

    Attributes:
        range: Replaced span in the document before this edit
        range_length: Number of characters replaced
        text: Replacement text

    """

    range: Range
    range_length: int
    text: str

    @classmethod
    def insert(cls, at: Position, text: str) -> TextEdit:
        """Pure insertion of ``text`` at ``at``."""
        return cls(Range(at, at), 0, text)

    @property
    def length_delta(self) -> int:
        """Net change in document length caused by this edit."""
        return len(self.text) - self.range_length


def range_delta_from_edit(edit: TextEdit) -> RangeDelta:
    """Compute how ``edit`` shifts the positions that follow it.

    Args:
        edit: The edit being applied

    Returns:
        RangeDelta describing the line and column shift at the edit's end.

    """
    start = edit.range.start
    end = edit.range.end
    new_end = position_at_relative(start, edit.text, len(edit.text))
    return RangeDelta(
        start=start,
        end=end,
        lines_delta=new_end.line - end.line,
        end_characters_delta=new_end.character - end.character,
    )


def range_deltas_from_edits(edits: Sequence[TextEdit]) -> list[RangeDelta]:
    """One RangeDelta per edit, index for index."""
    return [range_delta_from_edit(edit) for edit in edits]


def apply_edits(document: str, edits: Sequence[TextEdit]) -> str:
    """Apply an ordered batch of edits and return the updated document.

    Args:
        document: Document text before the batch
        edits: Edits in the order the host reported them

    Returns:
        The document text after every edit has been applied.

    """
    for edit in edits:
        start = offset_at(document, edit.range.start)
        end = offset_at(document, edit.range.end)
        document = document[:start] + edit.text + document[end:]
    return document


__all__ = [
    "TextEdit",
    "apply_edits",
    "range_delta_from_edit",
    "range_deltas_from_edits",
]
