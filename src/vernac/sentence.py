"""A sentence of a live proof script and its reconciliation against edits.

A Sentence is one atomic command (``Lemma foo : True.``, ``Qed.``, a bullet)
extracted from a document.  It tracks its text, its document range and the
absolute offset of its start, and holds the computed state an external
evaluator attached to it.

When the document changes, the document owner hands every possibly affected
sentence the edit batch.  apply_text_changes either updates the sentence in
place (returning True, state preserved) or invalidates its state (returning
False) so the owner can discard it and re-split that region.

Thread Safety:
    Sentences are mutable and not synchronized.  At most one
    apply_text_changes call may be in flight per sentence.

"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import count
from typing import Any, Literal

from vernac.classify import Containment, classify, touches_end
from vernac.config import get_reconcile_config
from vernac.edits import TextEdit
from vernac.grammar import is_passive_difference, parse_sentence_length
from vernac.position import (
    Position,
    Range,
    RangeDelta,
    offset_at,
    position_at_relative,
    position_is_after,
    position_is_after_or_equal,
    position_is_before_or_equal,
    position_range_delta_translate_end,
    range_contains,
    range_delta_translate,
    range_intersects,
    relative_offset_at_absolute_position,
)
from vernac.protocols import ComputedState
from vernac.utils.logger import get_logger

logger = get_logger(__name__)

_sentence_ids = count(1)


class Sentence:
    """One command-level unit of a proof script.

    Args:
        text: Source text of the sentence
        document_range: Range of ``text`` within the document
        document_offset: Absolute offset of ``document_range.start``
        symbols: Optional immutable metadata, never inspected

    Attributes:
        sentence_id: Process-unique key for the sentence.  Evaluators use it to
            refer back to the sentence without holding a reference to it.

    """

    __slots__ = (
        "sentence_id",
        "_text",
        "_document_range",
        "_document_offset",
        "_symbols",
        "_state",
        "_error_range",
    )

    def __init__(
        self,
        text: str,
        document_range: Range,
        document_offset: int,
        symbols: Any = None,
    ) -> None:
        self.sentence_id = next(_sentence_ids)
        self._text = text
        self._document_range = document_range
        self._document_offset = document_offset
        self._symbols = symbols
        self._state: ComputedState | None = None
        self._error_range: Range | None = None

    def __repr__(self) -> str:
        text = self._text
        if len(text) > 20:
            text = text[:17] + "..."
        return f"Sentence({self.sentence_id}, {text!r}, {self._document_range})"

    def __str__(self) -> str:
        return self._text

    def dispose(self) -> None:
        """Release the reference to the attached state."""
        self._state = None

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def state(self) -> ComputedState | None:
        return self._state

    @state.setter
    def state(self, state: ComputedState | None) -> None:
        self._state = state

    def get_state(self) -> ComputedState | None:
        return self._state

    def set_state(self, state: ComputedState | None) -> None:
        self._state = state

    def get_text(self) -> str:
        return self._text

    def get_range(self) -> Range:
        return self._document_range

    def get_document_offset(self) -> int:
        return self._document_offset

    def get_document_end_offset(self) -> int:
        return self._document_offset + len(self._text)

    def get_symbols(self) -> Any:
        return self._symbols

    def get_error_range(self) -> Range | None:
        """Range of the diagnostic the evaluator reported for this sentence."""
        return self._error_range

    def set_error_range(self, error_range: Range | None) -> None:
        self._error_range = error_range

    # =========================================================================
    # Coordinates
    # =========================================================================

    def position_at(self, local_offset: int) -> Position:
        """Document position of a character offset into this sentence."""
        return position_at_relative(self._document_range.start, self._text, local_offset)

    def offset_at(self, position: Position) -> int:
        """Offset into this sentence of a document position.

        Returns:
            The sentence-relative offset, or -1 if the sentence does not
            contain ``position``.
        """
        return relative_offset_at_absolute_position(self._text, self._document_range.start, position)

    def document_offset_at(self, position: Position) -> int:
        """Absolute document offset of a position inside this sentence.

        Returns:
            The absolute offset, or -1 if the sentence does not contain
            ``position``.
        """
        local = self.offset_at(position)
        if local == -1:
            return -1
        return self._document_offset + local

    def contains(self, position: Position) -> bool:
        return range_contains(self._document_range, position)

    def intersects(self, range_: Range) -> bool:
        return range_intersects(self._document_range, range_)

    def is_before(self, position: Position) -> bool:
        """True if this sentence ends at or before ``position``."""
        return position_is_before_or_equal(self._document_range.end, position)

    def is_before_or_at(self, position: Position) -> bool:
        """True if this sentence appears before or contains ``position``."""
        return position_is_before_or_equal(self._document_range.end, position) or position_is_before_or_equal(
            self._document_range.start, position
        )

    def is_after(self, position: Position) -> bool:
        """True if this sentence starts strictly after ``position``."""
        return position_is_after(self._document_range.start, position)

    def is_after_or_at(self, position: Position) -> bool:
        """True if this sentence appears after or contains ``position``."""
        return position_is_after_or_equal(self._document_range.start, position) or position_is_after(
            self._document_range.end, position
        )

    def compare_position(self, position: Position) -> Literal["before", "after", "contains"]:
        """Where this sentence lies relative to ``position``."""
        if self.is_before(position):
            return "before"
        if self.is_after(position):
            return "after"
        return "contains"

    # =========================================================================
    # Reconciliation
    # =========================================================================

    def _invalidate(self, reason: str) -> bool:
        logger.debug("Invalidating sentence %d at %s: %s", self.sentence_id, self._document_range, reason)
        if self._state is not None:
            self._state.mark_invalid()
        return False

    def apply_text_changes(
        self,
        edits: Sequence[TextEdit],
        deltas: Sequence[RangeDelta],
        updated_document_text: str,
    ) -> bool:
        """Reconcile this sentence with a batch of document edits.

        Args:
            edits: Edits in the order the host reported them
            deltas: ``deltas[i]`` is the RangeDelta of ``edits[i]``
            updated_document_text: Full document text after the batch

        Returns:
            True if the sentence survived (text, range and offset updated,
            state kept); False if it was invalidated.  On False the
            sentence's fields are unchanged and the attached state, if any,
            has been marked invalid once.

        Raises:
            ValueError: If ``edits`` and ``deltas`` differ in length.

        """
        if len(edits) != len(deltas):
            raise ValueError(f"Got {len(edits)} edits but {len(deltas)} deltas")

        config = get_reconcile_config()
        new_text = self._text
        new_range = self._document_range
        new_offset = self._document_offset
        new_error_range = self._error_range
        end_touched = False

        for edit, delta in zip(edits, deltas):
            match classify(new_range, edit.range):
                case Containment.BEFORE:
                    new_offset += edit.length_delta
                    new_range = range_delta_translate(new_range, delta)
                    if new_error_range is not None:
                        new_error_range = range_delta_translate(new_error_range, delta)
                case Containment.AFTER:
                    if touches_end(new_range, edit.range):
                        end_touched = True
                case Containment.CROSSES:
                    return self._invalidate(f"edit {edit.range} crosses the sentence boundary")
                case Containment.CONTAINS:
                    begin = relative_offset_at_absolute_position(new_text, new_range.start, edit.range.start)
                    if begin == -1:
                        if config.invalidate_on_offset_miss:
                            return self._invalidate(f"edit {edit.range} could not be located in the text")
                        logger.debug("Skipping edit %s: not located in sentence %d", edit.range, self.sentence_id)
                        continue
                    new_text = new_text[:begin] + edit.text + new_text[begin + edit.range_length :]
                    new_range = Range(new_range.start, position_range_delta_translate_end(new_range.end, delta))
                    if new_error_range is not None:
                        if position_is_after_or_equal(new_error_range.start, edit.range.end):
                            new_error_range = range_delta_translate(new_error_range, delta)
                        elif range_intersects(new_error_range, edit.range):
                            new_error_range = None

        if end_touched and config.check_end_boundary:
            # Only the next character can extend or cut the terminator
            end_offset = offset_at(updated_document_text, new_range.end)
            lookahead = updated_document_text[end_offset : end_offset + 1]
            if parse_sentence_length(new_text + lookahead) != len(new_text):
                return self._invalidate("sentence end moved")

        if not is_passive_difference(self._text, new_text):
            return self._invalidate("text changed meaning")

        self._text = new_text
        self._document_range = new_range
        self._document_offset = new_offset
        self._error_range = new_error_range
        return True


__all__ = ["Sentence"]
