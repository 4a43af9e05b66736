"""
vernac — Incremental sentence tracking for live proof scripts

Keeps the sentences of an edited proof script (their text, document range and
offset) in step with a stream of incremental edits, and invalidates the
computed state attached to a sentence whenever an edit could have changed its
meaning.

Quick Start:
    >>> from vernac import Range, Sentence, TextEdit, apply_edits, range_deltas_from_edits
    >>> doc = "Lemma a : True. Qed."
    >>> qed = Sentence(" Qed.", Range.create(0, 15, 0, 20), 15)
    >>> edits = [TextEdit(Range.create(0, 0, 0, 5), 5, "Theorem")]
    >>> qed.apply_text_changes(edits, range_deltas_from_edits(edits), apply_edits(doc, edits))
    True
    >>> qed.get_range()
    Range(start=Position(line=0, character=17), end=Position(line=0, character=22))

"""

from vernac.classify import Containment, classify, touches_end
from vernac.config import (
    ReconcileConfig,
    get_reconcile_config,
    reconcile_config_context,
    reset_reconcile_config,
    set_reconcile_config,
)
from vernac.edits import TextEdit, apply_edits, range_delta_from_edit, range_deltas_from_edits
from vernac.errors import InvalidPositionError, InvalidRangeError, VernacError
from vernac.grammar import is_passive_difference, parse_sentence_length
from vernac.lexer import Lexer, tokenize
from vernac.position import Position, Range, RangeDelta
from vernac.protocols import ComputedState
from vernac.sentence import Sentence
from vernac.tokens import Token, TokenType

__version__ = "0.1.0"

__all__ = [
    "ComputedState",
    "Containment",
    "InvalidPositionError",
    "InvalidRangeError",
    "Lexer",
    "Position",
    "Range",
    "RangeDelta",
    "ReconcileConfig",
    "Sentence",
    "TextEdit",
    "Token",
    "TokenType",
    "VernacError",
    "__version__",
    "apply_edits",
    "classify",
    "get_reconcile_config",
    "is_passive_difference",
    "parse_sentence_length",
    "range_delta_from_edit",
    "range_deltas_from_edits",
    "reconcile_config_context",
    "reset_reconcile_config",
    "set_reconcile_config",
    "tokenize",
    "touches_end",
]
