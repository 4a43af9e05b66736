"""Lexical oracles for sentence boundaries and passive differences.

Both functions work on the token stream from vernac.lexer:

- parse_sentence_length finds where the first sentence of a text ends.
- is_passive_difference decides whether two versions of a sentence can
  differ in meaning.

Sentence rules:
    A sentence is leading trivia (whitespace, comments) followed by a body.
    The body ends at a terminator (a period followed by whitespace or end of
    input).  A body that opens with a bullet is complete on its own: a run of
    one repeated ``-``, ``+`` or ``*`` character, or a single ``{`` or ``}``.

Example:
    >>> parse_sentence_length("  Lemma a : True. Proof.")
    17
    >>> parse_sentence_length("- reflexivity.")
    1
    >>> is_passive_difference("Qed.", "Qed. (* done *)")
    True

"""

from __future__ import annotations

from vernac.config import get_reconcile_config
from vernac.lexer import Lexer
from vernac.tokens import TokenType

BULLET_CHARS = frozenset("-+*")


def _bullet_length(word: str) -> int:
    """Length of the run of the word's first character."""
    first = word[0]
    length = 1
    while length < len(word) and word[length] == first:
        length += 1
    return length


def parse_sentence_length(text: str) -> int:
    """Length of the first complete sentence of ``text``.

    Args:
        text: Source text starting at a sentence boundary

    Returns:
        Offset just past the sentence's terminator or bullet, or -1 if
        ``text`` does not start with a complete sentence.

    """
    in_body = False
    for token in Lexer(text).tokenize():
        match token.type:
            case TokenType.WHITESPACE | TokenType.COMMENT:
                continue
            case TokenType.EOF | TokenType.UNTERMINATED:
                return -1
            case TokenType.TERMINATOR:
                return token.end_offset if in_body else -1
            case TokenType.BRACE if not in_body:
                return token.end_offset
            case TokenType.WORD if not in_body and token.value[0] in BULLET_CHARS:
                return token.offset + _bullet_length(token.value)
        in_body = True
    return -1


def _significant_tokens(text: str, *, drop_comments: bool) -> list[tuple[TokenType, str]] | None:
    """Tokens that carry meaning, or None if the text does not lex cleanly."""
    tokens: list[tuple[TokenType, str]] = []
    for token in Lexer(text).tokenize():
        if token.type == TokenType.UNTERMINATED:
            return None
        if token.type == TokenType.WHITESPACE or token.type == TokenType.EOF:
            continue
        if drop_comments and token.type == TokenType.COMMENT:
            continue
        tokens.append((token.type, token.value))
    return tokens


def is_passive_difference(
    old_text: str,
    new_text: str,
    *,
    comments_are_passive: bool | None = None,
) -> bool:
    """True if changing ``old_text`` into ``new_text`` cannot change meaning.

    Args:
        old_text: Sentence text before the edits
        new_text: Sentence text after the edits
        comments_are_passive: Override ReconcileConfig.comments_are_passive

    Returns:
        True when both texts lex to the same significant tokens.

    """
    if old_text == new_text:
        return True
    if comments_are_passive is None:
        comments_are_passive = get_reconcile_config().comments_are_passive

    old_tokens = _significant_tokens(old_text, drop_comments=comments_are_passive)
    if old_tokens is None:
        return False
    new_tokens = _significant_tokens(new_text, drop_comments=comments_are_passive)
    if new_tokens is None:
        return False
    return old_tokens == new_tokens


__all__ = [
    "BULLET_CHARS",
    "is_passive_difference",
    "parse_sentence_length",
]
