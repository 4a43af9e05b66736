"""Lexer operating modes and character constants."""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.

    The lexer switches between modes based on context:
    - CODE: Between comments and strings, scanning ordinary tokens
    - COMMENT: At the opening ``(*`` of a (possibly nested) comment
    - STRING: At the opening quote of a string literal

    """

    CODE = auto()
    COMMENT = auto()
    STRING = auto()


COMMENT_OPEN = "(*"
COMMENT_CLOSE = "*)"
QUOTE = '"'
BRACES = frozenset("{}")
TERMINATOR_CHAR = "."
