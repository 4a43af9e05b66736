"""Proof-script lexer.

Splits source text into whitespace, comments, strings, words, braces and
sentence terminators.  Never raises: unclosed comments and strings become
UNTERMINATED tokens.
"""

from vernac.lexer.core import Lexer, tokenize
from vernac.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode", "tokenize"]
