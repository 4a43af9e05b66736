"""State-machine lexer for proof-script text with O(n) performance.

Each scan step starts at the current position, decides the token kind from
at most two characters of lookahead, then commits the position past the
whole token.  Positions only ever move forward.

No regex in the hot path.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from vernac.lexer.modes import (
    BRACES,
    COMMENT_CLOSE,
    COMMENT_OPEN,
    QUOTE,
    TERMINATOR_CHAR,
    LexerMode,
)
from vernac.tokens import Token, TokenType


class Lexer:
    """State-machine lexer for proof scripts.

    Usage:
            >>> lexer = Lexer("Lemma a. (* c *)")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(WORD, 'Lemma', 0)
        Token(WHITESPACE, ' ', 5)
        Token(WORD, 'a', 6)
        Token(TERMINATOR, '.', 7)
        Token(WHITESPACE, ' ', 8)
        Token(COMMENT, '(* c *)', 9)
        Token(EOF, '', 16)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_mode",
    )

    def __init__(self, source: str) -> None:
        """Initialize lexer with source text.

        Args:
            source: Proof-script source text
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._mode = LexerMode.CODE

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time, ending with a single EOF

        Complexity: O(n) where n = len(source)
        """
        source_len = self._source_len
        while self._pos < source_len:
            yield from self._dispatch_mode()
        yield Token(TokenType.EOF, "", self._pos, self._pos)

    def _dispatch_mode(self) -> Iterator[Token]:
        """Dispatch to the scanner for the current mode."""
        if self._mode == LexerMode.CODE:
            yield from self._scan_code()
        elif self._mode == LexerMode.COMMENT:
            yield from self._scan_comment()
        elif self._mode == LexerMode.STRING:
            yield from self._scan_string()

    # =========================================================================
    # Scanners
    # =========================================================================

    def _scan_code(self) -> Iterator[Token]:
        """Scan one token in CODE mode, or switch mode."""
        source = self._source
        pos = self._pos
        char = source[pos]

        if char.isspace():
            end = pos + 1
            while end < self._source_len and source[end].isspace():
                end += 1
            yield self._commit(TokenType.WHITESPACE, end)
            return

        if source.startswith(COMMENT_OPEN, pos):
            self._mode = LexerMode.COMMENT
            return

        if char == QUOTE:
            self._mode = LexerMode.STRING
            return

        if char in BRACES:
            yield self._commit(TokenType.BRACE, pos + 1)
            return

        if self._is_terminator_at(pos):
            yield self._commit(TokenType.TERMINATOR, pos + 1)
            return

        end = pos + 1
        while end < self._source_len and not self._ends_word_at(end):
            end += 1
        yield self._commit(TokenType.WORD, end)

    def _scan_comment(self) -> Iterator[Token]:
        """Scan a nested comment starting at ``(*``.

        Strings inside comments are skipped as a unit, so ``"*)"`` does not
        close the comment.
        """
        source = self._source
        depth = 0
        index = self._pos
        self._mode = LexerMode.CODE

        while index < self._source_len:
            if source.startswith(COMMENT_OPEN, index):
                depth += 1
                index += 2
            elif source.startswith(COMMENT_CLOSE, index):
                depth -= 1
                index += 2
                if depth == 0:
                    yield self._commit(TokenType.COMMENT, index)
                    return
            elif source[index] == QUOTE:
                index = self._find_string_end(index)
                if index == -1:
                    break
            else:
                index += 1

        yield self._commit(TokenType.UNTERMINATED, self._source_len)

    def _scan_string(self) -> Iterator[Token]:
        """Scan a string literal starting at its opening quote."""
        self._mode = LexerMode.CODE
        end = self._find_string_end(self._pos)
        if end == -1:
            yield self._commit(TokenType.UNTERMINATED, self._source_len)
            return
        yield self._commit(TokenType.STRING, end)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _find_string_end(self, quote_pos: int) -> int:
        """Offset just past the quote closing the string opened at quote_pos.

        Returns:
            End offset, or -1 if the string is not closed.
        """
        source = self._source
        index = quote_pos + 1
        while True:
            close = source.find(QUOTE, index)
            if close == -1:
                return -1
            # "" is an escaped quote
            if close + 1 < self._source_len and source[close + 1] == QUOTE:
                index = close + 2
                continue
            return close + 1

    def _is_terminator_at(self, pos: int) -> bool:
        """A period followed by whitespace or end of input ends a sentence."""
        if self._source[pos] != TERMINATOR_CHAR:
            return False
        following = pos + 1
        return following >= self._source_len or self._source[following].isspace()

    def _ends_word_at(self, pos: int) -> bool:
        char = self._source[pos]
        return (
            char.isspace()
            or char == QUOTE
            or char in BRACES
            or self._source.startswith(COMMENT_OPEN, pos)
            or self._is_terminator_at(pos)
        )

    def _commit(self, token_type: TokenType, end: int) -> Token:
        """Create a token for source[pos:end] and advance past it."""
        start = self._pos
        self._pos = end
        return Token(token_type, self._source[start:end], start, end)


def tokenize(source: str) -> list[Token]:
    """Tokenize ``source`` into a list ending with EOF."""
    return list(Lexer(source).tokenize())
