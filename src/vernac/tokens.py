"""Token and TokenType definitions for the proof-script lexer.

The lexer produces a flat stream of Token objects covering every character
of the source exactly once.  The sentence grammar consumes that stream to
find sentence boundaries and to compare texts.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category:
    - Document structure (EOF)
    - Trivia that never affects meaning (WHITESPACE, COMMENT)
    - Significant content (WORD, STRING, BRACE, TERMINATOR)
    - Errors (UNTERMINATED)

    """

    # Document structure
    EOF = auto()

    # Trivia
    WHITESPACE = auto()
    COMMENT = auto()  # (* ... *), nesting

    # Significant content
    WORD = auto()  # Any run of ordinary characters: Lemma, Nat.add, ->, 0
    STRING = auto()  # "..." with "" as an escaped quote
    BRACE = auto()  # { or }
    TERMINATOR = auto()  # . followed by whitespace or end of input

    # Errors
    UNTERMINATED = auto()  # Comment or string still open at end of input


TRIVIA = frozenset({TokenType.WHITESPACE, TokenType.COMMENT})


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The raw string value from source
        offset: Start offset in source
        end_offset: End offset in source (exclusive)

    """

    type: TokenType
    value: str
    offset: int
    end_offset: int

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.offset})"

    @property
    def is_trivia(self) -> bool:
        return self.type in TRIVIA
