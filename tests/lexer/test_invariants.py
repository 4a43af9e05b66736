"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from vernac.lexer import Lexer
from vernac.tokens import TokenType

script_chars = st.text(alphabet='(*)". {}-+\nab\t', max_size=200)


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_always_ends_with_eof(self, source: str) -> None:
        """Every tokenization must end with exactly one EOF token."""
        tokens = list(Lexer(source).tokenize())

        assert tokens[-1].type == TokenType.EOF
        assert sum(1 for t in tokens if t.type == TokenType.EOF) == 1

    @given(script_chars)
    @settings(max_examples=300)
    def test_tokens_cover_source_exactly(self, source: str) -> None:
        """Token values concatenate back to the source with contiguous offsets."""
        tokens = list(Lexer(source).tokenize())

        assert "".join(t.value for t in tokens) == source
        expected = 0
        for token in tokens:
            assert token.offset == expected
            assert token.end_offset - token.offset == len(token.value)
            expected = token.end_offset

    @given(script_chars)
    @settings(max_examples=200)
    def test_no_empty_tokens_before_eof(self, source: str) -> None:
        tokens = list(Lexer(source).tokenize())
        assert all(t.value for t in tokens[:-1])

    @given(script_chars)
    @settings(max_examples=100)
    def test_unterminated_only_at_end(self, source: str) -> None:
        """An unclosed comment or string swallows the rest of the input."""
        tokens = list(Lexer(source).tokenize())
        for index, token in enumerate(tokens):
            if token.type == TokenType.UNTERMINATED:
                assert index == len(tokens) - 2
                assert token.end_offset == len(source)


class TestDeterminism:
    """Test that tokenization is deterministic."""

    @given(script_chars)
    @settings(max_examples=50)
    def test_repeated_tokenization_identical(self, source: str) -> None:
        first_result = [(t.type, t.value) for t in Lexer(source).tokenize()]
        second_result = [(t.type, t.value) for t in Lexer(source).tokenize()]

        assert first_result == second_result
