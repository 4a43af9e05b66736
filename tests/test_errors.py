"""Tests for the vernac exception hierarchy."""

import pytest

from vernac import InvalidPositionError, InvalidRangeError, Position, Range, VernacError
from vernac.utils import get_logger


class TestInvalidRangeError:
    def test_message_names_both_ends(self) -> None:
        err = InvalidRangeError(Position(2, 0), Position(1, 0))
        assert "2:0" in str(err)
        assert "1:0" in str(err)

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Range.create(1, 0, 0, 0)

    def test_carries_positions(self) -> None:
        with pytest.raises(InvalidRangeError) as info:
            Range.create(0, 9, 0, 5)
        assert info.value.start == Position(0, 9)
        assert info.value.end == Position(0, 5)


class TestInvalidPositionError:
    def test_message(self) -> None:
        err = InvalidPositionError(-1, 3)
        assert "-1:3" in str(err)

    def test_hierarchy(self) -> None:
        assert issubclass(InvalidPositionError, VernacError)
        assert issubclass(InvalidRangeError, VernacError)


class TestLogger:
    def test_prefix_added(self) -> None:
        assert get_logger("mymodule").name == "vernac.mymodule"

    def test_prefix_not_doubled(self) -> None:
        assert get_logger("vernac.sentence").name == "vernac.sentence"
        assert get_logger("vernac").name == "vernac"

    def test_invalidation_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        from vernac import Sentence, TextEdit, range_deltas_from_edits

        sentence = Sentence("foo.", Range.create(0, 0, 0, 4), 0)
        edits = [TextEdit(Range.create(0, 0, 0, 3), 3, "bar")]
        with caplog.at_level("DEBUG", logger="vernac.sentence"):
            assert not sentence.apply_text_changes(edits, range_deltas_from_edits(edits), "bar.")
        assert "text changed meaning" in caplog.text
