"""Tests for vernac.edits — edit records, delta computation and application."""

from hypothesis import given, settings
from hypothesis import strategies as st

from vernac.edits import TextEdit, apply_edits, range_delta_from_edit, range_deltas_from_edits
from vernac.position import (
    Position,
    Range,
    RangeDelta,
    offset_at,
    position_at,
    position_range_delta_translate,
)


class TestTextEdit:
    def test_insert(self) -> None:
        edit = TextEdit.insert(Position(0, 3), "abc")
        assert edit.range == Range.create(0, 3, 0, 3)
        assert edit.range_length == 0
        assert edit.length_delta == 3

    def test_length_delta_for_deletion(self) -> None:
        edit = TextEdit(Range.create(0, 0, 0, 4), 4, "")
        assert edit.length_delta == -4


class TestRangeDeltaFromEdit:
    def test_single_line_insertion(self) -> None:
        delta = range_delta_from_edit(TextEdit.insert(Position(0, 0), "abcd"))
        assert delta == RangeDelta(Position(0, 0), Position(0, 0), 0, 4)

    def test_multiline_insertion(self) -> None:
        delta = range_delta_from_edit(TextEdit.insert(Position(0, 2), "x\nyz"))
        assert delta.lines_delta == 1
        assert delta.end_characters_delta == 0

    def test_multiline_deletion(self) -> None:
        delta = range_delta_from_edit(TextEdit(Range.create(0, 2, 1, 3), 5, ""))
        assert delta.lines_delta == -1
        assert delta.end_characters_delta == -1

    def test_one_delta_per_edit(self) -> None:
        edits = [TextEdit.insert(Position(0, 0), "a"), TextEdit.insert(Position(1, 0), "b\n")]
        deltas = range_deltas_from_edits(edits)
        assert len(deltas) == 2
        assert deltas[1].lines_delta == 1


class TestApplyEdits:
    def test_replace(self) -> None:
        doc = "Lemma a.\nQed."
        edit = TextEdit(Range.create(0, 6, 0, 7), 1, "b")
        assert apply_edits(doc, [edit]) == "Lemma b.\nQed."

    def test_edits_apply_in_sequence(self) -> None:
        doc = "abc"
        edits = [
            TextEdit.insert(Position(0, 0), "xy"),
            # Expressed against "xyabc"
            TextEdit(Range.create(0, 4, 0, 5), 1, "C"),
        ]
        assert apply_edits(doc, edits) == "xyabC"

    def test_empty_batch(self) -> None:
        assert apply_edits("Qed.", []) == "Qed."


class TestDeltaAgreesWithApply:
    """Translating a position with the delta lands on the same character."""

    @given(
        st.text(alphabet="ab.\n", min_size=1, max_size=40),
        st.text(alphabet="xy\n", max_size=10),
        st.data(),
    )
    @settings(max_examples=200)
    def test_position_after_edit(self, doc: str, insert: str, data: st.DataObject) -> None:
        start = data.draw(st.integers(min_value=0, max_value=len(doc)))
        end = data.draw(st.integers(min_value=start, max_value=len(doc)))
        after = data.draw(st.integers(min_value=end, max_value=len(doc)))

        edit = TextEdit(Range(position_at(doc, start), position_at(doc, end)), end - start, insert)
        new_doc = apply_edits(doc, [edit])
        moved = position_range_delta_translate(position_at(doc, after), range_delta_from_edit(edit))

        assert offset_at(new_doc, moved) == after + len(insert) - (end - start)
