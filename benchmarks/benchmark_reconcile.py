"""Benchmark sentence reconciliation.

Measures the cost of shifting a sentence past an edit and of the
whitespace-only path that re-lexes the sentence text.

Run with:
    pytest benchmarks/benchmark_reconcile.py -v --benchmark-only
"""

try:
    import pytest

    from vernac import Sentence, TextEdit, apply_edits, range_deltas_from_edits
    from vernac.position import Position, Range

    @pytest.mark.benchmark(group="reconcile")
    def test_benchmark_shift_past_edit(benchmark, large_script, last_sentence):
        """A one-character edit near the top of a large script."""
        edits = [TextEdit.insert(Position(0, 0), " ")]
        deltas = range_deltas_from_edits(edits)
        new_script = apply_edits(large_script, edits)

        def reconcile():
            sentence = Sentence(
                last_sentence.get_text(),
                last_sentence.get_range(),
                last_sentence.get_document_offset(),
            )
            sentence.apply_text_changes(edits, deltas, new_script)

        benchmark(reconcile)

    @pytest.mark.benchmark(group="reconcile")
    def test_benchmark_passive_interior_edit(benchmark):
        """Whitespace edit inside a long sentence (re-lex on every call)."""
        text = "Lemma big : " + " /\\ ".join(f"P{i}" for i in range(200)) + "."
        edits = [TextEdit(Range.create(0, 5, 0, 6), 1, "  ")]
        deltas = range_deltas_from_edits(edits)
        new_text = apply_edits(text, edits)

        def reconcile():
            sentence = Sentence(text, Range.create(0, 0, 0, len(text)), 0)
            sentence.apply_text_changes(edits, deltas, new_text)

        benchmark(reconcile)

except ImportError:
    pass  # pytest not available
