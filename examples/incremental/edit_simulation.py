"""Keep sentences in step with typing — only what changed loses its state."""

from vernac import Range, Sentence, TextEdit, apply_edits, range_deltas_from_edits
from vernac.position import Position, position_at, position_at_relative


class ProofState:
    def __init__(self, name: str) -> None:
        self.name = name
        self.valid = True

    def mark_invalid(self) -> None:
        self.valid = False


script = "Lemma a : True.\nProof.\n  exact I.\nQed.\n"
pieces = ["Lemma a : True.", "\nProof.", "\n  exact I.", "\nQed."]

sentences = []
offset = 0
for piece in pieces:
    start = position_at(script, offset)
    sentence = Sentence(piece, Range(start, position_at_relative(start, piece, len(piece))), offset)
    sentence.set_state(ProofState(piece.strip()))
    sentences.append(sentence)
    offset += len(piece)

# The user reindents the tactic and adds a comment after Qed.
edits = [
    TextEdit(Range.create(2, 0, 2, 2), 2, "    "),
    TextEdit.insert(Position(3, 4), " (* done *)"),
]
new_script = apply_edits(script, edits)
deltas = range_deltas_from_edits(edits)

for sentence in sentences:
    kept = sentence.apply_text_changes(edits, deltas, new_script)
    print(f"{sentence.get_state().name:<16} kept={kept} range={sentence.get_range()}")

# Renaming the lemma changes its meaning; only that sentence is invalidated.
rename = [TextEdit(Range.create(0, 6, 0, 7), 1, "b")]
newer_script = apply_edits(new_script, rename)
for sentence in sentences:
    kept = sentence.apply_text_changes(rename, range_deltas_from_edits(rename), newer_script)
    print(f"{sentence.get_state().name:<16} kept={kept} valid={sentence.get_state().valid}")
