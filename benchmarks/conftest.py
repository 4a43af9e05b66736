"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest

from vernac import Sentence
from vernac.position import Position, Range


@pytest.fixture
def large_script() -> str:
    """Generate a proof script of a few hundred lemmas."""
    lemmas = []
    for i in range(300):
        lemmas.append(
            f"Lemma lemma_{i} : forall n : nat, n + {i} = {i} + n.\n"
            "Proof.\n"
            "  intros n. (* commute *)\n"
            "  - apply Nat.add_comm.\n"
            "Qed.\n"
        )
    return "".join(lemmas)


@pytest.fixture
def last_sentence(large_script: str) -> Sentence:
    """The final Qed. of the script, far from any edit near the top."""
    text = "Qed.\n"
    offset = len(large_script) - len(text)
    line = large_script.count("\n", 0, offset)
    return Sentence(text, Range(Position(line, 0), Position(line + 1, 0)), offset)
