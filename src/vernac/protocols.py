"""Protocols for vernac.

Defines the contract for computed state attached to a sentence by an
external evaluator.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ComputedState(Protocol):
    """Handle to a result computed from a sentence by an external evaluator.

    The sentence never creates or replaces state; it only holds the handle
    and calls mark_invalid when an edit may have changed its meaning.  A
    state that needs to know which sentence it belongs to should keep the
    sentence's ``sentence_id``, not a reference to the sentence.

    """

    def mark_invalid(self) -> None:
        """Mark this state stale; called synchronously, at most once per
        invalidating reconciliation."""
        ...
