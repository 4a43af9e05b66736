"""ContextVar-based reconciliation configuration for vernac.

Provides context-local configuration using Python's ContextVars (PEP 567).
A document owner sets the policy once; every sentence reconciled in that
context reads it.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from vernac.config import ReconcileConfig, reconcile_config_context

    with reconcile_config_context(ReconcileConfig(invalidate_on_offset_miss=False)):
        sentence.apply_text_changes(edits, deltas, text)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ReconcileConfig:
    """Immutable reconciliation policy.

    Attributes:
        invalidate_on_offset_miss: Invalidate when an edit nested in a
            sentence cannot be located in the sentence text. When False the
            edit is skipped instead.
        comments_are_passive: Treat comment-only changes as passive, keeping
            computed state alive.
        check_end_boundary: Re-lex the sentence with one character of
            lookahead when an edit touches its end.

    """

    invalidate_on_offset_miss: bool = True
    comments_are_passive: bool = True
    check_end_boundary: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ReconcileConfig":
        """Create ReconcileConfig from dictionary.

        Only includes keys that are valid ReconcileConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ReconcileConfig.from_dict({
            ...     "comments_are_passive": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.comments_are_passive
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ReconcileConfig = ReconcileConfig()

_reconcile_config: ContextVar[ReconcileConfig] = ContextVar(
    "reconcile_config",
    default=_DEFAULT_CONFIG,
)


def get_reconcile_config() -> ReconcileConfig:
    """Get the active ReconcileConfig for this context."""
    return _reconcile_config.get()


def set_reconcile_config(config: ReconcileConfig) -> None:
    """Set reconciliation configuration for the current context."""
    _reconcile_config.set(config)


def reset_reconcile_config() -> None:
    """Reset to the default configuration."""
    _reconcile_config.set(_DEFAULT_CONFIG)


@contextmanager
def reconcile_config_context(config: ReconcileConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: ReconcileConfig to use within the context.

    """
    previous = _reconcile_config.get()
    _reconcile_config.set(config)
    try:
        yield
    finally:
        _reconcile_config.set(previous)


__all__ = [
    "ReconcileConfig",
    "get_reconcile_config",
    "set_reconcile_config",
    "reset_reconcile_config",
    "reconcile_config_context",
]
