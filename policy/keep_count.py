"""Keep-count argument validation."""

from __future__ import annotations


def validate_keep(keep: int) -> int:
    """Return keep unchanged, rejecting non-integers and negative counts."""
    if isinstance(keep, bool) or not isinstance(keep, int):
        raise TypeError(f"keep must be an integer, got {type(keep).__name__}")
    if keep < 0:
        raise ValueError(f"keep must be >= 0, got {keep}")
    return keep
