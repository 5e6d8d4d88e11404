from __future__ import annotations


def chars_equal(a: str, b: str) -> bool:
    """Compare two characters ignoring case."""
    return a == b or a.lower() == b.lower()
