"""Name filtering against the configured match pattern."""

from typing import Optional, Pattern


def passes_filter(name: str, pattern: Optional[Pattern]) -> bool:
    """Return True if the name should be kept.

    The pattern only needs to match somewhere in the name; callers anchor it
    with ``^``/``$`` themselves when they want a full match.
    """
    if pattern is None:
        return True
    return pattern.search(name) is not None
