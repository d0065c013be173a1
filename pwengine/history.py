"""
History ring: the last few generated passwords, most recent first.
"""

from __future__ import annotations

from typing import Sequence

from .config import HISTORY_SIZE


def record(
    history: Sequence[str],
    password: str,
    limit: int = HISTORY_SIZE,
) -> tuple[str, ...]:
    """
    Return a new history with `password` in front and at most `limit`
    entries. Duplicates are kept; the input sequence is not modified.
    """
    if limit < 1:
        raise ValueError("History limit must be at least 1.")
    return (password, *history[: limit - 1])
