"""Utilities for working with Git commit objects."""

from datetime import datetime, timezone

import git


def is_merge_commit(commit: git.Commit) -> bool:
    """True for commits that join two or more lines of history.

    Root commits (no parent) and ordinary commits (one parent) are not
    merges; they are the only commits that make it into a report.
    """
    return get_parent_count(commit) > 1


def get_parent_count(commit: git.Commit) -> int:
    """Get the number of parent commits (0 for a root commit, 2+ for a merge)."""
    return len(commit.parents)


def epoch_to_utc(seconds: int) -> datetime:
    """Convert seconds since the epoch into a timezone-aware UTC datetime.

    Raises:
        TypeError: If ``seconds`` is not a number.
        ValueError, OverflowError, OSError: If the value is outside the range
            supported by the platform.
    """
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
        raise TypeError(f"Expected epoch seconds, got {seconds!r}")
    return datetime.fromtimestamp(seconds, tz=timezone.utc)
