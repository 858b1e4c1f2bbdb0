"""Utility modules for git-bluff."""

from .commit_utils import epoch_to_utc, get_parent_count, is_merge_commit
from .date_utils import DateOptionError, resolve_date_window

__all__ = [
    "is_merge_commit",
    "get_parent_count",
    "epoch_to_utc",
    "DateOptionError",
    "resolve_date_window",
]
