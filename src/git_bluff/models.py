"""Value types shared by the scan, extract and report stages."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import NamedTuple, Optional

UNKNOWN_PROJECT_CODE = "UNKNOWN"
UNKNOWN_PROJECT_NAME = "Unknown"


@dataclass(frozen=True)
class CommitRecord:
    """A single qualifying commit, captured once during extraction."""

    id: str
    author_name: str
    author_email: str
    message: str
    timestamp: datetime  # timezone-aware UTC
    path: str  # canonicalized repository root
    repository: str  # repository directory name


@dataclass(frozen=True)
class DateWindow:
    """Inclusive calendar-date window.

    Either bound may be ``None``; with both unset no date filtering happens.
    """

    start: Optional[date] = None
    end: Optional[date] = None

    def __post_init__(self) -> None:
        if self.start is not None and self.end is not None and self.start > self.end:
            raise ValueError(f"Start date {self.start} is after end date {self.end}")

    @classmethod
    def single_day(cls, day: date) -> DateWindow:
        return cls(start=day, end=day)

    @property
    def is_unbounded(self) -> bool:
        return self.start is None and self.end is None

    def contains(self, day: date) -> bool:
        """Return True if ``day`` falls inside the window (bounds inclusive)."""
        if self.start is not None and day < self.start:
            return False
        if self.end is not None and day > self.end:
            return False
        return True


class GroupKey(NamedTuple):
    """Report bucket key; tuple ordering drives report section order."""

    project_code: str
    project_name: str
    alias: str

    @classmethod
    def unknown(cls, repo_path: str) -> GroupKey:
        """Fallback key for a repository no mapping entry claims."""
        return cls(UNKNOWN_PROJECT_CODE, UNKNOWN_PROJECT_NAME, repo_path)
