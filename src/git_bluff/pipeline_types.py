"""Result dataclasses for the git-bluff pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .errors import RepositoryError
from .models import CommitRecord


@dataclass
class RepositoryFailure:
    """A repository whose extraction failed under the keep-going policy."""

    path: Path
    error: RepositoryError

    def __str__(self) -> str:
        return f"{self.path}: {self.error}"


@dataclass
class CollectResult:
    """Outcome of the collect stage."""

    commits: list[CommitRecord] = field(default_factory=list)
    commits_by_repo: dict[Path, int] = field(default_factory=dict)
    repos_scanned: int = 0
    failures: list[RepositoryFailure] = field(default_factory=list)

    @property
    def total_commits(self) -> int:
        return len(self.commits)

    @property
    def repos_failed(self) -> int:
        return len(self.failures)
