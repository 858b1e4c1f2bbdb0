"""Collect stage: extract commits from every discovered repository."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from .core.extractor import get_commits
from .errors import RepositoryError
from .models import DateWindow
from .pipeline_types import CollectResult, RepositoryFailure

logger = logging.getLogger(__name__)


def collect_commits(
    repos: Iterable[Path],
    window: DateWindow | None,
    authors: Sequence[str] = (),
    keep_going: bool = False,
    progress_callback: Callable[[Path, int], None] | None = None,
) -> CollectResult:
    """Extract commits from each repository in sorted path order.

    By default the first repository error propagates and aborts the run.
    With ``keep_going`` the failure is recorded on the result and the
    remaining repositories are still processed.

    Args:
        repos: Repository roots, usually from ``find_git_repositories``.
        window: Date window passed to the extractor.
        authors: Author-name patterns passed to the extractor.
        keep_going: Record per-repository failures instead of raising.
        progress_callback: Called with (repository, commit count) after each
            successful extraction.

    Returns:
        A :class:`CollectResult` holding every collected commit.

    Raises:
        RepositoryError: On the first failing repository unless ``keep_going``.
    """
    result = CollectResult()

    for repo_path in sorted(repos):
        result.repos_scanned += 1
        logger.info(f"Processing repository: {repo_path}")
        try:
            commits = get_commits(repo_path, window, authors)
        except RepositoryError as e:
            if not keep_going:
                raise
            logger.warning(f"Skipping repository {repo_path}: {e}")
            result.failures.append(RepositoryFailure(path=repo_path, error=e))
            continue

        result.commits.extend(commits)
        result.commits_by_repo[repo_path] = len(commits)
        if progress_callback:
            progress_callback(repo_path, len(commits))

    logger.info(
        f"Collected {result.total_commits} commits from {result.repos_scanned} repositories "
        f"({result.repos_failed} failed)"
    )
    return result
