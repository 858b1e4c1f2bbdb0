"""Commit extraction from a single Git repository."""

import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import git
from git import Repo, SymbolicReference

from ..errors import CommitReadError, RepositoryOpenError, TimestampError
from ..models import CommitRecord, DateWindow
from ..utils.commit_utils import epoch_to_utc, is_merge_commit

logger = logging.getLogger(__name__)

# Errors GitPython raises while reading or parsing commit objects.
_COMMIT_READ_ERRORS = (git.GitCommandError, git.BadName, git.BadObject, ValueError, OSError)


def matches_author(author_name: Optional[str], authors: Sequence[str]) -> bool:
    """Case-insensitive substring match of an author name against patterns.

    An empty pattern list matches every author.
    """
    if not authors:
        return True
    name = (author_name or "").casefold()
    return any(pattern.casefold() in name for pattern in authors)


def get_commits(
    repo_path: Union[Path, str],
    window: Optional[DateWindow] = None,
    authors: Sequence[str] = (),
) -> list[CommitRecord]:
    """Get the commits of a repository that pass the date and author filters.

    WHY: History is walked along the first-parent chain from HEAD, and merge
    commits themselves are skipped. Side-branch work shows up once, through
    the commits that landed on the mainline, and "Merge branch ..." noise
    never reaches the report.

    Args:
        repo_path: Repository root
        window: Inclusive calendar-date window on the authored date (UTC);
            None or an unbounded window disables date filtering
        authors: Author-name substrings (case-insensitive); empty disables
            author filtering

    Returns:
        Matching commits, oldest first

    Raises:
        RepositoryOpenError: If the path is not a readable Git repository
        CommitReadError: If a commit object cannot be read
        TimestampError: If a commit timestamp cannot be converted
    """
    repo_path = Path(repo_path)
    try:
        full_path = repo_path.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise RepositoryOpenError(f"Failed to get full path: {repo_path}", repo_path) from e

    try:
        repo = Repo(full_path)
    except (git.InvalidGitRepositoryError, git.NoSuchPathError) as e:
        raise RepositoryOpenError(f"Failed to open repository: {repo_path}", repo_path) from e

    repo_name = full_path.name
    head_sha = _resolve_head(repo, full_path)
    if head_sha is None:
        logger.debug(f"Repository has no commits yet: {full_path}")
        return []

    filter_dates = window is not None and not window.is_unbounded
    commits: list[CommitRecord] = []
    commit_id: Optional[str] = None

    try:
        for commit in repo.iter_commits("HEAD", first_parent=True, reverse=True):
            commit_id = commit.hexsha
            if is_merge_commit(commit):
                logger.debug(f"Skipping merge commit {commit_id[:8]} in {repo_name}")
                continue

            authored_at = commit.authored_date
            if filter_dates:
                commit_date = _to_utc(authored_at, full_path, commit_id).date()
                if not window.contains(commit_date):
                    continue

            if not matches_author(commit.author.name, authors):
                continue

            commits.append(
                CommitRecord(
                    id=commit_id,
                    author_name=commit.author.name or "Unknown",
                    author_email=commit.author.email or "Unknown",
                    message=commit.message or "",
                    timestamp=_to_utc(authored_at, full_path, commit_id),
                    path=str(full_path),
                    repository=repo_name,
                )
            )
    except _COMMIT_READ_ERRORS as e:
        where = f" at commit {commit_id}" if commit_id else ""
        raise CommitReadError(
            f"Failed to read commit history of {full_path}{where}: {e}", full_path, commit_id
        ) from e

    logger.debug(f"Extracted {len(commits)} commits from {full_path}")
    return commits


def _resolve_head(repo: Repo, repo_path: Path) -> Optional[str]:
    """Return the commit id HEAD points at, or None for an unborn branch.

    A missing ref means the branch has no commits yet. A ref naming an
    object that cannot be read is a damaged repository, not an empty one.
    """
    try:
        head_sha = SymbolicReference.dereference_recursive(repo, "HEAD")
    except ValueError:
        return None

    try:
        repo.rev_parse(head_sha)
    except _COMMIT_READ_ERRORS as e:
        raise CommitReadError(
            f"Failed to read HEAD commit {head_sha} of {repo_path}: {e}", repo_path, head_sha
        ) from e
    return head_sha


def _to_utc(seconds, repo_path: Path, commit_id: str) -> datetime:
    try:
        return epoch_to_utc(seconds)
    except (TypeError, ValueError, OverflowError, OSError) as e:
        raise TimestampError(
            f"Invalid timestamp {seconds!r} on commit {commit_id} in {repo_path}",
            repo_path,
            commit_id,
        ) from e
