"""Plain-text activity report.

Two layouts are produced:

* Without a project mapping, commits are listed under a
  ``Repository Path:`` header per repository, in scan order.
* With a project mapping, commits are bucketed by
  (project code, project name, alias) and buckets are rendered in sorted
  key order, so the same commits always give byte-identical output no
  matter the order they were collected in. Lines are numbered per alias.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from ..config.schema import ProjectMapping, resolve_group_key
from ..core.normalizer import normalize_message
from ..models import CommitRecord, GroupKey

logger = logging.getLogger(__name__)

PROJECT_SEPARATOR = "=" * 71


@dataclass(frozen=True)
class Report:
    """Rendered report plus the totals it was built from."""

    summary: str
    total_commits: int = 0
    total_groups: int = 0


def generate_report(commits: Iterable[CommitRecord]) -> Report:
    """Render commits grouped by repository path in first-seen order."""
    grouped: dict[str, list[CommitRecord]] = {}
    total = 0
    for commit in commits:
        grouped.setdefault(commit.path, []).append(commit)
        total += 1

    lines: list[str] = []
    for path, repo_commits in grouped.items():
        lines.append("")
        lines.append(f"Repository Path: {path}")
        for commit in repo_commits:
            lines.extend(normalize_message(commit.message))

    summary = "\n".join(lines) + "\n" if lines else ""
    return Report(summary=summary, total_commits=total, total_groups=len(grouped))


def group_commits(
    commits: Iterable[CommitRecord], mapping: ProjectMapping
) -> dict[GroupKey, list[CommitRecord]]:
    """Bucket commits by group key, keeping each bucket in arrival order."""
    grouped: dict[GroupKey, list[CommitRecord]] = defaultdict(list)
    for commit in commits:
        grouped[resolve_group_key(commit.path, mapping)].append(commit)
    return grouped


def generate_report_with_config(
    commits: Iterable[CommitRecord], mapping: ProjectMapping, verbose: bool = False
) -> Report:
    """Render commits grouped by project and alias.

    Args:
        commits: Collected commits, in any order across repositories
        mapping: Project mapping used to resolve each commit's group
        verbose: Append the repository path to each alias header

    Returns:
        The rendered report
    """
    commits = list(commits)
    grouped = group_commits(commits, mapping)

    output: list[str] = []
    current_project = None
    for key in sorted(grouped):
        # Stable sort: repositories sharing an alias come out in path order while
        # each repository keeps its oldest-first extraction order.
        commit_list = sorted(grouped[key], key=lambda c: c.path)

        if key.project_code != current_project:
            if current_project is not None:
                output.append(PROJECT_SEPARATOR + "\n")
            output.append(f"\n{key.project_name} {key.project_code}\n\n")
            current_project = key.project_code
        else:
            output.append("\n")

        if verbose:
            output.append(f"Repository: {key.alias} ({commit_list[0].path})\n")
        else:
            output.append(f"{key.alias}\n")

        line_num = 0
        for commit in commit_list:
            for line in normalize_message(commit.message):
                line_num += 1
                output.append(f"{line_num}. {line}\n")

    logger.debug(f"Rendered {len(commits)} commits into {len(grouped)} groups")
    return Report(summary="".join(output), total_commits=len(commits), total_groups=len(grouped))

