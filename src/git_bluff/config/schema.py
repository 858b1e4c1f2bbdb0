"""Project-mapping data classes and repository-to-project resolution."""

from dataclasses import dataclass
from typing import Optional

from ..models import GroupKey


@dataclass(frozen=True)
class RepositoryEntry:
    """A repository of a project, matched by a path fragment."""

    alias: str
    repo_path: str

    def matches(self, commit_path: str) -> bool:
        """Bidirectional substring check against a repository path.

        WHY: Fragments may be written as a full absolute path or as a
        suffix such as ``billing/api``; either direction counts as a match.
        """
        return self.repo_path in commit_path or commit_path.rstrip("/") in self.repo_path


@dataclass(frozen=True)
class Project:
    """A project and its repositories, in declaration order."""

    project_name: str
    project_code: str
    repositories: tuple[RepositoryEntry, ...] = ()


@dataclass(frozen=True)
class ProjectMapping:
    """Read-only lookup table loaded from the configuration file."""

    projects: tuple[Project, ...] = ()

    def find_matching_repo(self, commit_path: str) -> Optional[GroupKey]:
        """Find the first matching repository entry for a repository path.

        Projects are searched in declaration order, then their repositories
        in declaration order. The first match wins even if a later entry
        would match more specifically.

        Returns:
            (project_code, project_name, alias) or None if nothing matches
        """
        for project in self.projects:
            for repo in project.repositories:
                if repo.matches(commit_path):
                    return GroupKey(project.project_code, project.project_name, repo.alias)
        return None


def resolve_group_key(commit_path: str, mapping: ProjectMapping) -> GroupKey:
    """Group key for a repository path, falling back to the UNKNOWN group."""
    key = mapping.find_matching_repo(commit_path)
    if key is None:
        return GroupKey.unknown(commit_path)
    return key
