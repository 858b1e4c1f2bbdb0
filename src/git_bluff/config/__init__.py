"""Project-mapping configuration for git-bluff."""

from .loader import ConfigLoader
from .schema import Project, ProjectMapping, RepositoryEntry, resolve_group_key

__all__ = [
    "ConfigLoader",
    "Project",
    "ProjectMapping",
    "RepositoryEntry",
    "resolve_group_key",
]
