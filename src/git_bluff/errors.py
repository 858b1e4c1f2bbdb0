"""Exception hierarchy for git-bluff.

Every error raised by the scan/extract/report pipeline derives from
:class:`GitBluffError` so the CLI can report it with a single handler.
Messages always name the offending path or input.
"""

from pathlib import Path
from typing import Optional, Union

import yaml


class GitBluffError(Exception):
    """Base class for all git-bluff errors."""


class DiscoveryError(GitBluffError, OSError):
    """Raised when the scan root is missing, not a directory or unreadable."""

    def __init__(self, message: str, path: Union[Path, str]):
        super().__init__(message)
        self.path = Path(path)


class RepositoryError(GitBluffError):
    """Base class for failures tied to a single repository."""

    def __init__(
        self, message: str, repo_path: Union[Path, str], commit_id: Optional[str] = None
    ):
        super().__init__(message)
        self.repo_path = Path(repo_path)
        self.commit_id = commit_id


class RepositoryOpenError(RepositoryError):
    """Raised when a path cannot be opened as a Git repository."""


class CommitReadError(RepositoryError):
    """Raised when a commit object cannot be read."""


class TimestampError(RepositoryError):
    """Raised when a commit timestamp cannot be converted to a UTC instant."""


class ConfigParseError(GitBluffError):
    """Raised when the project-mapping file cannot be loaded."""

    def __init__(self, message: str, config_path: Union[Path, str]):
        super().__init__(message)
        self.config_path = Path(config_path)


def handle_yaml_error(error: yaml.YAMLError, config_path: Path) -> None:
    """Convert a PyYAML error into a ConfigParseError with location details.

    Raises:
        ConfigParseError: Always.
    """
    location = ""
    mark = getattr(error, "problem_mark", None)
    if mark is not None:
        location = f" (line {mark.line + 1}, column {mark.column + 1})"
    problem = getattr(error, "problem", None) or str(error)
    raise ConfigParseError(
        f"Invalid YAML in configuration file {config_path}{location}: {problem}",
        config_path,
    ) from error
