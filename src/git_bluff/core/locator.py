"""Discovery of Git repositories under a root directory.

WHY: Scanning is depth-bounded and never follows symbolic links, so a
workspace full of checkouts (or a link loop) cannot turn a daily report
into a walk of the whole filesystem. Repositories nested deeper than the
requested depth are intentionally not found.
"""

import logging
import os
from pathlib import Path
from typing import Union

from ..errors import DiscoveryError

logger = logging.getLogger(__name__)


def is_git_repository(path: Path) -> bool:
    """Return True if ``path`` holds a ``.git`` directory with a ``HEAD`` file."""
    git_dir = path / ".git"
    try:
        return git_dir.is_dir() and (git_dir / "HEAD").exists()
    except OSError as e:
        logger.debug(f"Cannot inspect {git_dir}: {e}")
        return False


def find_git_repositories(directory: Union[Path, str], depth: int) -> list[Path]:
    """Find repository roots at most ``depth`` levels below ``directory``.

    ``depth == 0`` checks only ``directory`` itself. Unreadable
    subdirectories are logged and skipped; the scan carries on.

    Args:
        directory: Root of the scan
        depth: Number of directory levels to descend below the root

    Returns:
        Sorted, duplicate-free list of canonical repository paths

    Raises:
        DiscoveryError: If the root does not exist, is not a directory or
            cannot be read.
    """
    if depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")

    root = _resolve_root(Path(directory))
    repos: set[Path] = set()
    pending: list[tuple[Path, int]] = [(root, 0)]

    while pending:
        current, level = pending.pop()
        if is_git_repository(current):
            logger.debug(f"Found repository: {current}")
            repos.add(current)

        if level >= depth:
            continue

        try:
            with os.scandir(current) as entries:
                children = [
                    Path(entry.path)
                    for entry in entries
                    if entry.name != ".git" and entry.is_dir(follow_symlinks=False)
                ]
        except OSError as e:
            logger.warning(f"Skipping unreadable directory {current}: {e}")
            continue

        pending.extend((child, level + 1) for child in children)

    logger.info(f"Found {len(repos)} repositories under {root} (depth {depth})")
    return sorted(repos)


def _resolve_root(directory: Path) -> Path:
    try:
        root = directory.expanduser().resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise DiscoveryError(f"Directory not found: {directory}", directory) from e

    if not root.is_dir():
        raise DiscoveryError(f"Not a directory: {directory}", directory)

    try:
        with os.scandir(root):
            pass
    except OSError as e:
        raise DiscoveryError(f"Cannot read directory {directory}: {e}", directory) from e

    return root
