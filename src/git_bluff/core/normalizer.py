"""Commit message cleanup for report output.

Each line is cleaned on its own:

1. Anything from a ``git-svn-id:`` trailer onward is cut off.
2. A leading Conventional Commits type (``feat:``, ``fix:`` ...) is removed.
   Reference: https://www.conventionalcommits.org/en/v1.0.0/ and the
   type list recommended by @commitlint/config-conventional.
3. Lines left empty are dropped.
"""

from collections.abc import Iterator
from typing import Optional

SVN_TRAILER_MARKER = "git-svn-id:"

CONVENTIONAL_COMMIT_TYPES = frozenset(
    {
        "feat",
        "fix",
        "build",
        "chore",
        "ci",
        "docs",
        "perf",
        "refactor",
        "style",
        "test",
        "revert",
    }
)


def clean_commit_line(line: str) -> Optional[str]:
    """Clean a single message line, returning None when nothing is left.

    Examples:
        >>> clean_commit_line("feat: add login")
        'add login'
        >>> clean_commit_line("Refactor: cleanup")
        'cleanup'
        >>> clean_commit_line("update readme")
        'update readme'
        >>> clean_commit_line("   ") is None
        True
    """
    content = line.strip()
    if SVN_TRAILER_MARKER in content:
        content = content.split(SVN_TRAILER_MARKER, 1)[0].strip()
    if not content:
        return None

    prefix, sep, rest = content.partition(":")
    if sep and prefix.strip().lower() in CONVENTIONAL_COMMIT_TYPES:
        content = rest.strip()

    return content or None


def normalize_message(message: str) -> Iterator[str]:
    """Yield the cleaned, non-empty lines of a commit message.

    Lines break on line feeds only, with a trailing carriage return removed;
    form feeds and Unicode line separators stay inside their line.
    """
    for line in message.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        cleaned = clean_commit_line(line)
        if cleaned is not None:
            yield cleaned
