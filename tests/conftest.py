"""Shared pytest fixtures for git-bluff tests."""

import shutil
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest
from git import Actor, Repo

from git_bluff.models import CommitRecord


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    path = Path(tempfile.mkdtemp())
    yield path
    shutil.rmtree(path, ignore_errors=True)


def utc(year, month, day, hour=12):
    return datetime(year, month, day, hour, tzinfo=timezone.utc)


def _write_commit(repo, message, when, author="Alice Smith", email="alice@example.com", parents=None, head=True):
    """Write a commit with fixed author/committer identity and dates."""
    actor = Actor(author, email)
    stamp = f"{int(when.timestamp())} +0000"
    return repo.index.commit(
        message,
        parent_commits=parents,
        head=head,
        author=actor,
        committer=actor,
        author_date=stamp,
        commit_date=stamp,
    )


@pytest.fixture
def git_repo(temp_dir):
    """Factory creating an empty Git repository below the temp directory."""

    def _create(relative="repo"):
        path = temp_dir / relative
        path.mkdir(parents=True, exist_ok=True)
        return Repo.init(path)

    return _create


@pytest.fixture
def make_record():
    """Factory for CommitRecord values used by report tests."""
    counter = {"n": 0}

    def _make(message, path="/work/app", when=None, author="Alice Smith"):
        counter["n"] += 1
        return CommitRecord(
            id=f"{counter['n']:040x}",
            author_name=author,
            author_email="alice@example.com",
            message=message,
            timestamp=when or utc(2024, 3, 1, counter["n"] % 24),
            path=path,
            repository=Path(path).name,
        )

    return _make


@pytest.fixture
def make_commit():
    """Write commits with fixed identity and dates: make_commit(repo, message, when, ...)."""
    return _write_commit
