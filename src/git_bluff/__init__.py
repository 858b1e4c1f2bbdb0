"""git-bluff - daily activity reports from local Git repositories."""

from ._version import __version__

__all__ = ["__version__"]
