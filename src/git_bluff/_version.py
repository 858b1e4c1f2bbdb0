"""Version information for git-bluff."""

__version__ = "0.2.1"
