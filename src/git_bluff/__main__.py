"""Allow ``python -m git_bluff``."""

from .cli import main

main()
