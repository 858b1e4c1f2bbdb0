"""Shared CLI utility functions for git-bluff."""

import logging
import sys


def setup_logging(log: str, module_name: str = __name__) -> logging.Logger:
    """Route git-bluff diagnostics to stderr at the requested --log level.

    stdout carries only the report, so diagnostics never mix with it.
    With "none" the package loggers are muted entirely.

    Returns:
        The logger named ``module_name``.
    """
    level_name = log.upper()
    package_logger = logging.getLogger("git_bluff")

    if level_name == "NONE":
        package_logger.setLevel(logging.CRITICAL)
        return logging.getLogger(module_name)

    level = getattr(logging, level_name)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("[%(levelname)s] %(filename)s:%(lineno)d - %(message)s")
    )
    logging.basicConfig(level=level, handlers=[handler], force=True)
    package_logger.setLevel(level)

    logger = logging.getLogger(module_name)
    logger.debug("Diagnostics for %s at %s", module_name, level_name)
    return logger


def split_patterns(values: tuple[str, ...]) -> list[str]:
    """Flatten repeated and comma-separated option values into a list.

    Empty items are dropped, so ``--author ""`` means "no author filter".
    """
    patterns = []
    for value in values:
        patterns.extend(part.strip() for part in value.split(","))
    return [pattern for pattern in patterns if pattern]
