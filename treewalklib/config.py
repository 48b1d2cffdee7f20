"""Configuration system for TreeWalkLib.

This module defines how callers tune a walk, how the printing visitor
renders paths, and how the command line tool sets up logging.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass
class WalkConfig:
    """Configuration for a single walk.

    The defaults reproduce the classic behavior: symbolic links are
    reported but not followed, and the working location is left at the
    parent of the traversal root when the walk returns.

    follow_symlinks=None leaves link handling to the adapter (the default
    local adapter does not follow links). A bool must agree with an
    explicitly supplied adapter.
    """

    follow_symlinks: Optional[bool] = None   # Classify entries through links (stat vs lstat)
    restore_cwd: bool = False                # Return to the starting location on every exit path

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if self.follow_symlinks is not None and not isinstance(self.follow_symlinks, bool):
            errors.append("follow_symlinks must be a bool or None")
        if not isinstance(self.restore_cwd, bool):
            errors.append("restore_cwd must be a bool")
        return errors


@dataclass
class PrintConfig:
    """Path rendering options for the printing visitor."""

    separator: str = "/"    # Appended after every directory name
    escape: str = "\\"      # A separator preceded by this is not a boundary

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if len(self.separator) != 1:
            errors.append("separator must be a single character")
        if len(self.escape) != 1:
            errors.append("escape must be a single character")
        if self.separator == self.escape:
            errors.append("separator and escape must differ")
        return errors


@dataclass(frozen=True)
class LoggingConfig:
    """Logging setup used by the command line tool.

    The library itself only creates module loggers; handlers are the
    application's business.
    """

    level: str = "WARNING"
    fmt: str = "%(levelname)s | %(name)s | %(message)s"
    datefmt: Optional[str] = None


def resolve_level(level: str) -> int:
    """Map a level name to a logging constant (unknown names mean INFO)."""
    return _LEVEL_MAP.get(level.upper(), logging.INFO)


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Calling this more than once replaces the previous handler instead of
    stacking duplicates.

    Returns:
        The configured package logger
    """
    package_logger = logging.getLogger("treewalklib")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.fmt, datefmt=config.datefmt))
    package_logger.addHandler(handler)
    package_logger.setLevel(resolve_level(config.level))
    return package_logger
