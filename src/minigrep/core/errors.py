#!/usr/bin/env python3
"""
MINIGREP ERRORS
---------------
Every failure in minigrep is fatal to the current invocation. These
exceptions carry a ready-to-print message up to the CLI, which is the only
place they are caught.

Author: Minigrep Team
Date: 2026-10-19
"""

from minigrep.core.models import USAGE


class MinigrepError(Exception):
    """Base class; str(err) is the complete human-readable message."""


class ConfigError(MinigrepError):
    """The argument list could not be turned into a Config."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"{reason}\n{USAGE}")


class ArgumentCountError(ConfigError):
    """Too few or too many arguments were given."""


class InvalidOptionError(ConfigError):
    """Four arguments were given but the first one is not -i."""

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"First argument '{option}' is not a valid option")


class FileReadError(MinigrepError):
    """The target file could not be read as text."""

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f'Error reading "{filename}": {reason}')
