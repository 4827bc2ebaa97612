#!/usr/bin/env python3
"""
MINIGREP CONFIG PARSER
----------------------
Turns the raw argument list (program name included) into a Config.

Two shapes are accepted:
1. prog <QUERY> <FILE>        -> case-sensitive search
2. prog -i <QUERY> <FILE>     -> case-insensitive search

Author: Minigrep Team
Date: 2026-10-19
"""

import logging
from typing import List

from minigrep.core.errors import ArgumentCountError, InvalidOptionError
from minigrep.core.models import Config

logger = logging.getLogger("minigrep.config")

IGNORE_CASE_FLAG = "-i"


def parse_config(args: List[str]) -> Config:
    """
    Validates the argument count and extracts query, filename and case mode.

    Raises ArgumentCountError or InvalidOptionError; never touches the
    filesystem.
    """
    logger.debug(f"Parsing {len(args)} arguments: {args!r}")

    if len(args) < 3:
        raise ArgumentCountError("Not enough arguments")
    if len(args) > 4:
        raise ArgumentCountError("Too many arguments")

    if len(args) == 3:
        return Config(query=args[1], filename=args[2], case_sensitive=True)

    # A literal "-i" query in this position is always read as the flag.
    if args[1] != IGNORE_CASE_FLAG:
        raise InvalidOptionError(args[1])
    return Config(query=args[2], filename=args[3], case_sensitive=False)
