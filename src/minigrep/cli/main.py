#!/usr/bin/env python3
"""
MINIGREP CLI
------------
Entry point for `minigrep [-i] <QUERY> <FILE>`.

Translates the process argument list into an engine run and the outcome
into an exit status: 0 on success (even with zero matches), 1 on any error.

Author: Minigrep Team
Date: 2026-10-19
"""

import logging
import sys
from typing import List, Optional

from minigrep.cli.formatter import MatchFormatter
from minigrep.core.engine import run
from minigrep.core.errors import MinigrepError

logger = logging.getLogger("minigrep.cli")


class MinigrepCLI:
    """
    CLI wrapper around the engine runner.
    Owns the formatter and maps MinigrepError to a printed message.
    """

    def __init__(self, argv: Optional[List[str]] = None,
                 formatter: Optional[MatchFormatter] = None):
        self.argv = list(sys.argv if argv is None else argv)
        self.formatter = formatter or MatchFormatter()

    def run(self) -> int:
        """Runs one search and returns the process exit code."""
        try:
            run(self.argv, formatter=self.formatter)
        except MinigrepError as e:
            logger.debug(f"Run failed: {type(e).__name__}")
            self.formatter.print_error(e)
            return 1
        return 0


def main(argv: Optional[List[str]] = None):
    """Application entry point with interrupt handling."""
    logging.basicConfig(level=logging.WARNING)
    formatter = MatchFormatter()
    try:
        code = MinigrepCLI(argv, formatter=formatter).run()
    except KeyboardInterrupt:
        formatter.print_error(KeyboardInterrupt("Terminated by user."))
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
