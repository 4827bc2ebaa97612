# src/minigrep/cli/formatter.py
from typing import Iterable, Optional

from rich.console import Console

from minigrep.core.models import Match

# Matches go to stdout, diagnostics to stderr
console = Console()
error_console = Console(stderr=True)


class MatchFormatter:
    """
    MatchFormatter: the only place minigrep writes to the terminal.
    Matches are printed verbatim, errors are printed in red on stderr.
    """

    def __init__(self, out: Optional[Console] = None, err: Optional[Console] = None):
        self.out = out or console
        self.err = err or error_console

    def print_matches(self, matches: Iterable[Match]):
        """
        Prints the raw text of each match, one per line.
        Bypasses rich rendering, which expands tabs and strips control
        characters, so the output is exactly the source line.
        """
        stream = self.out.file
        for match in matches:
            stream.write(f"{match}\n")
        stream.flush()

    def print_error(self, error: Exception):
        self.err.print(
            str(error),
            style="bold red",
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
