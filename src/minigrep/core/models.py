#!/usr/bin/env python3
"""
MINIGREP CORE MODELS
--------------------
Defines the fundamental data structures shared by the parser, the search
engine and the CLI. Both models are immutable once constructed.

Author: Minigrep Team
Date: 2026-10-19
"""

from dataclasses import dataclass

USAGE = "Usage:\nminigrep [-i] <QUERY> <FILE>"


@dataclass(frozen=True)
class Config:
    """
    The settings for a single invocation.

    Built once from the raw argument list and discarded after the run.
    """
    query: str                  # The substring being searched for
    filename: str               # Path of the file to search
    case_sensitive: bool = True  # False when the -i flag was given


@dataclass(frozen=True)
class Match:
    """
    A single hit produced by the search engine.

    Equality is structural: two matches are equal when both the line
    number and the text agree.
    """
    line: int   # 1-based line number in the searched contents
    text: str   # The original, unmodified line content

    def __str__(self) -> str:
        return self.text
