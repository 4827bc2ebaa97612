#!/usr/bin/env python3
"""
MINIGREP ENGINE - Line-Oriented Substring Search
------------------------------------------------
Holds the search engine proper and the runner that sequences a complete
invocation:
1. Parse the argument list into a Config
2. Read the target file into memory as one string
3. Search it line by line
4. Print every matching line, in order

Author: Minigrep Team
Date: 2026-10-19
"""

import logging
from typing import Any, Iterator, List

from minigrep.core.config import parse_config
from minigrep.core.errors import FileReadError
from minigrep.core.models import Match

logger = logging.getLogger("minigrep.engine")


def iter_lines(contents: str) -> Iterator[str]:
    """
    Yields the newline-delimited lines of contents.

    A trailing newline does not produce an empty final line, empty contents
    produce no lines at all, and a carriage return before the newline is
    not part of the line.
    """
    if not contents:
        return
    lines = contents.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


def search_case_sensitive(query: str, contents: str) -> List[Match]:
    results = []
    for line_no, text in enumerate(iter_lines(contents), 1):
        if query in text:
            results.append(Match(line=line_no, text=text))
    return results


def search_case_insensitive(query: str, contents: str) -> List[Match]:
    """Lowercases both sides before comparing; Match keeps the original text."""
    query_lower = query.lower()
    results = []
    for line_no, text in enumerate(iter_lines(contents), 1):
        if query_lower in text.lower():
            results.append(Match(line=line_no, text=text))
    return results


def search(query: str, contents: str, case_sensitive: bool) -> List[Match]:
    """
    Returns every line of contents containing query, in ascending line order.

    An empty query matches every line. No match yields an empty list.
    """
    if case_sensitive:
        return search_case_sensitive(query, contents)
    return search_case_insensitive(query, contents)


def read_file(filename: str) -> str:
    """Loads the whole file as UTF-8 text or raises FileReadError."""
    try:
        # newline="" keeps line endings untouched; iter_lines handles CRLF
        with open(filename, "r", encoding="utf-8", newline="") as f:
            contents = f.read()
    except OSError as e:
        logger.debug(f"Unable to read {filename}: {e}")
        raise FileReadError(filename, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        logger.debug(f"{filename} is not valid UTF-8 text: {e}")
        raise FileReadError(filename, str(e)) from e

    logger.debug(f"Read {len(contents)} characters from {filename}")
    return contents


def run(args: List[str], formatter: Any = None) -> List[Match]:
    """
    Executes one invocation end to end and returns the matches it printed.

    Any MinigrepError propagates to the caller, which decides how to report
    it and which exit status to use. Nothing is printed on failure.

    formatter is any object with a print_matches method; the CLI passes its
    MatchFormatter. Without one, matches go to stdout through print.
    """
    config = parse_config(args)
    contents = read_file(config.filename)
    matches = search(config.query, contents, config.case_sensitive)
    logger.debug(f"Found {len(matches)} matches for {config.query!r} in {config.filename}")

    if formatter is not None:
        formatter.print_matches(matches)
    else:
        for match in matches:
            print(match)
    return matches
