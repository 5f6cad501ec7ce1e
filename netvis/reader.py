"""Reading edge lists: one ``first second`` pair of node numbers per line."""

from __future__ import annotations

import os
from collections.abc import Iterable

__all__ = ["LinkFormatError", "parse_links", "read_links"]


class LinkFormatError(ValueError):
    """A line of an edge list could not be read as two node numbers."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        super().__init__(f"line {line_number}: {reason}: {line!r}")
        self.line_number = line_number
        self.line = line


def parse_links(lines: Iterable[str]) -> list[tuple[int, int]]:
    """Parse edge-list lines into ``(first, second)`` pairs.

    Fields are separated by whitespace; fields after the second are ignored
    and blank lines are skipped.
    """
    links: list[tuple[int, int]] = []
    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        fields = line.split()
        if not fields:
            continue
        if len(fields) < 2:
            raise LinkFormatError(number, line, "expected two node numbers")
        try:
            first, second = int(fields[0]), int(fields[1])
        except ValueError:
            raise LinkFormatError(number, line, "node numbers must be integers") from None
        links.append((first, second))
    return links


def read_links(path: str | os.PathLike[str]) -> list[tuple[int, int]]:
    """Read an edge-list file into ``(first, second)`` pairs."""
    with open(path, encoding="utf-8") as handle:
        return parse_links(handle)