"""Heuristic extraction of a source location from a line of test output."""

from __future__ import annotations

import re

from .models import Location, Position, Range

# Same grammar and range as Go's strconv.Atoi: optional sign, ASCII digits, int64.
_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN, _INT_MAX = -(2**63), 2**63 - 1


def parse_location(line: str) -> Location | None:
    """Recover a location from a `<path>:<line>:<rest>` line.

    This is a heuristic rather than a parser: the stripped line is split on
    `:` into at most three fields, and the second one must be an integer.
    Only `range.start.line` is populated.

    >>> str(parse_location("    foo_test.go:12: want 1, got 2"))
    'path:"foo_test.go" start: line:12 end:'
    >>> parse_location("--- FAIL: TestFoo (0.00s)") is None
    True
    """
    parts = line.strip().split(":", 2)
    if len(parts) < 3:
        return None
    if not _INT_RE.fullmatch(parts[1]):
        return None
    lineno = int(parts[1])
    if not _INT_MIN <= lineno <= _INT_MAX:
        return None
    return Location(path=parts[0], range=Range(start=Position(line=lineno)))
