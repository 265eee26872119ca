"""End-of-file newline reconciliation for line matching.

A last line without a trailing newline and the same text followed by a newline
are different artifacts. Matching lines must therefore agree on content and on
whether a newline follows them, otherwise the pair surfaces as a Delete and an
Insert that the formatter can mark independently.
"""

from __future__ import annotations

from typing import Callable

from sameaspack.core.lines import LineSequence

LineMatcher = Callable[[int, int], bool]


def has_newline_after(sequence: LineSequence, index: int) -> bool:
    return index < len(sequence) - 1 or sequence.ends_with_newline


def newline_aware_matcher(expected: LineSequence, actual: LineSequence) -> LineMatcher:
    """Return ``match(x, y)`` comparing ``expected[x]`` with ``actual[y]``."""
    old_lines = expected.lines
    new_lines = actual.lines
    old_last = len(old_lines) - 1
    new_last = len(new_lines) - 1
    old_terminated = expected.ends_with_newline
    new_terminated = actual.ends_with_newline

    if old_terminated and new_terminated:
        def match(x: int, y: int) -> bool:
            return old_lines[x] == new_lines[y]

        return match

    def match_at_boundary(x: int, y: int) -> bool:
        if old_lines[x] != new_lines[y]:
            return False
        old_newline = x < old_last or old_terminated
        new_newline = y < new_last or new_terminated
        return old_newline == new_newline

    return match_at_boundary
