"""Myers O(ND) shortest edit script with a bounded edit-distance cutoff."""

from __future__ import annotations

import logging

from sameaspack.core.lines import LineSequence
from sameaspack.diff.models import Delete, EditOp, EditScript, Equal, Insert
from sameaspack.diff.newline import newline_aware_matcher
from sameaspack.diff.options import DEFAULT_MAX_EDIT_DISTANCE

logger = logging.getLogger(__name__)


def compute_edit_script(
    expected: LineSequence,
    actual: LineSequence,
    *,
    max_edit_distance: int = DEFAULT_MAX_EDIT_DISTANCE,
) -> EditScript:
    """Compute the minimal edit script turning ``expected`` into ``actual``.

    Lines match on exact content and on trailing-newline status. The search
    stops once the edit distance exceeds ``max_edit_distance``; the result is
    then a degenerate script (see ``_degenerate_script``) flagged with
    ``cutoff_reached``.
    """
    n = len(expected)
    m = len(actual)
    if n == 0 and m == 0:
        return EditScript(ops=())

    match = newline_aware_matcher(expected, actual)
    limit = min(n + m, max_edit_distance)
    offset = limit + 1
    frontier = [0] * (2 * offset + 1)
    # trace[d] holds the furthest x for diagonals -d..d after step d
    trace: list[list[int]] = []

    for d in range(n + m + 1):
        if d > max_edit_distance:
            logger.debug(
                "edit distance exceeded %d (expected=%d lines, actual=%d lines); "
                "using degenerate script",
                max_edit_distance,
                n,
                m,
            )
            return _degenerate_script(n, m, max_edit_distance)

        for k in range(-d, d + 1, 2):
            index = offset + k
            if k == -d or (k != d and frontier[index - 1] < frontier[index + 1]):
                x = frontier[index + 1]
            else:
                x = frontier[index - 1] + 1
            y = x - k

            while x < n and y < m and match(x, y):
                x += 1
                y += 1

            frontier[index] = x

            if x >= n and y >= m:
                trace.append(frontier[offset - d : offset + d + 1])
                return EditScript(ops=tuple(_backtrack(trace, n, m)))

        trace.append(frontier[offset - d : offset + d + 1])

    # n + m edits always reach the end; the loop returns before exhausting.
    raise RuntimeError("Myers search ended without reaching the end of both sequences")


def _backtrack(trace: list[list[int]], n: int, m: int) -> list[EditOp]:
    ops_reversed: list[EditOp] = []
    x = n
    y = m

    for d in range(len(trace) - 1, 0, -1):
        previous = trace[d - 1]
        base = d - 1
        k = x - y

        if k == -d or (k != d and previous[base + k - 1] < previous[base + k + 1]):
            prev_k = k + 1
        else:
            prev_k = k - 1
        prev_x = previous[base + prev_k]
        prev_y = prev_x - prev_k

        while x > prev_x and y > prev_y:
            ops_reversed.append(Equal(x - 1, y - 1))
            x -= 1
            y -= 1

        if x > prev_x:
            ops_reversed.append(Delete(x - 1))
            x -= 1
        else:
            ops_reversed.append(Insert(y - 1))
            y -= 1

    while x > 0 and y > 0:
        ops_reversed.append(Equal(x - 1, y - 1))
        x -= 1
        y -= 1

    ops_reversed.reverse()
    return ops_reversed


def _degenerate_script(n: int, m: int, ceiling: int) -> EditScript:
    """Delete a prefix of expected and insert a prefix of actual.

    Not a minimal diff: bounded cost on pathological inputs is preferred over
    an exact script that would need unbounded trace memory.
    """
    deletes = min(n, ceiling // 2)
    inserts = min(m, ceiling - deletes)
    ops: list[EditOp] = [Delete(index) for index in range(deletes)]
    ops.extend(Insert(index) for index in range(inserts))
    return EditScript(ops=tuple(ops), cutoff_reached=True)

