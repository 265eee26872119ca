"""Group an edit script into unified-diff hunks."""

from __future__ import annotations

from typing import Sequence

from sameaspack.diff.models import EditOp, Equal, Hunk
from sameaspack.diff.options import DEFAULT_CONTEXT_LINES


def build_hunks(ops: Sequence[EditOp], *, context: int = DEFAULT_CONTEXT_LINES) -> list[Hunk]:
    """Split ``ops`` into hunks carrying up to ``context`` lines around changes.

    A run of more than ``2 * context`` equal lines between two changes closes
    the hunk; shorter (or exactly ``2 * context``) runs stay inside it in full.
    """
    if context < 0:
        raise ValueError("context must be non-negative")

    hunks: list[Hunk] = []
    total = len(ops)
    index = 0

    while index < total:
        while index < total and isinstance(ops[index], Equal):
            index += 1
        if index >= total:
            break

        start = max(0, index - context)
        last_change = index
        cursor = index
        while cursor < total:
            if not isinstance(ops[cursor], Equal):
                last_change = cursor
                cursor += 1
                continue

            run_start = cursor
            while cursor < total and isinstance(ops[cursor], Equal):
                cursor += 1
            if cursor - run_start > 2 * context:
                break

        end = min(total, last_change + context + 1)
        hunks.append(Hunk(ops=tuple(ops[start:end])))
        index = end

    return hunks
