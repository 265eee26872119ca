"""Display-level cap on the number of changed lines in a unified diff."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Sequence

from sameaspack.diff.models import EditOp, Hunk, is_change

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TruncationResult:
    hunks: tuple[Hunk, ...]
    truncated: bool
    total_changed_lines: int


def truncate_hunks(hunks: Sequence[Hunk], *, max_changed_lines: int | None) -> TruncationResult:
    """Keep hunks until ``max_changed_lines`` additions/deletions have been shown.

    Context lines do not count toward the budget. The hunk where the budget runs
    out is cut right before the first change past it; its header counts follow
    from the ops it keeps.
    """
    total = sum(hunk.changed_line_count for hunk in hunks)
    if max_changed_lines is None or total <= max_changed_lines:
        return TruncationResult(hunks=tuple(hunks), truncated=False, total_changed_lines=total)

    kept: list[Hunk] = []
    shown = 0
    for hunk in hunks:
        ops: list[EditOp] = []
        for op in hunk.ops:
            if is_change(op):
                if shown >= max_changed_lines:
                    break
                shown += 1
            ops.append(op)
        if ops:
            kept.append(Hunk(ops=tuple(ops)))
        if shown >= max_changed_lines:
            break

    logger.debug(
        "diff truncated: showing %d of %d changed lines in %d hunk(s)",
        shown,
        total,
        len(kept),
    )
    return TruncationResult(hunks=tuple(kept), truncated=True, total_changed_lines=total)


def truncation_notice(*, max_changed_lines: int, expected_lines: int, actual_lines: int) -> list[str]:
    return [
        "",
        f"Diff truncated: more than {max_changed_lines} lines changed",
        "",
        f"Expected: {expected_lines} lines",
        f"Actual: {actual_lines} lines",
        "",
        "The differences are too extensive to show in unified diff format.",
        "Consider comparing smaller sections or reviewing the strings directly.",
    ]
