"""Unified-diff text rendering for diff results."""

from __future__ import annotations

from sameaspack.diff.models import Delete, Equal, Hunk, Insert, UnifiedDiff
from sameaspack.diff.newline import has_newline_after
from sameaspack.diff.truncation import truncation_notice

NO_NEWLINE_MARKER = "\\ No newline at end of file"


def render_diff_lines(diff: UnifiedDiff) -> list[str]:
    """Render ``diff`` as unified-diff lines without line terminators."""
    lines = [f"--- {diff.expected_label}", f"+++ {diff.actual_label}"]
    for hunk in diff.hunks:
        lines.extend(_render_hunk(hunk, diff))

    if diff.truncated and diff.options.max_changed_lines is not None:
        lines.extend(
            truncation_notice(
                max_changed_lines=diff.options.max_changed_lines,
                expected_lines=len(diff.expected),
                actual_lines=len(diff.actual),
            )
        )
    return lines


def render_unified_diff(diff: UnifiedDiff) -> str:
    """Render ``diff`` as text; every line, the last included, ends with ``\\n``."""
    return "\n".join(render_diff_lines(diff)) + "\n"


def render_diff_summary(diff: UnifiedDiff) -> str:
    summary = diff.summary()
    return (
        f"expected={diff.expected_label} actual={diff.actual_label} "
        f"hunks={summary['hunks']} changed={summary['changed_lines']} "
        f"expected_lines={summary['expected_lines']} actual_lines={summary['actual_lines']} "
        f"truncated={'yes' if diff.truncated else 'no'}"
    )


def _render_hunk(hunk: Hunk, diff: UnifiedDiff) -> list[str]:
    expected = diff.expected
    actual = diff.actual
    lines = [hunk.header()]

    for op in hunk.ops:
        if isinstance(op, Equal):
            lines.append(f" {expected[op.old_index]}")
            if not has_newline_after(expected, op.old_index):
                lines.append(NO_NEWLINE_MARKER)
        elif isinstance(op, Delete):
            lines.append(f"-{expected[op.old_index]}")
            if not has_newline_after(expected, op.old_index):
                lines.append(NO_NEWLINE_MARKER)
        elif isinstance(op, Insert):
            lines.append(f"+{actual[op.new_index]}")
            if not has_newline_after(actual, op.new_index):
                lines.append(NO_NEWLINE_MARKER)

    return lines
