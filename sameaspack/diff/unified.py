"""Unified diff pipeline: split, edit script, hunks, truncation."""

from __future__ import annotations

from typing import Sequence

from sameaspack.core.lines import LineSequence, split_lines
from sameaspack.diff.engine import compute_edit_script
from sameaspack.diff.formatting import render_diff_lines, render_unified_diff
from sameaspack.diff.hunks import build_hunks
from sameaspack.diff.models import UnifiedDiff
from sameaspack.diff.options import DiffOptions
from sameaspack.diff.truncation import truncate_hunks


def diff_sequences(
    expected: LineSequence,
    actual: LineSequence,
    *,
    options: DiffOptions | None = None,
) -> UnifiedDiff:
    """Diff two line sequences; ``expected`` supplies ``-`` lines, ``actual`` ``+`` lines."""
    resolved = options if options is not None else DiffOptions()
    script = compute_edit_script(
        expected,
        actual,
        max_edit_distance=resolved.max_edit_distance,
    )
    hunks = build_hunks(script.ops, context=resolved.context_lines)
    truncation = truncate_hunks(hunks, max_changed_lines=resolved.max_changed_lines)

    return UnifiedDiff(
        expected=expected,
        actual=actual,
        hunks=truncation.hunks,
        options=resolved,
        total_changed_lines=truncation.total_changed_lines,
        truncated=truncation.truncated,
        cutoff_reached=script.cutoff_reached,
    )


def diff_texts(
    expected: str,
    actual: str,
    *,
    options: DiffOptions | None = None,
) -> UnifiedDiff:
    return diff_sequences(split_lines(expected), split_lines(actual), options=options)


def compare_texts_as_unified_diff(
    expected: str,
    actual: str,
    *,
    options: DiffOptions | None = None,
) -> str:
    """Return ``""`` for identical texts, else the rendered unified diff."""
    if expected == actual:
        return ""
    return render_unified_diff(diff_texts(expected, actual, options=options))


def generate_unified_diff(
    original_name: str,
    revised_name: str,
    original: Sequence[str],
    revised: Sequence[str],
    *,
    context: int = 0,
) -> list[str]:
    """Minimal line-list formatter.

    Lines are taken as newline-terminated, so no end-of-file markers appear,
    and the output is never truncated. Identical inputs yield the two header
    lines only.
    """
    options = DiffOptions(
        context_lines=context,
        max_changed_lines=None,
        expected_label=original_name,
        actual_label=revised_name,
    )
    diff = diff_sequences(
        LineSequence.from_lines(original),
        LineSequence.from_lines(revised),
        options=options,
    )
    return render_diff_lines(diff)
