"""Stable public API surface for SameAsKit.

This module is the supported import path for library users.
"""

from __future__ import annotations

from pathlib import Path

from sameaspack import __version__
from sameaspack.diff import (
    AssertionResult,
    DiffOptions,
    MalformedExpectedJSONError,
    MismatchError,
    MissingActualError,
    UnifiedDiff,
    assert_same_as,
    assert_same_as_json,
    compare_json,
    compare_texts,
    compare_texts_as_unified_diff,
    diff_texts,
    generate_unified_diff,
)
from sameaspack.snapshot import (
    SnapshotWorkflowResult,
    assert_snapshot,
    update_snapshot,
)

__all__ = [
    "__version__",
    "DiffOptions",
    "UnifiedDiff",
    "AssertionResult",
    "SnapshotWorkflowResult",
    "MismatchError",
    "MissingActualError",
    "MalformedExpectedJSONError",
    "same_as",
    "same_as_json",
    "unified_diff",
    "diff",
    "compare",
    "generate_unified_diff",
    "snapshot_assert",
]


def same_as(actual: str | None, expected: str, *, options: DiffOptions | None = None) -> None:
    """Assert ``actual`` equals ``expected``; raise ``MismatchError`` with a unified diff."""
    assert_same_as(actual, expected, options=options)


def same_as_json(actual: str | None, expected: str, *, options: DiffOptions | None = None) -> None:
    """Assert a JSON document matches ``expected`` after prettifying ``actual``.

    Malformed ``expected`` raises ``MalformedExpectedJSONError``; malformed
    ``actual`` raises ``MismatchError``.
    """
    assert_same_as_json(actual, expected, options=options)


def unified_diff(
    expected: str,
    actual: str,
    *,
    context: int = 3,
    max_changed_lines: int | None = 100,
    expected_label: str = "expected",
    actual_label: str = "actual",
) -> str:
    """Return the unified diff of two texts, or ``""`` when they are identical."""
    options = DiffOptions(
        context_lines=context,
        max_changed_lines=max_changed_lines,
        expected_label=expected_label,
        actual_label=actual_label,
    )
    return compare_texts_as_unified_diff(expected, actual, options=options)


def diff(expected: str, actual: str, *, options: DiffOptions | None = None) -> UnifiedDiff:
    """Return the structured diff of two texts."""
    return diff_texts(expected, actual, options=options)


def compare(
    expected: str,
    actual: str | None,
    *,
    as_json: bool = False,
    options: DiffOptions | None = None,
) -> AssertionResult:
    """Compare without raising; inspect ``passed`` and ``message`` on the result."""
    if as_json:
        return compare_json(expected, actual, options=options)
    return compare_texts(expected, actual, options=options)


def snapshot_assert(
    name: str,
    candidate: str | Path,
    *,
    snapshots_dir: str | Path = "snapshots",
    update: bool = False,
    options: DiffOptions | None = None,
) -> SnapshotWorkflowResult:
    """Assert (or update with ``update=True``) a text snapshot from a candidate file."""
    if update:
        return update_snapshot(
            snapshot_name=name,
            candidate_path=candidate,
            snapshots_dir=snapshots_dir,
        )
    return assert_snapshot(
        snapshot_name=name,
        candidate_path=candidate,
        snapshots_dir=snapshots_dir,
        options=options,
    )
