"""Diff subsystem for SameAsKit."""

from sameaspack.diff.assertion import (
    AssertionResult,
    assert_same_as,
    assert_same_as_json,
    compare_json,
    compare_texts,
    validate_expected_json,
)
from sameaspack.diff.engine import compute_edit_script
from sameaspack.diff.exceptions import (
    DiffConfigError,
    MalformedExpectedJSONError,
    MismatchError,
    MissingActualError,
    SameAsError,
)
from sameaspack.diff.formatting import (
    NO_NEWLINE_MARKER,
    render_diff_lines,
    render_diff_summary,
    render_unified_diff,
)
from sameaspack.diff.hunks import build_hunks
from sameaspack.diff.models import Delete, EditOp, EditScript, Equal, Hunk, Insert, UnifiedDiff
from sameaspack.diff.options import DiffOptions
from sameaspack.diff.truncation import TruncationResult, truncate_hunks
from sameaspack.diff.unified import (
    compare_texts_as_unified_diff,
    diff_sequences,
    diff_texts,
    generate_unified_diff,
)

__all__ = [
    "Equal",
    "Delete",
    "Insert",
    "EditOp",
    "EditScript",
    "Hunk",
    "UnifiedDiff",
    "DiffOptions",
    "TruncationResult",
    "SameAsError",
    "DiffConfigError",
    "MalformedExpectedJSONError",
    "MismatchError",
    "MissingActualError",
    "NO_NEWLINE_MARKER",
    "compute_edit_script",
    "build_hunks",
    "truncate_hunks",
    "render_diff_lines",
    "render_unified_diff",
    "render_diff_summary",
    "diff_sequences",
    "diff_texts",
    "compare_texts_as_unified_diff",
    "generate_unified_diff",
    "AssertionResult",
    "compare_texts",
    "compare_json",
    "assert_same_as",
    "assert_same_as_json",
    "validate_expected_json",
]
