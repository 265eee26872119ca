"""Assertion helpers that report mismatches as unified diffs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from sameaspack.core.canonical import JSONDocumentError, parse_json_document, prettify_json
from sameaspack.diff.exceptions import MalformedExpectedJSONError, MismatchError, MissingActualError
from sameaspack.diff.formatting import render_unified_diff
from sameaspack.diff.models import UnifiedDiff
from sameaspack.diff.options import DiffOptions
from sameaspack.diff.unified import diff_texts

ComparisonMode = Literal["text", "json"]
FailureKind = Literal["mismatch", "missing_actual", "invalid_actual_json"]


@dataclass(slots=True)
class AssertionResult:
    """Outcome of comparing an actual text against an expected one."""

    expected: str
    actual: str | None
    passed: bool
    mode: ComparisonMode = "text"
    diff: UnifiedDiff | None = None
    failure_kind: FailureKind | None = None
    message: str = ""

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def raise_for_mismatch(self) -> None:
        if self.passed:
            return
        if self.failure_kind == "missing_actual":
            raise MissingActualError(self.message, expected=self.expected, actual=None)
        raise MismatchError(self.message, expected=self.expected, actual=self.actual)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": "pass" if self.passed else "fail",
            "exit_code": self.exit_code,
            "mode": self.mode,
            "failure_kind": self.failure_kind,
            "message": self.message,
            "diff": self.diff.to_dict() if self.diff is not None else None,
        }


def missing_actual_message(expected: str) -> str:
    return f"The string is null, but expected to be: {expected}"


def compare_texts(
    expected: str,
    actual: str | None,
    *,
    options: DiffOptions | None = None,
    mode: ComparisonMode = "text",
) -> AssertionResult:
    """Compare texts; on mismatch the result message is the unified diff."""
    if actual is None:
        return AssertionResult(
            expected=expected,
            actual=None,
            passed=False,
            mode=mode,
            failure_kind="missing_actual",
            message=missing_actual_message(expected),
        )

    if actual == expected:
        return AssertionResult(expected=expected, actual=actual, passed=True, mode=mode)

    diff = diff_texts(expected, actual, options=options)
    return AssertionResult(
        expected=expected,
        actual=actual,
        passed=False,
        mode=mode,
        diff=diff,
        failure_kind="mismatch",
        message=render_unified_diff(diff),
    )


def assert_same_as(
    actual: str | None,
    expected: str,
    *,
    options: DiffOptions | None = None,
) -> None:
    """Raise ``MismatchError`` with a unified diff unless ``actual == expected``."""
    compare_texts(expected, actual, options=options).raise_for_mismatch()


def validate_expected_json(expected: str) -> None:
    """Raise ``MalformedExpectedJSONError`` when the expected document is not JSON."""
    try:
        parse_json_document(expected)
    except JSONDocumentError as error:
        raise MalformedExpectedJSONError(
            f"Invalid expected JSON: {error}",
            snippet=error.snippet,
        ) from error


def compare_json(
    expected: str,
    actual: str | None,
    *,
    options: DiffOptions | None = None,
) -> AssertionResult:
    """Compare a prettified actual JSON document against expected JSON text.

    Only ``actual`` is re-rendered (2-space indent, original key order); the
    expected text is compared as written once it parses.
    """
    if actual is None:
        return compare_texts(expected, None, options=options, mode="json")

    validate_expected_json(expected)

    try:
        prettified = prettify_json(actual)
    except JSONDocumentError as error:
        return AssertionResult(
            expected=expected,
            actual=actual,
            passed=False,
            mode="json",
            failure_kind="invalid_actual_json",
            message=f"Invalid JSON: {error}",
        )

    return compare_texts(expected, prettified, options=options, mode="json")


def assert_same_as_json(
    actual: str | None,
    expected: str,
    *,
    options: DiffOptions | None = None,
) -> None:
    compare_json(expected, actual, options=options).raise_for_mismatch()
