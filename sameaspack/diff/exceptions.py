"""Diff subsystem exceptions."""

from __future__ import annotations


class SameAsError(Exception):
    """Base class for non-assertion SameAsKit errors."""


class DiffConfigError(SameAsError, ValueError):
    """Invalid diff options."""


class MalformedExpectedJSONError(SameAsError, ValueError):
    """Expected JSON document failed to parse; a caller programming error."""

    def __init__(self, message: str, *, snippet: str = "") -> None:
        super().__init__(message)
        self.snippet = snippet


class MismatchError(AssertionError):
    """Expected and actual differ; the message is the unified diff."""

    def __init__(self, message: str, *, expected: str | None = None, actual: str | None = None) -> None:
        super().__init__(message)
        self.diff_text = message
        self.expected = expected
        self.actual = actual


class MissingActualError(MismatchError):
    """The value compared against an expectation is absent."""
