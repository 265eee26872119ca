"""Data models for edit scripts, hunks and unified diff results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from sameaspack.core.lines import LineSequence

if TYPE_CHECKING:
    from sameaspack.diff.options import DiffOptions


@dataclass(frozen=True, slots=True)
class Equal:
    """Line present in both sequences."""

    old_index: int
    new_index: int


@dataclass(frozen=True, slots=True)
class Delete:
    """Line present only in the expected (original) sequence."""

    old_index: int


@dataclass(frozen=True, slots=True)
class Insert:
    """Line present only in the actual (revised) sequence."""

    new_index: int


EditOp = Union[Equal, Delete, Insert]


def is_change(op: EditOp) -> bool:
    return not isinstance(op, Equal)


@dataclass(frozen=True, slots=True)
class EditScript:
    """Ordered edit operations transforming expected into actual."""

    ops: tuple[EditOp, ...]
    cutoff_reached: bool = False

    @property
    def changed_line_count(self) -> int:
        return sum(1 for op in self.ops if is_change(op))


@dataclass(frozen=True, slots=True)
class Hunk:
    """Contiguous run of edit operations with derived unified-diff header fields."""

    ops: tuple[EditOp, ...]

    @property
    def old_count(self) -> int:
        return sum(1 for op in self.ops if isinstance(op, (Equal, Delete)))

    @property
    def new_count(self) -> int:
        return sum(1 for op in self.ops if isinstance(op, (Equal, Insert)))

    @property
    def old_start(self) -> int:
        """1-based first expected line, or 0 when the hunk has no expected lines."""
        for op in self.ops:
            if isinstance(op, (Equal, Delete)):
                return op.old_index + 1
        return 0

    @property
    def new_start(self) -> int:
        """1-based first actual line, or 0 when the hunk has no actual lines."""
        for op in self.ops:
            if isinstance(op, (Equal, Insert)):
                return op.new_index + 1
        return 0

    @property
    def changed_line_count(self) -> int:
        return sum(1 for op in self.ops if is_change(op))

    def header(self) -> str:
        return (
            f"@@ -{format_hunk_range(self.old_start, self.old_count)} "
            f"+{format_hunk_range(self.new_start, self.new_count)} @@"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "old_start": self.old_start,
            "old_count": self.old_count,
            "new_start": self.new_start,
            "new_count": self.new_count,
            "changed_lines": self.changed_line_count,
        }


def format_hunk_range(start: int, count: int) -> str:
    # Uniformly "start,count"; an empty side is "0,0".
    if count == 0:
        return "0,0"
    return f"{start},{count}"


@dataclass(frozen=True, slots=True)
class UnifiedDiff:
    """Structured unified diff between an expected and an actual text."""

    expected: LineSequence
    actual: LineSequence
    hunks: tuple[Hunk, ...]
    options: DiffOptions
    total_changed_lines: int = 0
    truncated: bool = False
    cutoff_reached: bool = False

    @property
    def identical(self) -> bool:
        return self.total_changed_lines == 0

    @property
    def expected_label(self) -> str:
        return self.options.expected_label

    @property
    def actual_label(self) -> str:
        return self.options.actual_label

    def summary(self) -> dict[str, int]:
        return {
            "hunks": len(self.hunks),
            "changed_lines": self.total_changed_lines,
            "expected_lines": len(self.expected),
            "actual_lines": len(self.actual),
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "expected_label": self.expected_label,
            "actual_label": self.actual_label,
            "identical": self.identical,
            "truncated": self.truncated,
            "cutoff_reached": self.cutoff_reached,
            "summary": self.summary(),
            "hunks": [hunk.to_dict() for hunk in self.hunks],
        }
