"""Diff configuration: defaults, validation and environment overrides."""

from __future__ import annotations

from dataclasses import dataclass
import os

from sameaspack.diff.exceptions import DiffConfigError

DEFAULT_CONTEXT_LINES = 3
DEFAULT_MAX_CHANGED_LINES = 100
DEFAULT_MAX_EDIT_DISTANCE = 500

CONTEXT_LINES_ENV = "SAMEAS_CONTEXT_LINES"
MAX_CHANGED_LINES_ENV = "SAMEAS_MAX_CHANGED_LINES"
MAX_EDIT_DISTANCE_ENV = "SAMEAS_MAX_EDIT_DISTANCE"


@dataclass(frozen=True, slots=True)
class DiffOptions:
    """Configuration for unified diff generation.

    ``max_changed_lines=None`` disables display truncation. ``max_edit_distance``
    bounds the Myers search; past it a degenerate, non-minimal script is used.
    """

    context_lines: int = DEFAULT_CONTEXT_LINES
    max_changed_lines: int | None = DEFAULT_MAX_CHANGED_LINES
    max_edit_distance: int = DEFAULT_MAX_EDIT_DISTANCE
    expected_label: str = "expected"
    actual_label: str = "actual"

    def __post_init__(self) -> None:
        if not isinstance(self.context_lines, int) or self.context_lines < 0:
            raise DiffConfigError("context_lines must be a non-negative integer")
        if self.max_changed_lines is not None and (
            not isinstance(self.max_changed_lines, int) or self.max_changed_lines < 1
        ):
            raise DiffConfigError("max_changed_lines must be a positive integer or None")
        if not isinstance(self.max_edit_distance, int) or self.max_edit_distance < 1:
            raise DiffConfigError("max_edit_distance must be a positive integer")
        for label in (self.expected_label, self.actual_label):
            if "\n" in label:
                raise DiffConfigError("diff labels must be single-line strings")

    @classmethod
    def from_env(cls, **overrides: object) -> DiffOptions:
        """Build options from ``SAMEAS_*`` env vars, then non-None keyword overrides."""
        values: dict[str, object] = {
            "context_lines": _resolve_int_env(CONTEXT_LINES_ENV, DEFAULT_CONTEXT_LINES, minimum=0),
            "max_changed_lines": _resolve_int_env(
                MAX_CHANGED_LINES_ENV, DEFAULT_MAX_CHANGED_LINES, minimum=1
            ),
            "max_edit_distance": _resolve_int_env(
                MAX_EDIT_DISTANCE_ENV, DEFAULT_MAX_EDIT_DISTANCE, minimum=1
            ),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)  # type: ignore[arg-type]

    def to_dict(self) -> dict[str, object]:
        return {
            "context_lines": self.context_lines,
            "max_changed_lines": self.max_changed_lines,
            "max_edit_distance": self.max_edit_distance,
            "expected_label": self.expected_label,
            "actual_label": self.actual_label,
        }


def _resolve_int_env(name: str, default: int, *, minimum: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        parsed = int(raw.strip())
    except ValueError:
        return default
    if parsed < minimum:
        return default
    return parsed
