"""Snapshot (golden file) workflow helpers for text regression testing."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from sameaspack.diff import AssertionResult, DiffOptions, compare_texts

SNAPSHOT_SUFFIX = ".snap"

SnapshotAction = Literal["update", "assert"]
SnapshotStatus = Literal["updated", "pass", "fail", "error"]


class SnapshotConfigError(ValueError):
    """Raised when snapshot workflow input is invalid."""


@dataclass(slots=True)
class SnapshotWorkflowResult:
    """Result model for snapshot update/assert workflows."""

    snapshot_name: str
    snapshot_path: str
    candidate_path: str
    action: SnapshotAction
    status: SnapshotStatus
    updated: bool = False
    assertion: AssertionResult | None = None
    message: str = ""

    @property
    def exit_code(self) -> int:
        return 0 if self.status in {"updated", "pass"} else 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "exit_code": self.exit_code,
            "action": self.action,
            "snapshot_name": self.snapshot_name,
            "snapshot_path": self.snapshot_path,
            "candidate_path": self.candidate_path,
            "updated": self.updated,
            "message": self.message,
            "assertion": self.assertion.to_dict() if self.assertion is not None else None,
        }


def read_text_exact(path: str | Path) -> str:
    """Read UTF-8 text without newline translation."""
    return Path(path).read_bytes().decode("utf-8")


def write_text_exact(path: str | Path, text: str) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(text.encode("utf-8"))


def resolve_snapshot_path(snapshot_name: str, snapshots_dir: str | Path) -> Path:
    """Resolve snapshot file path from snapshot name and snapshot directory."""
    normalized_name = snapshot_name.strip()
    if not normalized_name:
        raise SnapshotConfigError("snapshot_name must be non-empty")
    if "/" in normalized_name or "\\" in normalized_name:
        raise SnapshotConfigError("snapshot_name must not include path separators")

    filename = (
        normalized_name
        if normalized_name.endswith(SNAPSHOT_SUFFIX)
        else f"{normalized_name}{SNAPSHOT_SUFFIX}"
    )
    return Path(snapshots_dir) / filename


def update_snapshot(
    *,
    snapshot_name: str,
    candidate_path: str | Path,
    snapshots_dir: str | Path = "snapshots",
) -> SnapshotWorkflowResult:
    """Create or overwrite the snapshot file with the candidate text."""
    snapshot_path = resolve_snapshot_path(snapshot_name, snapshots_dir)
    write_text_exact(snapshot_path, read_text_exact(candidate_path))

    return SnapshotWorkflowResult(
        snapshot_name=snapshot_name,
        snapshot_path=str(snapshot_path),
        candidate_path=str(candidate_path),
        action="update",
        status="updated",
        updated=True,
        message="snapshot updated",
    )


def assert_snapshot(
    *,
    snapshot_name: str,
    candidate_path: str | Path,
    snapshots_dir: str | Path = "snapshots",
    options: DiffOptions | None = None,
) -> SnapshotWorkflowResult:
    """Assert candidate text against the stored snapshot (snapshot is expected)."""
    snapshot_path = resolve_snapshot_path(snapshot_name, snapshots_dir)
    if not snapshot_path.exists():
        return SnapshotWorkflowResult(
            snapshot_name=snapshot_name,
            snapshot_path=str(snapshot_path),
            candidate_path=str(candidate_path),
            action="assert",
            status="error",
            message="snapshot missing; run with --update to create it",
        )

    result = compare_texts(
        read_text_exact(snapshot_path),
        read_text_exact(candidate_path),
        options=options,
    )
    status: SnapshotStatus = "pass" if result.passed else "fail"

    return SnapshotWorkflowResult(
        snapshot_name=snapshot_name,
        snapshot_path=str(snapshot_path),
        candidate_path=str(candidate_path),
        action="assert",
        status=status,
        assertion=result,
        message="snapshot assertion passed" if result.passed else "snapshot assertion failed",
    )
