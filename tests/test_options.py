import dataclasses

import pytest

from sameaspack.diff import DiffConfigError, DiffOptions, diff_texts
from sameaspack.diff.options import (
    CONTEXT_LINES_ENV,
    MAX_CHANGED_LINES_ENV,
    MAX_EDIT_DISTANCE_ENV,
)


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (CONTEXT_LINES_ENV, MAX_CHANGED_LINES_ENV, MAX_EDIT_DISTANCE_ENV):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    options = DiffOptions()

    assert options.to_dict() == {
        "context_lines": 3,
        "max_changed_lines": 100,
        "max_edit_distance": 500,
        "expected_label": "expected",
        "actual_label": "actual",
    }


@pytest.mark.parametrize(
    "kwargs",
    [
        {"context_lines": -1},
        {"max_changed_lines": 0},
        {"max_edit_distance": 0},
        {"expected_label": "two\nlines"},
        {"actual_label": "two\nlines"},
    ],
)
def test_invalid_options_are_rejected(kwargs: dict) -> None:
    with pytest.raises(DiffConfigError):
        DiffOptions(**kwargs)


def test_unbounded_display_is_allowed() -> None:
    assert DiffOptions(max_changed_lines=None).max_changed_lines is None


def test_from_env_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(CONTEXT_LINES_ENV, "5")
    monkeypatch.setenv(MAX_CHANGED_LINES_ENV, " 20 ")
    monkeypatch.setenv(MAX_EDIT_DISTANCE_ENV, "1000")

    options = DiffOptions.from_env()

    assert options.context_lines == 5
    assert options.max_changed_lines == 20
    assert options.max_edit_distance == 1000


def test_from_env_ignores_invalid_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(CONTEXT_LINES_ENV, "lots")
    monkeypatch.setenv(MAX_CHANGED_LINES_ENV, "0")

    options = DiffOptions.from_env()

    assert options.context_lines == 3
    assert options.max_changed_lines == 100


def test_explicit_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(CONTEXT_LINES_ENV, "5")

    options = DiffOptions.from_env(context_lines=1, max_changed_lines=None, actual_label="out")

    assert options.context_lines == 1
    assert options.max_changed_lines == 100
    assert options.actual_label == "out"


def test_options_cannot_change_after_a_diff_is_built() -> None:
    options = DiffOptions(context_lines=1)
    result = diff_texts("a\n", "b\n", options=options)

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.options.context_lines = 5  # type: ignore[misc]
    assert result.options.context_lines == 1
