import logging

import pytest

from sameaspack.diff import Delete, DiffOptions, Equal, Hunk, Insert, diff_texts, truncate_hunks
from sameaspack.diff.formatting import render_diff_lines
from sameaspack.diff.truncation import truncation_notice


def _hunk() -> Hunk:
    return Hunk(ops=(Equal(0, 0), Delete(1), Insert(1), Equal(2, 2), Delete(3), Equal(4, 3)))


def test_within_budget_returns_hunks_unchanged() -> None:
    hunks = [_hunk()]

    result = truncate_hunks(hunks, max_changed_lines=3)

    assert result.truncated is False
    assert result.hunks == tuple(hunks)
    assert result.total_changed_lines == 3


def test_none_budget_disables_truncation() -> None:
    result = truncate_hunks([_hunk(), _hunk()], max_changed_lines=None)

    assert result.truncated is False
    assert len(result.hunks) == 2


def test_hunk_is_cut_before_first_change_past_budget(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="sameaspack.diff.truncation")

    result = truncate_hunks([_hunk()], max_changed_lines=2)

    assert result.truncated is True
    assert result.total_changed_lines == 3
    (kept,) = result.hunks
    assert kept.ops == (Equal(0, 0), Delete(1), Insert(1), Equal(2, 2))
    assert kept.header() == "@@ -1,3 +1,3 @@"
    assert "diff truncated" in caplog.text


def test_later_hunks_are_dropped_once_budget_is_spent() -> None:
    first = Hunk(ops=(Delete(0), Insert(0)))
    second = Hunk(ops=(Equal(5, 5), Delete(6), Insert(6)))

    result = truncate_hunks([first, second], max_changed_lines=2)

    assert result.truncated is True
    assert result.hunks == (first,)


def test_exactly_one_hundred_changes_is_not_truncated() -> None:
    expected = "".join(f"old {index}\n" for index in range(50))
    actual = "".join(f"new {index}\n" for index in range(50))

    result = diff_texts(expected, actual)

    assert result.truncated is False
    assert result.total_changed_lines == 100


def test_one_hundred_and_one_changes_are_truncated_to_budget() -> None:
    expected = "".join(f"old {index}\n" for index in range(51))
    actual = "".join(f"new {index}\n" for index in range(50))

    result = diff_texts(expected, actual)
    lines = render_diff_lines(result)

    assert result.truncated is True
    assert result.total_changed_lines == 101
    shown = [line for line in lines[2:] if line.startswith(("+", "-"))]
    assert len(shown) == 100
    assert lines[-8:] == [
        "",
        "Diff truncated: more than 100 lines changed",
        "",
        "Expected: 51 lines",
        "Actual: 50 lines",
        "",
        "The differences are too extensive to show in unified diff format.",
        "Consider comparing smaller sections or reviewing the strings directly.",
    ]


def test_custom_budget_appears_in_notice() -> None:
    result = diff_texts("a\nb\nc\n", "x\ny\nz\n", options=DiffOptions(max_changed_lines=2))
    lines = render_diff_lines(result)

    assert "Diff truncated: more than 2 lines changed" in lines
    assert sum(1 for line in lines[2:] if line.startswith(("+", "-"))) == 2


def test_truncating_truncated_output_is_stable() -> None:
    first = truncate_hunks([_hunk()], max_changed_lines=2)
    second = truncate_hunks(first.hunks, max_changed_lines=2)

    assert second.truncated is False
    assert second.hunks == first.hunks


def test_truncation_notice_lines() -> None:
    assert truncation_notice(max_changed_lines=5, expected_lines=1, actual_lines=2)[1:5] == [
        "Diff truncated: more than 5 lines changed",
        "",
        "Expected: 1 lines",
        "Actual: 2 lines",
    ]
