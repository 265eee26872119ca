import pytest

from sameaspack.diff import (
    DiffOptions,
    MismatchError,
    MissingActualError,
    assert_same_as,
    compare_texts,
    compare_texts_as_unified_diff,
)


def test_identical_texts_pass() -> None:
    result = compare_texts("line1\nline2\n", "line1\nline2\n")

    assert result.passed is True
    assert result.exit_code == 0
    assert result.diff is None
    payload = result.to_dict()
    assert payload["status"] == "pass"
    assert payload["failure_kind"] is None


def test_mismatch_message_is_unified_diff() -> None:
    result = compare_texts("bar", "foo")

    assert result.passed is False
    assert result.exit_code == 1
    assert result.failure_kind == "mismatch"
    assert result.message == (
        "--- expected\n"
        "+++ actual\n"
        "@@ -1,1 +1,1 @@\n"
        "-bar\n"
        "\\ No newline at end of file\n"
        "+foo\n"
        "\\ No newline at end of file\n"
    )
    assert result.to_dict()["diff"]["summary"]["changed_lines"] == 2


def test_assert_same_as_takes_actual_first() -> None:
    with pytest.raises(MismatchError) as raised:
        assert_same_as("foo", "bar")

    assert "-bar\n" in raised.value.diff_text
    assert "+foo\n" in raised.value.diff_text
    assert raised.value.expected == "bar"
    assert raised.value.actual == "foo"


def test_mismatch_error_is_an_assertion_error() -> None:
    with pytest.raises(AssertionError):
        assert_same_as("a\n", "b\n")


def test_assert_same_as_passes_silently() -> None:
    assert_same_as("same\n", "same\n")


def test_missing_actual_reports_expected_text() -> None:
    with pytest.raises(MissingActualError) as raised:
        assert_same_as(None, "hello")

    assert str(raised.value) == "The string is null, but expected to be: hello"
    assert raised.value.actual is None


def test_missing_actual_result() -> None:
    result = compare_texts("hello", None)

    assert result.passed is False
    assert result.failure_kind == "missing_actual"
    assert result.diff is None


def test_options_control_context() -> None:
    expected = "".join(f"line {index}\n" for index in range(10))
    actual = expected.replace("line 5\n", "changed\n")

    result = compare_texts(expected, actual, options=DiffOptions(context_lines=1))

    assert result.message.splitlines()[2:] == [
        "@@ -5,3 +5,3 @@",
        " line 4",
        "-line 5",
        "+changed",
        " line 6",
    ]


def test_compare_texts_as_unified_diff_returns_empty_for_identical() -> None:
    assert compare_texts_as_unified_diff("a\nb", "a\nb") == ""


def test_compare_texts_as_unified_diff_renders_difference() -> None:
    rendered = compare_texts_as_unified_diff("a\n", "b\n")

    assert rendered == "--- expected\n+++ actual\n@@ -1,1 +1,1 @@\n-a\n+b\n"
