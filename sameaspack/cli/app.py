from importlib.metadata import PackageNotFoundError, version as package_version
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer

from sameaspack.core.canonical import JSONDocumentError, canonical_json, prettify_json
from sameaspack.diff import (
    AssertionResult,
    DiffConfigError,
    DiffOptions,
    MalformedExpectedJSONError,
    compare_json,
    compare_texts,
    diff_texts,
    render_diff_summary,
    render_unified_diff,
)
from sameaspack.snapshot import (
    SnapshotConfigError,
    assert_snapshot,
    read_text_exact,
    update_snapshot,
)

app = typer.Typer(help="SameAsKit CLI")


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()


def _resolve_cli_version() -> str:
    try:
        return package_version("sameaskit")
    except PackageNotFoundError:
        from sameaspack import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show SameAsKit version and exit.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.stable_json = stable_json


def _echo(message: str, *, err: bool = False, force: bool = False) -> None:
    if _OUTPUT_OPTIONS.quiet and not err and not force:
        return
    typer.echo(message, err=err)


def _echo_json(payload: dict[str, Any], *, err: bool = False) -> None:
    rendered = canonical_json(payload, stable=_OUTPUT_OPTIONS.stable_json)
    typer.echo(rendered, err=err)


def _echo_error(message: str, *, json_output: bool, exit_code: int, **extra: Any) -> None:
    if json_output:
        _echo_json({"status": "error", "exit_code": exit_code, "message": message, **extra})
    else:
        _echo(message, err=True)


def _strip_final_newline(text: str) -> str:
    return text[:-1] if text.endswith("\n") else text


def _build_options(
    *,
    context: int | None,
    max_changed_lines: int | None,
    expected_label: str | None,
    actual_label: str | None,
) -> DiffOptions:
    return DiffOptions.from_env(
        context_lines=context,
        max_changed_lines=max_changed_lines,
        expected_label=expected_label,
        actual_label=actual_label,
    )


def _render_assertion_failure(result: AssertionResult) -> str:
    return _strip_final_newline(result.message)


@app.command()
def diff(
    expected: Path = typer.Argument(..., help="Path to expected text file."),
    actual: Path = typer.Argument(..., help="Path to actual text file."),
    context: int | None = typer.Option(
        None,
        "--context",
        min=0,
        help="Context lines around each change (default 3, or SAMEAS_CONTEXT_LINES).",
    ),
    max_changed_lines: int | None = typer.Option(
        None,
        "--max-changed-lines",
        min=1,
        help="Changed lines shown before the diff is truncated (default 100).",
    ),
    expected_label: str | None = typer.Option(
        None,
        "--expected-label",
        help="Name printed on the --- header line.",
    ),
    actual_label: str | None = typer.Option(
        None,
        "--actual-label",
        help="Name printed on the +++ header line.",
    ),
    as_json: bool = typer.Option(
        False,
        "--as-json",
        help="Treat both files as JSON documents and prettify them before diffing.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable diff output.",
    ),
) -> None:
    """Print a unified diff of two text files."""
    try:
        options = _build_options(
            context=context,
            max_changed_lines=max_changed_lines,
            expected_label=expected_label,
            actual_label=actual_label,
        )
    except DiffConfigError as error:
        _echo_error(f"diff failed: {error}", json_output=json_output, exit_code=2)
        raise typer.Exit(code=2) from error

    try:
        expected_text = read_text_exact(expected)
        actual_text = read_text_exact(actual)
        if as_json:
            expected_text = prettify_json(expected_text)
            actual_text = prettify_json(actual_text)
    except (OSError, UnicodeDecodeError, JSONDocumentError) as error:
        _echo_error(
            f"diff failed: {error}",
            json_output=json_output,
            exit_code=1,
            expected_path=str(expected),
            actual_path=str(actual),
        )
        raise typer.Exit(code=1) from error

    result = diff_texts(expected_text, actual_text, options=options)

    if json_output:
        _echo_json(
            {
                **result.to_dict(),
                "status": "ok",
                "exit_code": 0,
                "message": "diff completed",
                "expected_path": str(expected),
                "actual_path": str(actual),
                "diff_text": render_unified_diff(result) if not result.identical else "",
            }
        )
        return

    if result.identical:
        _echo("no differences")
        return

    _echo(render_diff_summary(result))
    _echo(_strip_final_newline(render_unified_diff(result)))


@app.command(name="assert")
def assert_text(
    expected: Path = typer.Argument(..., help="Path to expected text file."),
    actual: Path | None = typer.Option(
        None,
        "--actual",
        "-a",
        help="Path to actual text file to compare against expected.",
    ),
    as_json: bool = typer.Option(
        False,
        "--as-json",
        help="Prettify the actual file as JSON; the expected file must be valid JSON.",
    ),
    context: int | None = typer.Option(
        None,
        "--context",
        min=0,
        help="Context lines around each change (default 3, or SAMEAS_CONTEXT_LINES).",
    ),
    max_changed_lines: int | None = typer.Option(
        None,
        "--max-changed-lines",
        min=1,
        help="Changed lines shown before the diff is truncated (default 100).",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable assertion output.",
    ),
) -> None:
    """Assert the actual file matches the expected file."""
    if actual is None:
        message = "assert failed: missing actual file. Provide --actual PATH."
        _echo_error(message, json_output=json_output, exit_code=1)
        raise typer.Exit(code=1)

    try:
        options = _build_options(
            context=context,
            max_changed_lines=max_changed_lines,
            expected_label=None,
            actual_label=None,
        )
        expected_text = read_text_exact(expected)
        actual_text = read_text_exact(actual)
    except DiffConfigError as error:
        _echo_error(f"assert failed: {error}", json_output=json_output, exit_code=2)
        raise typer.Exit(code=2) from error
    except (OSError, UnicodeDecodeError) as error:
        _echo_error(f"assert failed: {error}", json_output=json_output, exit_code=1)
        raise typer.Exit(code=1) from error

    try:
        if as_json:
            result = compare_json(expected_text, actual_text, options=options)
        else:
            result = compare_texts(expected_text, actual_text, options=options)
    except MalformedExpectedJSONError as error:
        _echo_error(f"assert failed: {error}", json_output=json_output, exit_code=2)
        raise typer.Exit(code=2) from error

    if json_output:
        payload = result.to_dict()
        payload["expected_path"] = str(expected)
        payload["actual_path"] = str(actual)
        _echo_json(payload)
    elif result.passed:
        _echo(f"assert passed: expected={expected} actual={actual}")
    else:
        _echo(f"assert failed: mismatch (expected={expected} actual={actual})", force=True)
        _echo(_render_assertion_failure(result), force=True)

    if not result.passed:
        raise typer.Exit(code=result.exit_code)


@app.command()
def snapshot(
    name: str = typer.Argument(..., help="Snapshot name (stored as <name>.snap)."),
    candidate: Path = typer.Option(
        ...,
        "--candidate",
        "-c",
        help="Candidate text file path.",
    ),
    snapshots_dir: Path = typer.Option(
        Path("snapshots"),
        "--snapshots-dir",
        help="Directory containing snapshot files.",
    ),
    update: bool = typer.Option(
        False,
        "--update",
        help="Create/update the snapshot from the candidate file.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable snapshot output.",
    ),
) -> None:
    """Create/update or assert text snapshots for regression testing."""
    try:
        if update:
            result = update_snapshot(
                snapshot_name=name,
                candidate_path=candidate,
                snapshots_dir=snapshots_dir,
            )
        else:
            result = assert_snapshot(
                snapshot_name=name,
                candidate_path=candidate,
                snapshots_dir=snapshots_dir,
                options=DiffOptions.from_env(),
            )
    except (SnapshotConfigError, OSError, UnicodeDecodeError) as error:
        message = f"snapshot failed: {error}"
        _echo_error(
            message,
            json_output=json_output,
            exit_code=1,
            action="update" if update else "assert",
            snapshot_name=name,
            candidate_path=str(candidate),
        )
        raise typer.Exit(code=1) from error

    if json_output:
        _echo_json(result.to_dict())
    else:
        if result.status == "updated":
            _echo(
                "snapshot updated: "
                f"name={name} snapshot={result.snapshot_path} source={result.candidate_path}"
            )
        elif result.status == "pass":
            _echo(
                "snapshot passed: "
                f"name={name} snapshot={result.snapshot_path} candidate={result.candidate_path}"
            )
        elif result.status == "fail":
            _echo(
                "snapshot failed: "
                f"name={name} snapshot={result.snapshot_path} candidate={result.candidate_path}",
                force=True,
            )
        else:
            _echo(f"snapshot failed: {result.message}", err=True)

        if result.assertion is not None and not result.assertion.passed:
            _echo(_render_assertion_failure(result.assertion), force=True)

    if result.exit_code != 0:
        raise typer.Exit(code=result.exit_code)


def main() -> None:
    app()
