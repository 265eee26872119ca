"""Deterministic JSON rendering helpers for SameAsKit."""

from __future__ import annotations

from dataclasses import dataclass
import json
import math
from typing import Any

PRETTY_INDENT = 2
SNIPPET_RADIUS = 40


class JSONDocumentError(ValueError):
    """Raised when a JSON document cannot be parsed."""

    def __init__(self, message: str, *, snippet: str = "") -> None:
        super().__init__(message)
        self.snippet = snippet


@dataclass(frozen=True, slots=True)
class JSONNumber:
    """Number literal kept exactly as written in the source document."""

    token: str

    @property
    def value(self) -> int | float:
        if any(marker in self.token for marker in ".eE"):
            return float(self.token)
        return int(self.token)


def parse_json_document(text: str) -> Any:
    """Parse strict JSON, keeping object keys in document order.

    Numbers come back as ``JSONNumber`` so re-rendering reproduces their
    literals (``1.50`` stays ``1.50``).
    """
    try:
        return json.loads(
            text,
            object_pairs_hook=_ordered_object,
            parse_int=JSONNumber,
            parse_float=_finite_number,
            parse_constant=_reject_constant,
        )
    except json.JSONDecodeError as error:
        snippet = _error_snippet(text, error.pos)
        message = f"{error.msg} at line {error.lineno} column {error.colno}"
        if snippet:
            message = f"{message}, near: {snippet}"
        raise JSONDocumentError(message, snippet=snippet) from error
    except ValueError as error:
        raise JSONDocumentError(str(error)) from error


def prettify_json(text: str) -> str:
    """Re-render a JSON document with 2-space indentation and original key order."""
    return render_pretty_json(parse_json_document(text))


def render_pretty_json(value: Any) -> str:
    return _render_value(value, 0)


def canonical_json(value: Any, *, stable: bool = True) -> str:
    """Serialize a payload for machine output.

    Stable output is compact with sorted keys; otherwise it is indented.
    """
    if stable:
        return json.dumps(
            value,
            ensure_ascii=True,
            sort_keys=True,
            separators=(",", ":"),
        )
    return json.dumps(
        value,
        ensure_ascii=True,
        sort_keys=True,
        indent=PRETTY_INDENT,
    )


def _ordered_object(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    normalized: dict[str, Any] = {}
    for key, value in pairs:
        normalized[key] = value
    return normalized


def _reject_constant(token: str) -> Any:
    raise ValueError(f"NaN and infinity are not supported in JSON documents: {token}")


def _error_snippet(text: str, position: int) -> str:
    if not text:
        return ""
    start = max(0, position - SNIPPET_RADIUS)
    end = min(len(text), position + SNIPPET_RADIUS)
    snippet = text[start:end].replace("\r", "\\r").replace("\n", "\\n")
    prefix = "..." if start > 0 else ""
    suffix = "..." if end < len(text) else ""
    return f"{prefix}{snippet}{suffix}"


def _finite_number(token: str) -> JSONNumber:
    if not math.isfinite(float(token)):
        raise ValueError(f"number out of range in JSON document: {token}")
    return JSONNumber(token)


def _render_value(value: Any, depth: int) -> str:
    if isinstance(value, JSONNumber):
        return value.token

    indent = " " * (PRETTY_INDENT * (depth + 1))
    closing = " " * (PRETTY_INDENT * depth)
    if isinstance(value, dict):
        if not value:
            return "{}"
        members = [
            f"{indent}{_render_scalar(key)}: {_render_value(item, depth + 1)}"
            for key, item in value.items()
        ]
        return "{\n" + ",\n".join(members) + f"\n{closing}}}"
    if isinstance(value, list):
        if not value:
            return "[]"
        items = [f"{indent}{_render_value(item, depth + 1)}" for item in value]
        return "[\n" + ",\n".join(items) + f"\n{closing}]"
    return _render_scalar(value)


def _render_scalar(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, allow_nan=False)
