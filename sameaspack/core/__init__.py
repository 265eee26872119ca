"""Core primitives for SameAsKit."""

from sameaspack.core.canonical import (
    JSONDocumentError,
    JSONNumber,
    canonical_json,
    parse_json_document,
    prettify_json,
    render_pretty_json,
)
from sameaspack.core.lines import LineSequence, split_lines

__all__ = [
    "LineSequence",
    "split_lines",
    "JSONDocumentError",
    "JSONNumber",
    "canonical_json",
    "parse_json_document",
    "prettify_json",
    "render_pretty_json",
]
