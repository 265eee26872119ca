import json

import pytest

from sameaspack.core.canonical import (
    JSONDocumentError,
    JSONNumber,
    canonical_json,
    parse_json_document,
    prettify_json,
)


def test_prettify_uses_two_space_indent_and_document_key_order() -> None:
    assert prettify_json('{"z": 1, "a": {"y": [true, null]}}') == (
        '{\n'
        '  "z": 1,\n'
        '  "a": {\n'
        '    "y": [\n'
        '      true,\n'
        '      null\n'
        '    ]\n'
        '  }\n'
        '}'
    )


def test_prettify_has_no_trailing_newline() -> None:
    assert prettify_json("[]\n") == "[]"
    assert prettify_json('"text"') == '"text"'


def test_duplicate_keys_keep_last_value_at_first_position() -> None:
    assert parse_json_document('{"a": 1, "b": 2, "a": 3}') == {
        "a": JSONNumber("3"),
        "b": JSONNumber("2"),
    }


def test_parse_error_reports_location_and_snippet() -> None:
    with pytest.raises(JSONDocumentError) as raised:
        parse_json_document('{"key": "value",\n "other": }')

    assert "line 2 column" in str(raised.value)
    assert raised.value.snippet.startswith('{"key"')
    assert "\\n" in raised.value.snippet


def test_parse_error_snippet_is_elided_for_long_documents() -> None:
    document = '{"padding": "' + "x" * 100 + '", "broken": }'

    with pytest.raises(JSONDocumentError) as raised:
        parse_json_document(document)

    assert raised.value.snippet.startswith("...")


def test_nan_and_infinity_are_rejected() -> None:
    for token in ("NaN", "Infinity", "-Infinity"):
        with pytest.raises(JSONDocumentError, match="NaN and infinity"):
            parse_json_document(f"[{token}]")


def test_canonical_json_stable_is_compact_with_sorted_keys() -> None:
    assert canonical_json({"b": 1, "a": [1, 2]}) == '{"a":[1,2],"b":1}'


def test_canonical_json_pretty_round_trips() -> None:
    payload = {"b": 1, "a": {"c": "é"}}

    rendered = canonical_json(payload, stable=False)

    assert rendered.startswith("{\n  ")
    assert "\\u00e9" in rendered
    assert json.loads(rendered) == payload


def test_number_literals_are_rendered_as_written() -> None:
    assert prettify_json('[1.50, 1e2, -0, 10E-3, 12345678901234567890]') == (
        "[\n  1.50,\n  1e2,\n  -0,\n  10E-3,\n  12345678901234567890\n]"
    )


def test_parsed_numbers_expose_their_value() -> None:
    document = parse_json_document('{"int": 7, "float": 2.50}')

    assert document["int"] == JSONNumber("7")
    assert document["int"].value == 7
    assert document["float"].value == 2.5


def test_overflowing_number_is_rejected() -> None:
    with pytest.raises(JSONDocumentError, match="out of range"):
        parse_json_document('{"n": 1e400}')


def test_empty_containers_stay_inline() -> None:
    assert prettify_json('{"a": {}, "b": []}') == '{\n  "a": {},\n  "b": []\n}'
