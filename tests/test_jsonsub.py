import json
from pathlib import Path

import pytest

from subconvert.errors import ParseError, ReadError
from subconvert.jsonsub import decode, encode, read_json
from subconvert.models import SubtitleDocument, TimedTextEvent


def test_decode_full_document():
    doc = decode(
        b'{"font_size": 0.4, "font_color": "#FFFFFF", "background_alpha": 0.5,'
        b' "background_color": "#9C27B0", "Stroke": "none",'
        b' "body": [{"from": 1.5, "to": 3, "location": 2, "content": "Hello\\nWorld"}]}'
    )

    assert doc.font_size == 0.4
    assert doc.stroke == "none"
    assert len(doc.body) == 1
    assert doc.body[0].start == 1.5
    assert doc.body[0].end == 3.0
    assert doc.body[0].location == 2
    assert doc.body[0].content == "Hello\nWorld"


def test_decode_missing_fields_default_to_zero_values():
    doc = decode('{"body": [{"content": "hi"}]}')

    assert doc.font_size == 0.0
    assert doc.font_color == ""
    assert doc.stroke == ""
    assert doc.body[0].start == 0.0
    assert doc.body[0].end == 0.0
    assert doc.body[0].location == 0


def test_decode_empty_object():
    assert decode("{}").body == []


def test_decode_ignores_attribute_names_as_keys():
    doc = decode('{"stroke": "solid", "body": [{"start": 1.5, "end": 2.0}]}')

    assert doc.stroke == ""
    assert doc.body[0].start == 0.0
    assert doc.body[0].end == 0.0


def test_decode_null_values_treated_as_missing():
    doc = decode('{"body": null, "font_color": null}')

    assert doc.body == []
    assert doc.font_color == ""


@pytest.mark.parametrize(
    "data",
    [
        "not json",
        "[]",
        '{"body": "oops"}',
        '{"font_color": 5}',
        '{"font_size": "big"}',
        '{"body": [{"from": "1.5"}]}',
        '{"body": [{"location": 2.5}]}',
        '{"body": [{"content": 3}]}',
        '{"body": [{"from": NaN, "to": 1}]}',
        '{"body": [{"from": 0, "to": Infinity}]}',
        '{"body": [{"from": 1e400, "to": 1}]}',
    ],
)
def test_decode_rejects_invalid_documents(data):
    with pytest.raises(ParseError):
        decode(data)


def test_encode_uses_schema_keys_in_order():
    doc = SubtitleDocument.model_validate(
        {
            "font_size": 0.4,
            "font_color": "#FFFFFF",
            "background_alpha": 0.5,
            "background_color": "#9C27B0",
            "Stroke": "none",
            "body": [TimedTextEvent.create(1.5, 3.0, location=2, content="Hello")],
        }
    )

    data = json.loads(encode(doc))

    assert list(data) == [
        "font_size",
        "font_color",
        "background_alpha",
        "background_color",
        "Stroke",
        "body",
    ]
    assert data["body"] == [{"from": 1.5, "to": 3.0, "location": 2, "content": "Hello"}]


def test_encode_keeps_non_ascii_text():
    doc = SubtitleDocument(body=[TimedTextEvent(content="日本語")])

    assert "日本語".encode("utf-8") in encode(doc)


def test_read_json_missing_file(tmp_path: Path):
    with pytest.raises(ReadError):
        read_json(tmp_path / "missing.json")
