from __future__ import annotations

from gatherr.codec import decode_document, decode_lines, decode_record, encode_result
from gatherr.errors import Error
from gatherr.result import Err, Ok
from gatherr.schema import load_schema


def test_decode_record_variants() -> None:
    assert decode_record({"ok": 1}, "r") == Ok(Ok(1))
    assert decode_record({"err": None}, "r") == Ok(Err(None))
    assert decode_record({"ok": {"nested": [1, 2]}}, "r") == Ok(Ok({"nested": [1, 2]}))


def test_decode_record_rejects_bad_shapes() -> None:
    for bad in ({}, {"ok": 1, "err": 2}, {"value": 1}, [1], "ok"):
        res = decode_record(bad, "r")
        assert res.is_err()
        error: Error = res.unwrap_err()
        assert error.code == "schema"
        assert error.path == "r"


def test_decode_lines_skips_blank_lines() -> None:
    lines: list[str] = ['{"ok": "a"}', "", "   ", '{"err": 1}']
    assert decode_lines(lines, "in") == Ok((Ok("a"), Err(1)))


def test_decode_lines_reports_every_bad_line() -> None:
    lines: list[str] = ['{"ok": 1}', "{not json", '{"ok": 2}', '{"oops": 3}']
    res = decode_lines(lines, "in.jsonl")
    errors: tuple[Error, ...] = res.unwrap_err()
    assert [(e.code, e.path) for e in errors] == [("json", "in.jsonl:2"), ("schema", "in.jsonl:4")]


def test_decode_document() -> None:
    assert decode_document('[{"ok": 1}, {"err": "x"}]', "doc") == Ok((Ok(1), Err("x")))
    assert decode_document("[]", "doc") == Ok(())


def test_decode_document_errors() -> None:
    not_array = decode_document('{"ok": 1}', "doc")
    assert not_array == Err((Error(code="schema", message="expected a JSON array of records", path="doc"),))

    broken = decode_document("[", "doc")
    assert broken.unwrap_err()[0].code == "json"

    bad_items = decode_document('[{"ok": 1}, {}, 5]', "doc")
    assert [e.path for e in bad_items.unwrap_err()] == ["doc[1]", "doc[2]"]


def test_encode_result() -> None:
    assert encode_result(Ok(("a", "b"))) == {"ok": ["a", "b"]}
    assert encode_result(Err([1])) == {"err": [1]}


def test_error_str() -> None:
    assert str(Error(code="json", message="bad", path="f:1")) == "json:f:1:bad"


def test_changing_loaded_schema_does_not_affect_decoding() -> None:
    schema = load_schema()
    schema["additionalProperties"] = True
    schema["oneOf"] = []
    assert load_schema()["additionalProperties"] is False
    assert decode_record({"ok": 1, "extra": 2}, "r").is_err()
    assert decode_record({"err": 1}, "r") == Ok(Err(1))
