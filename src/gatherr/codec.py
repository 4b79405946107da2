from __future__ import annotations

import json
import logging
from functools import cache
from typing import Any, Iterable, Iterator

import jsonschema
from jsonschema.exceptions import best_match
from jsonschema.protocols import Validator

from .errors import Error
from .gather import gatherr
from .result import Err, Ok, Outcome, Result
from .schema import load_schema

logger: logging.Logger = logging.getLogger(__name__)

Decoded = Result[tuple[Outcome[Any, Any], ...], tuple[Error, ...]]


@cache
def _validator() -> Validator:
    schema: dict[str, Any] = load_schema()
    cls: type[Validator] = jsonschema.validators.validator_for(schema)
    cls.check_schema(schema)
    return cls(schema)


def decode_record(obj: object, path: str) -> Result[Outcome[Any, Any], Error]:
    """Turn one ``{"ok": ...}`` or ``{"err": ...}`` record into an outcome."""
    invalid: jsonschema.ValidationError | None = best_match(_validator().iter_errors(obj))
    if invalid is not None:
        return Err(Error(code="schema", message=invalid.message, path=path))
    record: dict[str, Any] = obj  # type: ignore[assignment]
    if "ok" in record:
        return Ok(Ok(record["ok"]))
    return Ok(Err(record["err"]))


def _decode_line(line: str, path: str) -> Result[Outcome[Any, Any], Error]:
    try:
        obj: object = json.loads(line)
    except json.JSONDecodeError as exc:
        return Err(Error(code="json", message=exc.msg, path=path))
    return decode_record(obj, path)


def decode_lines(lines: Iterable[str], source: str) -> Decoded:
    """Decode JSON Lines records, reporting every bad line at once."""
    records: Iterator[Result[Outcome[Any, Any], Error]] = (
        _decode_line(line, f"{source}:{lineno}")
        for lineno, line in enumerate(lines, 1)
        if line.strip()
    )
    decoded: Decoded = gatherr(records, ok_into=tuple, err_into=tuple)
    logger.debug("decoded %s from %s", "records" if decoded.is_ok() else "errors", source)
    return decoded


def decode_document(text: str, source: str) -> Decoded:
    """Decode a single JSON array of records."""
    try:
        doc: object = json.loads(text)
    except json.JSONDecodeError as exc:
        return Err((Error(code="json", message=exc.msg, path=f"{source}:{exc.lineno}"),))
    if not isinstance(doc, list):
        return Err((Error(code="schema", message="expected a JSON array of records", path=source),))
    records: Iterator[Result[Outcome[Any, Any], Error]] = (
        decode_record(obj, f"{source}[{index}]") for index, obj in enumerate(doc)
    )
    decoded: Decoded = gatherr(records, ok_into=tuple, err_into=tuple)
    logger.debug("decoded %s from %s", "records" if decoded.is_ok() else "errors", source)
    return decoded


def encode_result(result: Result[Iterable[Any], Iterable[Any]]) -> dict[str, list[Any]]:
    if isinstance(result, Ok):
        return {"ok": list(result.value)}
    return {"err": list(result.error)}
