from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Iterable

import typer

from .codec import Decoded, decode_document, decode_lines, encode_result
from .errors import Error
from .gather import gatherr
from .result import Result
from .schema import load_schema

FORMATS: tuple[str, ...] = ("jsonl", "json")

logger: logging.Logger = logging.getLogger(__name__)


def _unique(values: Iterable[Any]) -> list[Any]:
    # JSON values may be unhashable, so compare their canonical encoding
    seen: set[str] = set()
    kept: list[Any] = []
    for value in values:
        key: str = json.dumps(value, sort_keys=True)
        if key not in seen:
            seen.add(key)
            kept.append(value)
    return kept


def _read_source(path: Path | None) -> tuple[str, str]:
    if path is None or str(path) == "-":
        try:
            return typer.get_text_stream("stdin").read(), "<stdin>"
        except UnicodeDecodeError as exc:
            raise typer.BadParameter(f"Could not decode <stdin> as UTF-8: {exc.reason}") from exc
    try:
        return path.read_text(encoding="utf-8"), str(path)
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"Could not decode {path} as UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise typer.BadParameter(f"Could not read {path}: {exc.strerror}") from exc


def _decode(text: str, source: str, fmt: str) -> Decoded:
    if fmt == "json":
        return decode_document(text, source)
    # JSON Lines records end at "\n" only; other line breaks may sit inside strings
    lines: list[str] = [line.removesuffix("\r") for line in text.split("\n")]
    return decode_lines(lines, source)


app: typer.Typer = typer.Typer()


@app.command()
def collect(
    path: Path | None = typer.Argument(None),
    format: str = "jsonl",
    unique_errors: bool = False,
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Gather {"ok": ...} / {"err": ...} records into one result.

    PATH defaults to stdin. Prints {"ok": [...]} and exits 0 when every record
    succeeded, otherwise prints {"err": [...]} with every error and exits 1.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if format not in FORMATS:
        typer.echo(f"--format must be one of: {', '.join(FORMATS)}", err=True)
        raise typer.Exit(2)
    try:
        text, source = _read_source(path)
    except typer.BadParameter as err:
        typer.echo(str(err), err=True)
        raise typer.Exit(2) from err

    decoded: Decoded = _decode(text, source, format)
    if decoded.is_err():
        errors: tuple[Error, ...] = decoded.unwrap_err()
        for error in errors:
            typer.echo(str(error), err=True)
        raise typer.Exit(2)

    err_into: Callable[[Iterable[Any]], list[Any]] = _unique if unique_errors else list
    result: Result[list[Any], list[Any]] = gatherr(decoded.unwrap(), err_into=err_into)
    typer.echo(json.dumps(encode_result(result), sort_keys=True))
    if result.is_err():
        logger.debug("%d errors gathered from %s", len(result.unwrap_err()), source)
        raise typer.Exit(1)


@app.command()
def schema() -> None:
    """Print the JSON schema records are validated against."""
    typer.echo(json.dumps(load_schema(), indent=2, sort_keys=True))


if __name__ == "__main__":
    app()
