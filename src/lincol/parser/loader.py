"""Construction of position tables from YAML or JSON text."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any

from ruamel.yaml import YAML
from ruamel.yaml.error import MarkedYAMLError, YAMLError

from lincol.errors import DecodeError, DocumentTooLargeError, ParseError, SourceReadError
from lincol.parser.events import EventCollector
from lincol.parser.indexer import build_positions
from lincol.parser.positions import Positions
from lincol.settings import DEFAULT_MAX_DOCUMENT_SIZE

logger = logging.getLogger(__name__)


def _check_document_size(content: str, limit: int) -> None:
    if len(content) > limit:
        raise DocumentTooLargeError(
            f"document exceeds maximum size ({len(content):,} chars > {limit:,} limit)"
        )


def _parse_error(exc: YAMLError) -> ParseError:
    mark = exc.problem_mark if isinstance(exc, MarkedYAMLError) else None
    if mark is None:
        return ParseError(str(exc))
    return ParseError(str(exc), line=mark.line + 1, column=mark.column)


def collect_events(content: str) -> EventCollector:
    """Run the ruamel.yaml event parser over ``content``.

    Every document in the stream is parsed before anything is returned;
    a syntax error aborts the whole run.
    """
    collector = EventCollector()
    yaml = YAML(typ="safe", pure=True)
    try:
        for event in yaml.parse(content):
            collector.on_event(event, event.start_mark)
    except YAMLError as exc:
        raise _parse_error(exc) from exc
    return collector


def from_str(content: str, *, max_document_size: int = DEFAULT_MAX_DOCUMENT_SIZE) -> Positions:
    """Load a lookup table of ``Position`` information from text.

    Example::

        >>> positions = from_str("foo:\\n    - bar: baz\\n      boom: true\\n")
        >>> positions.get("/foo/0/boom")
        Position(line=3, col=6)
        >>> positions.get("/foo/0/zoom") is None
        True
    """
    _check_document_size(content, max_document_size)
    collector = collect_events(content)
    logger.debug("collected %d events", len(collector))
    return build_positions(collector.records)


def from_reader(
    stream: IO[Any], *, max_document_size: int = DEFAULT_MAX_DOCUMENT_SIZE
) -> Positions:
    """Load a lookup table from a readable stream.

    Binary streams are decoded as UTF-8; text streams are used as is.
    """
    try:
        data = stream.read()
    except UnicodeDecodeError as exc:
        raise DecodeError(f"source is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise SourceReadError(f"failed to read source: {exc}") from exc
    if isinstance(data, bytes | bytearray):
        try:
            data = bytes(data).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"source is not valid UTF-8: {exc}") from exc
    return from_str(data, max_document_size=max_document_size)


def from_path(
    path: str | Path, *, max_document_size: int = DEFAULT_MAX_DOCUMENT_SIZE
) -> Positions:
    """Load a lookup table from a file on disk."""
    path = Path(path)
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise SourceReadError(f"failed to open {path}: {exc}") from exc
    with handle:
        return from_reader(handle, max_document_size=max_document_size)
