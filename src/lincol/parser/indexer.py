"""Replay of normalized events into a path -> position index."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from lincol.models.position import Position
from lincol.parser.events import (
    EventRecord,
    MappingEnd,
    MappingStart,
    Scalar,
    SequenceEnd,
    SequenceStart,
)
from lincol.parser.path import ROOT, Map, Path, Seq, render
from lincol.parser.positions import Positions

logger = logging.getLogger(__name__)


class FrameKind(StrEnum):
    DOCUMENT = "document"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


@dataclass
class _Frame:
    """One open nesting level of the walk.

    ``index`` is the position of the next element for sequence frames.
    """

    kind: FrameKind
    path: Path
    index: int = 0


class PositionIndexer:
    """Builds a ``Positions`` table from a complete, ordered event buffer.

    The walk mirrors the parser's nesting with an explicit stack, so deeply
    nested documents do not grow the call stack. Each record is consumed
    exactly once.

    Recorded positions:

    * a sequence element that is a scalar maps to the scalar's own position;
    * a mapping entry maps to the position of its *key*, whatever the value;
    * a mapping inside a sequence gets no entry of its own, only its fields.

    Event shapes the walk does not handle (nested sequences directly inside
    a sequence, for instance) close the current level without recording
    anything. They are logged, never raised.
    """

    def __init__(self, records: Sequence[EventRecord]) -> None:
        self._records = records
        self._cursor = 0
        self._entries: dict[str, Position] = {}

    def _next(self) -> EventRecord | None:
        if self._cursor >= len(self._records):
            return None
        record = self._records[self._cursor]
        self._cursor += 1
        return record

    def build(self) -> Positions:
        stack = [_Frame(FrameKind.DOCUMENT, ROOT)]
        while stack:
            record = self._next()
            if record is None:
                break
            frame = stack[-1]
            if frame.kind is FrameKind.DOCUMENT:
                self._step_document(stack, frame, record)
            elif frame.kind is FrameKind.SEQUENCE:
                self._step_sequence(stack, frame, record)
            else:
                self._step_mapping(stack, frame, record)
        logger.debug(
            "indexed %d paths from %d events", len(self._entries), self._cursor
        )
        return Positions(self._entries)

    # -- per-level transitions ----------------------------------------------

    def _step_document(self, stack: list[_Frame], frame: _Frame, record: EventRecord) -> None:
        # The document frame stays open so sibling documents are indexed too.
        event = record.event
        if isinstance(event, SequenceStart):
            stack.append(_Frame(FrameKind.SEQUENCE, frame.path))
        elif isinstance(event, MappingStart):
            stack.append(_Frame(FrameKind.MAPPING, frame.path))
        else:
            logger.debug("unhandled %r in document", event)
            stack.pop()

    def _step_sequence(self, stack: list[_Frame], frame: _Frame, record: EventRecord) -> None:
        event = record.event
        if isinstance(event, SequenceEnd):
            stack.pop()
        elif isinstance(event, Scalar):
            self._entries[render(Seq(frame.path, frame.index))] = record.position
            frame.index += 1
        elif isinstance(event, MappingStart):
            element = Seq(frame.path, frame.index)
            frame.index += 1
            stack.append(_Frame(FrameKind.MAPPING, element))
        else:
            logger.debug("unhandled %r in sequence", event)
            stack.pop()

    def _step_mapping(self, stack: list[_Frame], frame: _Frame, record: EventRecord) -> None:
        event = record.event
        if isinstance(event, MappingEnd):
            stack.pop()
        elif isinstance(event, Scalar):
            entry = Map(frame.path, event.value)
            self._entries[render(entry)] = record.position
            value = self._next()
            if value is None:
                return
            if isinstance(value.event, MappingStart):
                stack.append(_Frame(FrameKind.MAPPING, entry))
            elif isinstance(value.event, SequenceStart):
                stack.append(_Frame(FrameKind.SEQUENCE, entry))
        else:
            logger.debug("unhandled %r in mapping", event)
            stack.pop()


def build_positions(records: Sequence[EventRecord]) -> Positions:
    """Index ``records`` starting from the document root."""
    return PositionIndexer(records).build()
