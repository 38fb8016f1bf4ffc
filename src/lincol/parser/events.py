"""Normalized parse events and the receiver that collects them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from ruamel.yaml.events import (
    MappingEndEvent,
    MappingStartEvent,
    ScalarEvent,
    SequenceEndEvent,
    SequenceStartEvent,
)

from lincol.models.position import Position


class ScalarStyle(StrEnum):
    PLAIN = "plain"
    SINGLE_QUOTED = "single_quoted"
    DOUBLE_QUOTED = "double_quoted"
    LITERAL = "literal"
    FOLDED = "folded"


_STYLE_INDICATORS = {
    "'": ScalarStyle.SINGLE_QUOTED,
    '"': ScalarStyle.DOUBLE_QUOTED,
    "|": ScalarStyle.LITERAL,
    ">": ScalarStyle.FOLDED,
}


@dataclass(frozen=True)
class Scalar:
    """A scalar token: a mapping key or a non-container value."""

    value: str
    style: ScalarStyle = ScalarStyle.PLAIN
    tag: str | None = None


@dataclass(frozen=True)
class SequenceStart:
    pass


@dataclass(frozen=True)
class SequenceEnd:
    pass


@dataclass(frozen=True)
class MappingStart:
    pass


@dataclass(frozen=True)
class MappingEnd:
    pass


Event = Scalar | SequenceStart | SequenceEnd | MappingStart | MappingEnd


@dataclass(frozen=True)
class EventRecord:
    """An event paired with the position where its token began."""

    event: Event
    position: Position


def normalize(event: Any) -> Event | None:
    """Convert a ruamel.yaml event to its internal form.

    Returns ``None`` for events the indexer does not track: stream and
    document boundaries, and aliases (alias resolution is not supported).
    """
    if isinstance(event, ScalarEvent):
        tag = event.tag
        return Scalar(
            value=event.value,
            style=_STYLE_INDICATORS.get(event.style, ScalarStyle.PLAIN),
            tag=str(tag) if tag is not None else None,
        )
    if isinstance(event, SequenceStartEvent):
        return SequenceStart()
    if isinstance(event, SequenceEndEvent):
        return SequenceEnd()
    if isinstance(event, MappingStartEvent):
        return MappingStart()
    if isinstance(event, MappingEndEvent):
        return MappingEnd()
    return None


class EventCollector:
    """Receives parser events in order and buffers the structural ones."""

    def __init__(self) -> None:
        self._records: list[EventRecord] = []

    def on_event(self, event: Any, marker: Any) -> None:
        normalized = normalize(event)
        if normalized is None:
            return
        self._records.append(EventRecord(normalized, Position.from_mark(marker)))

    @property
    def records(self) -> tuple[EventRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)
