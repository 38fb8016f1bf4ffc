"""Tests for event normalization."""

from __future__ import annotations

from types import SimpleNamespace

from lincol import Position
from lincol.parser.events import (
    EventCollector,
    MappingEnd,
    MappingStart,
    Scalar,
    ScalarStyle,
    SequenceEnd,
    SequenceStart,
)
from lincol.parser.loader import collect_events


def _events(content: str) -> list[object]:
    return [record.event for record in collect_events(content).records]


class TestEventCollector:
    def test_drops_stream_and_document_events(self) -> None:
        assert _events("a: 1\n") == [
            MappingStart(),
            Scalar("a"),
            Scalar("1"),
            MappingEnd(),
        ]

    def test_preserves_sequence_nesting(self) -> None:
        assert _events("- x\n- y\n") == [
            SequenceStart(),
            Scalar("x"),
            Scalar("y"),
            SequenceEnd(),
        ]

    def test_drops_alias_events(self) -> None:
        events = _events("a: &anchor 1\nb: *anchor\n")
        assert events == [
            MappingStart(),
            Scalar("a"),
            Scalar("1"),
            Scalar("b"),
            MappingEnd(),
        ]

    def test_empty_document_has_no_events(self) -> None:
        assert len(collect_events("")) == 0

    def test_scalar_styles(self) -> None:
        events = _events("'single': \"double\"\nlit: |\n  text\nfold: >\n  text\nplain: x\n")
        styles = [event.style for event in events if isinstance(event, Scalar)]
        assert styles == [
            ScalarStyle.SINGLE_QUOTED,
            ScalarStyle.DOUBLE_QUOTED,
            ScalarStyle.PLAIN,
            ScalarStyle.LITERAL,
            ScalarStyle.PLAIN,
            ScalarStyle.FOLDED,
            ScalarStyle.PLAIN,
            ScalarStyle.PLAIN,
        ]

    def test_explicit_tag_is_kept(self) -> None:
        events = _events("value: !custom thing\n")
        scalar = events[2]
        assert isinstance(scalar, Scalar)
        assert scalar.value == "thing"
        assert scalar.tag is not None and scalar.tag.endswith("custom")

    def test_records_token_start_positions(self) -> None:
        records = collect_events("foo:\n  bar: baz\n").records
        scalars = [r for r in records if isinstance(r.event, Scalar)]
        assert [r.position for r in scalars] == [
            Position(line=1, col=0),
            Position(line=2, col=2),
            Position(line=2, col=7),
        ]

    def test_ignores_unknown_events(self) -> None:
        collector = EventCollector()
        collector.on_event(object(), SimpleNamespace(line=0, column=0))
        assert collector.records == ()
