"""Event collection, path rendering and position indexing."""

from lincol.parser.events import EventCollector, EventRecord, ScalarStyle
from lincol.parser.indexer import PositionIndexer, build_positions
from lincol.parser.loader import from_path, from_reader, from_str
from lincol.parser.path import ROOT, Map, Root, Seq, render
from lincol.parser.positions import Positions

__all__ = [
    "ROOT",
    "EventCollector",
    "EventRecord",
    "Map",
    "PositionIndexer",
    "Positions",
    "Root",
    "ScalarStyle",
    "Seq",
    "build_positions",
    "from_path",
    "from_reader",
    "from_str",
    "render",
]
