"""Hierarchical location of a value inside a document."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Root:
    """The document root."""


@dataclass(frozen=True)
class Seq:
    """An element of a sequence at ``index``."""

    parent: Path
    index: int


@dataclass(frozen=True)
class Map:
    """The entry of a mapping under ``key``."""

    parent: Path
    key: str


Path = Root | Seq | Map

ROOT = Root()


def render(path: Path) -> str:
    """Render ``path`` as a JSON-Pointer-like string.

    Only a mapping entry directly under the root avoids the extra separator,
    so a top-level sequence element renders as ``//0``. Keys are emitted
    literally; ``~`` and ``/`` are not escaped.
    """
    chain: list[Seq | Map] = []
    node = path
    while not isinstance(node, Root):
        chain.append(node)
        node = node.parent

    rendered = "/"
    for node in reversed(chain):
        if isinstance(node, Map):
            if isinstance(node.parent, Root):
                rendered += node.key
            else:
                rendered += f"/{node.key}"
        else:
            rendered += f"/{node.index}"
    return rendered
