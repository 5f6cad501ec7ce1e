"""The interaction layer: holds the loaded graph and runs layouts on it."""

from __future__ import annotations

import dataclasses
import os
import random
from collections.abc import Callable, Iterable, Sequence
from enum import Enum

from .layout import circle_layout, force_directed_layout, highlight_densest, random_layout
from .model import Node
from .reader import read_links

__all__ = ["LayoutKind", "Session", "build_nodes"]


class LayoutKind(Enum):
    """The layout algorithms a session can apply."""

    RANDOM = 1
    FORCE_DIRECTED = 2
    CIRCLE = 3


def build_nodes(links: Iterable[tuple[int, int]]) -> list[Node]:
    """Build an adjacency list from one-based ``(first, second)`` links.

    The number of nodes is the largest node number seen; every link adds
    each end to the other's neighbors, as zero-based indices.
    """
    pairs = list(links)
    for first, second in pairs:
        if first < 1 or second < 1:
            raise ValueError(f"node numbers start at 1, got link ({first}, {second})")
    count = max((max(pair) for pair in pairs), default=0)
    nodes = [Node(id=number) for number in range(1, count + 1)]
    for first, second in pairs:
        nodes[first - 1].neighbors.append(second - 1)
        nodes[second - 1].neighbors.append(first - 1)
    return nodes


def _copy_nodes(nodes: Sequence[Node]) -> list[Node]:
    return [dataclasses.replace(node, neighbors=list(node.neighbors)) for node in nodes]


class Session:
    """Holds the current graph and publishes every change to ``on_change``.

    ``on_change`` receives a fresh copy of the node list whenever the graph
    is loaded or laid out again.
    """

    def __init__(
        self,
        on_change: Callable[[list[Node]], None] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.on_change = on_change
        self.rng = rng or random.Random()
        self._nodes: list[Node] = []

    @property
    def nodes(self) -> list[Node]:
        """A copy of the current nodes."""
        return _copy_nodes(self._nodes)

    def _publish(self) -> None:
        if self.on_change is not None:
            self.on_change(_copy_nodes(self._nodes))

    def load_file(self, path: str | os.PathLike[str]) -> None:
        """Load an edge-list file as the current graph."""
        self.load_links(read_links(path))

    def load_links(self, links: Iterable[tuple[int, int]]) -> None:
        """Replace the current graph with one built from ``links``."""
        self._nodes = build_nodes(links)
        self._publish()

    def layout(
        self,
        kind: LayoutKind | int | None = None,
        emphasize_dense: bool = False,
    ) -> None:
        """Apply a layout, then optionally color the four densest nodes.

        With ``kind`` of ``None`` the positions are left as they are.
        """
        working = _copy_nodes(self._nodes)
        if kind is not None:
            kind = LayoutKind(kind)
            if kind is LayoutKind.RANDOM:
                random_layout(working, self.rng)
            elif kind is LayoutKind.FORCE_DIRECTED:
                force_directed_layout(working, self.rng)
            else:
                circle_layout(working)
        if emphasize_dense and working:
            highlight_densest(working)

        for node, placed in zip(self._nodes, working):
            node.x = placed.x
            node.y = placed.y
            node.color = placed.color
        self._publish()