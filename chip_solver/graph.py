from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Tuple, Type

from .chips import ColorChip
from .colors import Color

logger = logging.getLogger(__name__)


class ChipGraph:
    """A directed multigraph over the closed color set.

    Every color of the domain is a key, even with no outgoing chips, so the
    search never has to handle a missing vertex. Reachable colors keep the
    order in which their chips were added; that order is the search tie-break.
    """

    def __init__(self, adjacency: Dict[Color, Tuple[Color, ...]]) -> None:
        self._adj: Dict[Color, Tuple[Color, ...]] = dict(adjacency)

    def reachable(self, color: Color) -> Tuple[Color, ...]:
        try:
            return self._adj[color]
        except KeyError as e:
            raise KeyError(f"Unknown color: {color!r}") from e

    def out_degree(self, color: Color) -> int:
        return len(self.reachable(color))

    def colors(self) -> List[Color]:
        return list(self._adj)

    def edges(self) -> Iterator[ColorChip]:
        """Yield every chip, grouped by start color, in insertion order."""
        for start, ends in self._adj.items():
            for end in ends:
                yield ColorChip(start, end)

    @property
    def chip_count(self) -> int:
        return sum(len(ends) for ends in self._adj.values())

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, color: object) -> bool:
        return color in self._adj

    def to_networkx(self):
        """Convert to a networkx.MultiDiGraph; parallel chips stay separate edges."""
        import networkx as nx

        g = nx.MultiDiGraph()
        for color in self._adj:
            g.add_node(color, label=color.value)
        for chip in self.edges():
            g.add_edge(chip.start, chip.end)
        return g


def build_chip_graph(chips: Iterable[ColorChip], colors: Type[Color] = Color) -> ChipGraph:
    adj: Dict[Color, List[Color]] = {color: [] for color in colors}
    count = 0
    for chip in chips:
        adj[chip.start].append(chip.end)
        count += 1
    logger.debug("Built chip graph: colors=%d, chips=%d", len(adj), count)
    return ChipGraph({color: tuple(ends) for color, ends in adj.items()})
