from __future__ import annotations

import logging
from typing import Iterator, List, Set, Tuple

from ..chips import ColorChip
from ..colors import Color
from ..graph import ChipGraph
from .types import SearchDepthExceededError, SolveResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 10_000


def solve_with_stack(
    graph: ChipGraph,
    *,
    initial: Color,
    final: Color,
    guard_cycles: bool = True,
    max_depth: int | None = None,
) -> SolveResult:
    """Iterative twin of the DFS solver.

    Each frame holds a color and an iterator over its reachable colors, so
    the exploration order and the chain found match the recursive solver
    while chain length is no longer tied to the interpreter recursion limit.
    """

    limit = DEFAULT_MAX_DEPTH if max_depth is None else max_depth
    frames: List[Tuple[Color, Iterator[Color]]] = [(initial, iter(graph.reachable(initial)))]
    on_chain: Set[Color] = {initial}
    calls = 1

    while frames:
        current, ends = frames[-1]
        end = next(ends, None)
        if end is None:
            frames.pop()
            on_chain.discard(current)
            continue

        if end == final:
            path = [color for color, _ in frames]
            chain = [ColorChip(a, b) for a, b in zip(path, path[1:])]
            chain.append(ColorChip(current, final))
            logger.debug("stack: %s -> %s, calls=%d, solved=True", initial, final, calls)
            return SolveResult(initial=initial, final=final, chain=tuple(chain), calls=calls)

        if guard_cycles and end in on_chain:
            continue
        if not guard_cycles and len(frames) > limit:
            raise SearchDepthExceededError(f"Stack search exceeded max depth {limit} (cycle reachable from {initial}?)")

        frames.append((end, iter(graph.reachable(end))))
        on_chain.add(end)
        calls += 1

    logger.debug("stack: %s -> %s, calls=%d, solved=False", initial, final, calls)
    return SolveResult(initial=initial, final=final, chain=None, calls=calls)
