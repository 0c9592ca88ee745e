from __future__ import annotations

import logging
import sys
from typing import List, Optional, Set

from ..chips import ColorChip
from ..colors import Color
from ..graph import ChipGraph
from .types import SearchDepthExceededError, SolveResult

logger = logging.getLogger(__name__)


def default_max_depth() -> int:
    # Leave room for the caller's own frames below the search.
    return max(1, sys.getrecursionlimit() // 2)


def solve_with_dfs(
    graph: ChipGraph,
    *,
    initial: Color,
    final: Color,
    guard_cycles: bool = True,
    max_depth: int | None = None,
) -> SolveResult:
    """Solve using a recursive backtracking DFS from `initial`.

    Reachable colors are tried in chip insertion order and the first chain
    that reaches `final` wins. With `guard_cycles` a color already on the
    current chain is never re-entered; without it a reachable cycle recurses
    until `max_depth` (capped at half the recursion limit) is exceeded.
    """

    # Deeper bounds would surface as RecursionError instead.
    limit = default_max_depth() if max_depth is None else min(max_depth, default_max_depth())
    on_chain: Set[Color] = set()
    calls = 0

    def search(current: Color, depth: int) -> Optional[List[ColorChip]]:
        nonlocal calls
        calls += 1
        if not guard_cycles and depth > limit:
            raise SearchDepthExceededError(f"DFS exceeded max depth {limit} (cycle reachable from {initial}?)")

        ends = graph.reachable(current)
        if not ends:
            return None

        on_chain.add(current)
        try:
            for end in ends:
                if end == final:
                    return [ColorChip(current, final)]
                if guard_cycles and end in on_chain:
                    continue
                rest = search(end, depth + 1)
                if rest is not None:
                    rest.insert(0, ColorChip(current, end))
                    return rest
            return None
        finally:
            on_chain.discard(current)

    chain = search(initial, 0)
    logger.debug("dfs: %s -> %s, calls=%d, solved=%s", initial, final, calls, chain is not None)
    return SolveResult(
        initial=initial,
        final=final,
        chain=tuple(chain) if chain is not None else None,
        calls=calls,
    )
