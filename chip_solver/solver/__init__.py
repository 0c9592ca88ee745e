from __future__ import annotations

import logging
from typing import Iterable, Union

from ..chips import ColorChip
from ..colors import Color
from ..graph import ChipGraph, build_chip_graph
from .dfs_solver import solve_with_dfs
from .stack_solver import solve_with_stack
from .types import Chain, SearchDepthExceededError, SolveResult, SolverName

logger = logging.getLogger(__name__)

SOLVER_CHOICES: tuple[SolverName, ...] = ("dfs", "stack")


def solve_chips(
    chips: Union[ChipGraph, Iterable[ColorChip]],
    *,
    initial: Color,
    final: Color,
    solver: SolverName = "dfs",
    guard_cycles: bool = True,
    max_depth: int | None = None,
) -> SolveResult:
    graph = chips if isinstance(chips, ChipGraph) else build_chip_graph(chips)
    if solver == "dfs":
        res = solve_with_dfs(graph, initial=initial, final=final, guard_cycles=guard_cycles, max_depth=max_depth)
    elif solver == "stack":
        res = solve_with_stack(graph, initial=initial, final=final, guard_cycles=guard_cycles, max_depth=max_depth)
    else:
        raise ValueError(f"Unknown solver {solver!r}. Choose one of: {', '.join(SOLVER_CHOICES)}")

    if res.chain is None:
        logger.info("No chain from %s to %s (%s, %d calls)", initial, final, solver, res.calls)
    else:
        logger.info("Chain from %s to %s: %d chip(s) (%s, %d calls)", initial, final, len(res.chain), solver, res.calls)
    return res


__all__ = [
    "Chain",
    "SearchDepthExceededError",
    "SolveResult",
    "SolverName",
    "SOLVER_CHOICES",
    "solve_chips",
    "solve_with_dfs",
    "solve_with_stack",
]
