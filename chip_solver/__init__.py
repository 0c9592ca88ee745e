from .chips import ChipParseError, ChipSet, ColorChip
from .colors import Color
from .config import SolverConfig
from .graph import ChipGraph, build_chip_graph
from .solver import SOLVER_CHOICES, SearchDepthExceededError, SolveResult, solve_chips

__all__ = [
    "ChipGraph",
    "ChipParseError",
    "ChipSet",
    "Color",
    "ColorChip",
    "SOLVER_CHOICES",
    "SearchDepthExceededError",
    "SolveResult",
    "SolverConfig",
    "build_chip_graph",
    "solve_chips",
]
