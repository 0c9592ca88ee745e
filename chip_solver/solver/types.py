from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple

from ..chips import ColorChip
from ..colors import Color

SolverName = Literal["dfs", "stack"]

Chain = Tuple[ColorChip, ...]


class SearchDepthExceededError(ValueError):
    pass


@dataclass(frozen=True)
class SolveResult:
    initial: Color
    final: Color
    chain: Optional[Chain]  # None => no chain exists
    calls: int = field(default=0, compare=False)  # search steps taken

    @property
    def solved(self) -> bool:
        return self.chain is not None
