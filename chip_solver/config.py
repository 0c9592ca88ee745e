from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .colors import Color
from .solver import SOLVER_CHOICES, SolverName

_TRUTHY = {"1", "true", "yes", "y", "on"}
_FALSY = {"0", "false", "no", "n", "off"}


@dataclass(frozen=True)
class SolverConfig:
    initial: Color = Color.Blue
    final: Color = Color.Green
    solver: SolverName = "dfs"
    guard_cycles: bool = True
    max_depth: Optional[int] = None

    @staticmethod
    def from_env(env: Optional[Mapping[str, str]] = None) -> "SolverConfig":
        """Read ``CHIP_*`` variables on top of the defaults."""
        env = os.environ if env is None else env
        cfg = SolverConfig()

        if env.get("CHIP_INITIAL_COLOR"):
            cfg = replace(cfg, initial=Color.parse(env["CHIP_INITIAL_COLOR"]))
        if env.get("CHIP_FINAL_COLOR"):
            cfg = replace(cfg, final=Color.parse(env["CHIP_FINAL_COLOR"]))

        solver = env.get("CHIP_SOLVER", "").strip().lower()
        if solver:
            if solver not in SOLVER_CHOICES:
                raise ValueError(f"CHIP_SOLVER must be one of {', '.join(SOLVER_CHOICES)} (got {solver!r})")
            cfg = replace(cfg, solver=solver)  # type: ignore[arg-type]

        guard = env.get("CHIP_GUARD_CYCLES", "").strip().lower()
        if guard:
            if guard not in _TRUTHY | _FALSY:
                raise ValueError(f"CHIP_GUARD_CYCLES must be a boolean flag (got {guard!r})")
            cfg = replace(cfg, guard_cycles=guard in _TRUTHY)

        depth = env.get("CHIP_MAX_DEPTH", "").strip()
        if depth:
            cfg = replace(cfg, max_depth=parse_max_depth(depth, source="CHIP_MAX_DEPTH"))

        return cfg

    def with_overrides(self, **overrides) -> "SolverConfig":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def parse_max_depth(text: str, *, source: str = "max depth") -> int:
    try:
        value = int(text)
    except ValueError as e:
        raise ValueError(f"{source} must be an integer (got {text!r})") from e
    if value < 1:
        raise ValueError(f"{source} must be positive (got {value})")
    return value
