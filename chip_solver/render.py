from __future__ import annotations

from .solver import SolveResult

SUCCESS_MSG = "Unlocked!"
FAILURE_MSG = "Cannot unlock master panel"
INPUT_ERROR_MSG = "Invalid input, please try again!"


def format_result(result: SolveResult) -> str:
    """Render a result the way the panel reports it.

    Success is the message followed by ``Initial [a, b] [b, c] ... Final``.
    """
    if result.chain is None:
        return FAILURE_MSG
    links = " ".join(f"[{chip}]" for chip in result.chain)
    return f"{SUCCESS_MSG}\n{result.initial} {links} {result.final}"
