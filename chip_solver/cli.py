from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from .chips import ChipParseError, ChipSet
from .colors import Color
from .config import SolverConfig, parse_max_depth
from .graph import build_chip_graph
from .render import INPUT_ERROR_MSG, format_result
from .solver import SOLVER_CHOICES, SearchDepthExceededError, solve_chips
from .viz import write_plotly_html

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_NO_SOLUTION = 2
EXIT_DEPTH_EXCEEDED = 3


def _add_common(p: argparse.ArgumentParser) -> None:
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("chips", nargs="?", type=str, help='Inline chip list, e.g. "[Blue, Yellow] [Yellow, Green]"')
    src.add_argument("--file", type=str, help="Path to a chip list (.json or text)")
    p.add_argument("--initial", type=str, default=None, help="Initial color (default: Blue or $CHIP_INITIAL_COLOR)")
    p.add_argument("--final", type=str, default=None, help="Final color (default: Green or $CHIP_FINAL_COLOR)")
    p.add_argument("--solver", choices=SOLVER_CHOICES, default=None, help="Search backend")
    p.add_argument("--no-cycle-guard", action="store_true", help="Allow re-entering colors already on the chain")
    p.add_argument("--max-depth", type=str, default=None, help="Depth bound for unguarded search (positive integer)")
    p.add_argument("-v", "--verbose", action="count", default=0, help="-v for INFO, -vv for DEBUG logging")


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="chip_solver", description="Chain color chips from an initial to a final color")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_solve = sub.add_parser("solve", help="Find a chip chain and print it")
    _add_common(p_solve)

    p_viz = sub.add_parser("visualize", help="Find a chip chain and render the chip graph to an HTML file")
    _add_common(p_viz)
    p_viz.add_argument("--out", type=str, default="out/chips.html", help="Output HTML path")

    args = parser.parse_args(list(argv) if argv is not None else None)
    _configure_logging(args.verbose)

    try:
        chip_set = ChipSet.from_file(args.file) if args.file else ChipSet.from_text(args.chips)
        if not chip_set.chips:
            raise ChipParseError("No chips given")
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Parsed input: %s", chip_set.to_json())
        cfg = SolverConfig.from_env().with_overrides(
            initial=chip_set.initial,
            final=chip_set.final,
        ).with_overrides(
            initial=Color.parse(args.initial) if args.initial else None,
            final=Color.parse(args.final) if args.final else None,
            solver=args.solver,
            guard_cycles=False if args.no_cycle_guard else None,
            max_depth=parse_max_depth(args.max_depth, source="--max-depth") if args.max_depth else None,
        )
    except ValueError as e:
        logger.warning("Rejected input: %s", e)
        print(INPUT_ERROR_MSG)
        return EXIT_INPUT_ERROR

    graph = build_chip_graph(chip_set.chips)
    try:
        res = solve_chips(
            graph,
            initial=cfg.initial,
            final=cfg.final,
            solver=cfg.solver,
            guard_cycles=cfg.guard_cycles,
            max_depth=cfg.max_depth,
        )
    except SearchDepthExceededError as e:
        logger.error("%s", e)
        return EXIT_DEPTH_EXCEEDED

    print(format_result(res))

    if args.cmd == "visualize":
        source = Path(args.file).name if args.file else "inline"
        out = write_plotly_html(graph, out_path=args.out, result=res, title=f"Chips: {source}")
        print(f"Wrote chip graph visualization: {out}")

    return EXIT_OK if res.solved else EXIT_NO_SOLUTION
