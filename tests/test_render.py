from chip_solver.chips import ColorChip
from chip_solver.colors import Color
from chip_solver.render import FAILURE_MSG, format_result
from chip_solver.solver import SolveResult


def test_success_lists_each_chip_between_the_endpoints():
    res = SolveResult(
        initial=Color.Blue,
        final=Color.Green,
        chain=(ColorChip(Color.Blue, Color.Red), ColorChip(Color.Red, Color.Green)),
    )
    assert format_result(res) == "Unlocked!\nBlue [Blue, Red] [Red, Green] Green"


def test_failure_message():
    res = SolveResult(initial=Color.Blue, final=Color.Green, chain=None)
    assert format_result(res) == FAILURE_MSG == "Cannot unlock master panel"
