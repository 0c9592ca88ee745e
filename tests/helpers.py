from typing import List, Sequence, Tuple

from chip_solver.chips import ColorChip
from chip_solver.colors import Color


def chips(*pairs: Tuple[str, str]) -> List[ColorChip]:
    return [ColorChip(Color.parse(a), Color.parse(b)) for a, b in pairs]


def assert_connected(chain: Sequence[ColorChip], initial: Color, final: Color) -> None:
    assert chain, "chain must not be empty"
    assert chain[0].start is initial
    assert chain[-1].end is final
    for a, b in zip(chain, chain[1:]):
        assert a.end is b.start
