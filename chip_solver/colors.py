from __future__ import annotations

from enum import Enum


class Color(Enum):
    """The closed set of chip colors.

    Declaration order is the enumeration order used when building the chip
    graph and when laying colors out for plots.
    """

    Red = "Red"
    Green = "Green"
    Blue = "Blue"
    Yellow = "Yellow"
    Purple = "Purple"
    Orange = "Orange"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Color":
        key = str(text).strip().lower()
        for color in cls:
            if color.value.lower() == key:
                return color
        names = ", ".join(c.value for c in cls)
        raise ValueError(f"Unknown color {text!r} (expected one of: {names})")


# Plot colors; the enum members are names, not hex values.
COLOR_HEX = {
    Color.Red: "#d62728",
    Color.Green: "#2ca02c",
    Color.Blue: "#1f77b4",
    Color.Yellow: "#bcbd22",
    Color.Purple: "#9467bd",
    Color.Orange: "#ff7f0e",
}
