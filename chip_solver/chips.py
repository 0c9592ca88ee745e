from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field, ValidationError

from .colors import Color


class ChipParseError(ValueError):
    pass


@dataclass(frozen=True)
class ColorChip:
    start: Color
    end: Color

    def __str__(self) -> str:
        return f"{self.start}, {self.end}"


_CHIP_SEPARATOR = re.compile(r"\]\s*\[")
_COLOR_SEPARATOR = re.compile(r",\s*")


class ChipSetModel(BaseModel):
    chips: List[Tuple[str, str]]
    initial: Optional[str] = None
    final: Optional[str] = None
    meta: Dict[str, Any] = Field(default_factory=dict)


@dataclass
class ChipSet:
    """An ordered collection of chips plus optional endpoint overrides.

    - `chips` keeps input order; it decides which chain the search finds first.
    - `initial` / `final` are only set by JSON input and override the
      configured endpoints when present.
    """

    chips: List[ColorChip]
    initial: Optional[Color] = None
    final: Optional[Color] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.chips)

    @staticmethod
    def from_pairs(pairs: Sequence[Tuple[Any, Any]]) -> "ChipSet":
        chips: List[ColorChip] = []
        for start, end in pairs:
            chips.append(ColorChip(_as_color(start), _as_color(end)))
        return ChipSet(chips=chips)

    @staticmethod
    def from_file(path: str | Path) -> "ChipSet":
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ChipParseError(f"Cannot read chip file {str(path)!r}: {e.strerror}") from e
        if path.suffix.lower() == ".json":
            chip_set = ChipSet.from_json(text)
        else:
            lines = [ln.strip() for ln in text.splitlines()]
            chip_set = ChipSet.from_text(" ".join(ln for ln in lines if ln and not ln.startswith("#")))
        chip_set.meta["source"] = str(path)
        return chip_set

    @staticmethod
    def from_json(text: str) -> "ChipSet":
        try:
            model = ChipSetModel.model_validate_json(text)
        except ValidationError as e:
            raise ChipParseError(f"Invalid chip JSON: {e.error_count()} validation error(s)") from e

        chip_set = ChipSet.from_pairs(model.chips)
        chip_set.initial = _as_color(model.initial) if model.initial is not None else None
        chip_set.final = _as_color(model.final) if model.final is not None else None
        chip_set.meta = dict(model.meta)
        return chip_set

    @staticmethod
    def from_text(text: str) -> "ChipSet":
        """Parse the inline form ``[Blue, Yellow] [Red, Green] ...``."""
        raw = text.strip()
        if not raw.startswith("[") or not raw.endswith("]"):
            raise ChipParseError("Chip list must be wrapped in [ ] brackets")

        chips: List[ColorChip] = []
        for part in _CHIP_SEPARATOR.split(raw[1:-1]):
            names = _COLOR_SEPARATOR.split(part.strip())
            if len(names) != 2:
                raise ChipParseError(f"Chip [{part}] must name exactly two colors")
            chips.append(ColorChip(_as_color(names[0]), _as_color(names[1])))
        return ChipSet(chips=chips)

    def to_json(self) -> str:
        obj: Dict[str, Any] = {"chips": [[c.start.value, c.end.value] for c in self.chips]}
        if self.initial is not None:
            obj["initial"] = self.initial.value
        if self.final is not None:
            obj["final"] = self.final.value
        if self.meta:
            obj["meta"] = self.meta
        return json.dumps(obj, indent=2, sort_keys=True)


def _as_color(value: Any) -> Color:
    if isinstance(value, Color):
        return value
    try:
        return Color.parse(value)
    except ValueError as e:
        raise ChipParseError(str(e)) from e
