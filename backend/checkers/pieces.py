from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Color(Enum):
    BLACK = "black"
    WHITE = "white"

    @property
    def opponent(self) -> "Color":
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    @property
    def crown_row(self) -> int:
        return 0 if self is Color.BLACK else 7


@dataclass(frozen=True, slots=True)
class Piece:
    color: Color
    crowned: bool = False

    def crown(self) -> "Piece":
        return replace(self, crowned=True)

    def can_step(self, from_row: int, to_row: int) -> bool:
        """Whether a simple move between the two rows goes a direction this piece may travel."""
        if to_row > from_row:
            return self.color is Color.WHITE or self.crowned
        if to_row < from_row:
            return self.color is Color.BLACK or self.crowned
        return False

    def __repr__(self) -> str:
        piece_type = "K" if self.crowned else "M"
        return f"{piece_type}({self.color.name})"
