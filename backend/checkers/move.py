from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple

BOARD_MIN = 0
BOARD_MAX = 7


class Coordinate(NamedTuple):
    """A square as (column, row); only 0..7 on both axes is on the board."""

    x: int
    y: int

    def on_board(self) -> bool:
        return BOARD_MIN <= self.x <= BOARD_MAX and BOARD_MIN <= self.y <= BOARD_MAX

    def move_targets_from(self) -> Iterator["Coordinate"]:
        x, y = self
        if x >= 1:
            yield Coordinate(x - 1, y + 1)
        yield Coordinate(x + 1, y + 1)
        if y >= 1:
            yield Coordinate(x + 1, y - 1)
        if x >= 1 and y >= 1:
            yield Coordinate(x - 1, y - 1)

    def jump_targets_from(self) -> Iterator["Coordinate"]:
        # only the subtracting branches are guarded; off-board results of the
        # adding branches are rejected by the legality checks
        x, y = self
        if y >= 2:
            yield Coordinate(x + 2, y - 2)
        yield Coordinate(x + 2, y + 2)
        if x >= 2 and y >= 2:
            yield Coordinate(x - 2, y - 2)
        if x >= 2:
            yield Coordinate(x - 2, y + 2)

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


@dataclass(frozen=True, slots=True)
class Move:
    start: Coordinate
    end: Coordinate

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", Coordinate(*self.start))
        object.__setattr__(self, "end", Coordinate(*self.end))

    @classmethod
    def of(cls, start: tuple[int, int], end: tuple[int, int]) -> "Move":
        return cls(Coordinate(*start), Coordinate(*end))

    @property
    def is_jump(self) -> bool:
        return abs(self.end.x - self.start.x) == 2 and abs(self.end.y - self.start.y) == 2

    def __str__(self) -> str:
        connector = " x " if self.is_jump else " - "
        return connector.join((str(self.start), str(self.end)))
