"""Defines the states a cell on the board can be in"""

from enum import Enum
from typing import Self

from src.core.shared_types import CellState, Side


class Cell(Enum):
    """Values are the characters used when printing a board. PIECE_A always moves first."""

    EMPTY = "-"
    PIECE_A = "X"
    PIECE_B = "O"

    @classmethod
    def from_side(cls, side: Side) -> Self:
        return cls(side.value)

    def to_side(self) -> Side:
        if self == Cell.EMPTY:
            raise ValueError("An empty cell does not belong to a side")
        return Side(self.value)

    def to_state(self) -> CellState:
        return CellState(self.value)

    def opponent(self) -> "Cell":
        if self == Cell.EMPTY:
            raise ValueError("An empty cell has no opponent")
        return Cell.PIECE_B if self == Cell.PIECE_A else Cell.PIECE_A


PLAYER_PIECES: tuple[Cell, Cell] = (Cell.PIECE_A, Cell.PIECE_B)
