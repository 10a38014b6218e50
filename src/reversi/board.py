"""The Game board: pure data. The rules that change it live in src/reversi/moves.py"""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import InvalidFormatError
from src.reversi.pieces import Cell
from src.reversi.square import ALL_SQUARES, BOARD_DIMENSIONS, Square

ROW_SEPARATOR = "/"

# Four pieces in the centre. PIECE_A (moves first) on the anti-diagonal
STARTING_POSITION: dict[Square, Cell] = {
    Square(3, 3): Cell.PIECE_B,
    Square(3, 4): Cell.PIECE_A,
    Square(4, 3): Cell.PIECE_A,
    Square(4, 4): Cell.PIECE_B,
}


@dataclass
class Board:
    position: dict[Square, Cell]

    @classmethod
    def empty(cls) -> Self:
        return cls({square: Cell.EMPTY for square in ALL_SQUARES})

    @classmethod
    def starting_position(cls) -> Self:
        board = cls.empty()
        board.position.update(STARTING_POSITION)
        return board

    @classmethod
    def from_text(cls, text: str) -> Self:
        """Construct a board from its row text.

        Rows are written top (row 0) to bottom, separated by slashes. Each row holds 8 characters:
        '-' for an empty cell, 'X' for PIECE_A and 'O' for PIECE_B.
        ex. starting position:
        --------/--------/--------/---OX---/---XO---/--------/--------/--------
        """
        rows = text.strip().split(ROW_SEPARATOR)
        if len(rows) != BOARD_DIMENSIONS[0]:
            raise InvalidFormatError(
                f"Board text must contain {BOARD_DIMENSIONS[0]} rows, got {len(rows)}: {text!r}"
            )

        position: dict[Square, Cell] = {}
        for row_idx, row_text in enumerate(rows):
            if len(row_text) != BOARD_DIMENSIONS[1]:
                raise InvalidFormatError(
                    f"Row {row_idx} must contain {BOARD_DIMENSIONS[1]} cells: {row_text!r}"
                )
            for col_idx, character in enumerate(row_text):
                try:
                    position[Square(row_idx, col_idx)] = Cell(character)
                except ValueError:
                    raise InvalidFormatError(
                        f"Unknown cell character {character!r} in row {row_idx}"
                    ) from None
        return cls(position)

    def to_text(self) -> str:
        return ROW_SEPARATOR.join(
            "".join(cell.value for cell in row) for row in self.rows()
        )

    def rows(self) -> list[list[Cell]]:
        """8x8 grid, row-major"""
        return [
            [self.piece(Square(row, col)) for col in range(BOARD_DIMENSIONS[1])]
            for row in range(BOARD_DIMENSIONS[0])
        ]

    def piece(self, square: Square) -> Cell:
        return self.position[square]

    def place_piece(self, piece: Cell, square: Square) -> None:
        """Low level setter. Game rules must go through moves.apply_move"""
        self.position[square] = piece

    def empty_squares(self) -> list[Square]:
        """Row-major, so callers scanning for 'the first' square get the reference order"""
        return [square for square in ALL_SQUARES if self.position[square] == Cell.EMPTY]

    def count(self, piece: Cell) -> int:
        return sum(1 for cell in self.position.values() if cell == piece)

    def count_occupied(self) -> int:
        return len(ALL_SQUARES) - self.count(Cell.EMPTY)
