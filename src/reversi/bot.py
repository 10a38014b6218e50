"""
The algorithmic opponent.

It is deliberately weak: it plays the first legal cell in row-major order, not the best one.
"""

from typing import Optional

from src.reversi.board import Board
from src.reversi.moves import has_capture
from src.reversi.pieces import Cell
from src.reversi.square import Square


def first_legal_move(board: Board, piece: Cell) -> Optional[Square]:
    """None if the piece has no legal move anywhere"""
    return next(
        (square for square in board.empty_squares() if has_capture(board, square, piece)),
        None,
    )
