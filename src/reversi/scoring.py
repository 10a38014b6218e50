"""Counting pieces and deciding the outcome of a finished game"""

from src.core.shared_types import Result
from src.reversi.board import Board
from src.reversi.pieces import PLAYER_PIECES, Cell


def count_pieces(board: Board) -> dict[Cell, int]:
    """Tally the pieces each side has on the board"""
    return {piece: board.count(piece) for piece in PLAYER_PIECES}


def score(board: Board, human_side: Cell) -> Result:
    """The side with more pieces wins. Only the human's result is reported."""
    counts = count_pieces(board)
    human_count = counts[human_side]
    bot_count = counts[human_side.opponent()]
    if human_count > bot_count:
        return Result.WIN
    if human_count < bot_count:
        return Result.LOSE
    return Result.TIE
