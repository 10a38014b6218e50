"""Unit tests for /src/reversi/bot.py"""

from typing import Callable

from src.reversi.board import Board
from src.reversi.bot import first_legal_move
from src.reversi.moves import legal_moves
from src.reversi.pieces import Cell
from src.reversi.square import Square


def test_first_legal_move_opening() -> None:
    board = Board.starting_position()
    assert first_legal_move(board, Cell.PIECE_A) == Square(2, 3)
    assert first_legal_move(board, Cell.PIECE_B) == Square(2, 4)


def test_first_is_not_best(board_from_rows: Callable[[list[str]], Board]) -> None:
    """(0,0) flips one piece, (7,0) would flip six. The bot still takes (0,0)."""
    board = board_from_rows(
        [
            "-OX-----",
            "--------",
            "--------",
            "--------",
            "--------",
            "--------",
            "--------",
            "-OOOOOOX",
        ]
    )
    assert legal_moves(board, Cell.PIECE_A) == [Square(0, 0), Square(7, 0)]
    assert first_legal_move(board, Cell.PIECE_A) == Square(0, 0)


def test_no_legal_move(board_from_rows: Callable[[list[str]], Board]) -> None:
    board = board_from_rows(["XO------"])
    assert first_legal_move(board, Cell.PIECE_B) is None


def test_bot_does_not_touch_board() -> None:
    board = Board.starting_position()
    first_legal_move(board, Cell.PIECE_A)
    assert board == Board.starting_position()
