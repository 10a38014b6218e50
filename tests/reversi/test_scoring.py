"""Unit tests for /src/reversi/scoring.py"""

from copy import deepcopy
from typing import Callable

import pytest

from src.core.shared_types import Result
from src.reversi.board import Board
from src.reversi.pieces import Cell
from src.reversi.scoring import count_pieces, score


def test_count_pieces_opening() -> None:
    assert count_pieces(Board.starting_position()) == {Cell.PIECE_A: 2, Cell.PIECE_B: 2}


def test_count_pieces_ignores_empty(board_from_rows: Callable[[list[str]], Board]) -> None:
    board = board_from_rows(["XXX-----", "O-------"])
    assert count_pieces(board) == {Cell.PIECE_A: 3, Cell.PIECE_B: 1}


@pytest.mark.parametrize(
    "rows, human_side, expected",
    [
        (["XXX", "O"], Cell.PIECE_A, Result.WIN),
        (["XXX", "O"], Cell.PIECE_B, Result.LOSE),
        (["X", "OO"], Cell.PIECE_A, Result.LOSE),
        (["X", "OO"], Cell.PIECE_B, Result.WIN),
        (["XO", "OX"], Cell.PIECE_A, Result.TIE),
        (["XO", "OX"], Cell.PIECE_B, Result.TIE),
        ([], Cell.PIECE_A, Result.TIE),  # nothing on the board at all
    ],
)
def test_score_from_human_perspective(
    board_from_rows: Callable[[list[str]], Board],
    rows: list[str],
    human_side: Cell,
    expected: Result,
) -> None:
    board = board_from_rows([row.ljust(8, "-") for row in rows])
    assert score(board, human_side) == expected


def test_score_is_pure() -> None:
    board = Board.starting_position()
    before = deepcopy(board)
    score(board, Cell.PIECE_A)
    assert board == before
