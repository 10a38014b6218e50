"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.core.models import SessionModel
from src.reversi.board import Board

EMPTY_ROW = "--------"


@pytest.fixture
def board_from_rows() -> Callable[[list[str]], Board]:
    """Call the inner function with the rows (top to bottom). Missing rows at the bottom are filled up with empty cells."""

    def _create_board(rows: list[str]) -> Board:
        padded = rows + [EMPTY_ROW] * (8 - len(rows))
        return Board.from_text("/".join(padded))

    return _create_board


@pytest.fixture
def session_model() -> Callable[..., SessionModel]:
    """Session snapshot in an engineered position. Defaults: X to move, human plays X, game in progress."""

    def _create_model(
        rows: list[str],
        turn: str = "X",
        human_side: str = "X",
        status: str = "in_progress",
    ) -> SessionModel:
        padded = rows + [EMPTY_ROW] * (8 - len(rows))
        return SessionModel(
            board="/".join(padded), turn=turn, human_side=human_side, status=status
        )

    return _create_model
