"""Unit tests for /src/api/models.py"""

import pytest
from pydantic import TypeAdapter, ValidationError

from src.api.models import (
    BoardSnapshotResponse,
    BotMove,
    Command,
    ErrorResponse,
    OkResponse,
    OutcomeResponse,
    PlaceMove,
    PrintBoard,
    Response,
    SkipTurn,
    StartGame,
)
from src.core.exceptions import InvalidFormatError
from src.core.shared_types import CellState, ErrorKind, Result, Side

COMMANDS = TypeAdapter(Command)
RESPONSES = TypeAdapter(Response)


# -- Validation - Commands --
@pytest.mark.parametrize(
    "data, expected",
    [
        ({"op": "start_game", "human_side": "X"}, StartGame(human_side=Side.PIECE_A)),
        ({"op": "print_board"}, PrintBoard()),
        ({"op": "place_move", "row": 2, "col": 3}, PlaceMove(row=2, col=3)),
        ({"op": "bot_move"}, BotMove()),
        ({"op": "skip_turn"}, SkipTurn()),
    ],
)
def test_command_is_picked_by_op(data: dict, expected: Command) -> None:
    assert COMMANDS.validate_python(data) == expected


def test_unknown_op() -> None:
    with pytest.raises(ValidationError):
        COMMANDS.validate_python({"op": "resign"})


def test_invalid_side() -> None:
    with pytest.raises(ValidationError):
        StartGame(human_side="Z")


def test_place_move_does_not_check_bounds() -> None:
    """Off-board coordinates are an illegal move for the engine to reject, not a format problem"""
    move = PlaceMove(row=9, col=-1)
    assert (move.row, move.col) == (9, -1)


# -- Validation - Responses --
def test_board_snapshot_accepts_8x8() -> None:
    cells = [[CellState.EMPTY] * 8 for _ in range(8)]
    snapshot = BoardSnapshotResponse(cells=cells, turn=Side.PIECE_B)
    assert snapshot.turn == Side.PIECE_B


@pytest.mark.parametrize(
    "cells",
    [
        [[CellState.EMPTY] * 8 for _ in range(7)],
        [[CellState.EMPTY] * 7 for _ in range(8)],
        [],
    ],
)
def test_board_snapshot_rejects_other_shapes(cells: list[list[CellState]]) -> None:
    with pytest.raises(InvalidFormatError):
        BoardSnapshotResponse(cells=cells, turn=Side.PIECE_A)


@pytest.mark.parametrize(
    "data, expected",
    [
        ({"kind": "ok"}, OkResponse()),
        (
            {"kind": "error", "error": "OOT"},
            ErrorResponse(error=ErrorKind.OUT_OF_TURN),
        ),
        ({"kind": "outcome", "result": "TIE"}, OutcomeResponse(result=Result.TIE)),
    ],
)
def test_response_is_picked_by_kind(data: dict, expected: Response) -> None:
    assert RESPONSES.validate_python(data) == expected
