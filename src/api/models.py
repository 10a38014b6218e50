"""Commands and Responses: the decoded form of everything that crosses the engine boundary"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, field_validator

from src.core.exceptions import InvalidFormatError
from src.core.shared_types import CellState, ErrorKind, Result, Side

BOARD_SIZE = 8


# --- COMMAND MODELS ---
class StartGame(BaseModel):
    op: Literal["start_game"] = "start_game"
    human_side: Side


class PrintBoard(BaseModel):
    op: Literal["print_board"] = "print_board"


class PlaceMove(BaseModel):
    """Bounds are NOT checked here: an off-board square is an illegal move, not a malformed command."""

    op: Literal["place_move"] = "place_move"
    row: int
    col: int


class BotMove(BaseModel):
    op: Literal["bot_move"] = "bot_move"


class SkipTurn(BaseModel):
    op: Literal["skip_turn"] = "skip_turn"


Command = Annotated[
    Union[StartGame, PrintBoard, PlaceMove, BotMove, SkipTurn],
    Field(discriminator="op"),
]


# --- RESPONSE MODELS ---
class OkResponse(BaseModel):
    kind: Literal["ok"] = "ok"


class ErrorResponse(BaseModel):
    kind: Literal["error"] = "error"
    error: ErrorKind


class BoardSnapshotResponse(BaseModel):
    kind: Literal["board"] = "board"
    cells: list[list[CellState]]
    turn: Side

    @field_validator("cells")
    @classmethod
    def validate_cells(cls, value: list[list[CellState]]) -> list[list[CellState]]:
        if len(value) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in value):
            raise InvalidFormatError(
                f"A board snapshot must be a {BOARD_SIZE}x{BOARD_SIZE} grid."
            )
        return value


class OutcomeResponse(BaseModel):
    kind: Literal["outcome"] = "outcome"
    result: Result


Response = Annotated[
    Union[OkResponse, ErrorResponse, BoardSnapshotResponse, OutcomeResponse],
    Field(discriminator="kind"),
]
