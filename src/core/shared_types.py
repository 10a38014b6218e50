"""
Type definitions used across layers
"""

from enum import StrEnum

# --- The domain layer has its own Cell enum (src/reversi/pieces.py). Values are kept identical so converting is just Cell(side.value)
# --- NOTE: values are the characters used on the wire, so the codec can use them directly


class Side(StrEnum):
    PIECE_A = "X"
    PIECE_B = "O"


class CellState(StrEnum):
    EMPTY = "-"
    PIECE_A = "X"
    PIECE_B = "O"


class Result(StrEnum):
    """Always from the point of view of the human player"""

    WIN = "WIN"
    LOSE = "LOSE"
    TIE = "TIE"


class ErrorKind(StrEnum):
    INVALID_FORMAT = "INVFMT"
    NO_GAME = "NO GAME"
    OUT_OF_TURN = "OOT"
    ILLEGAL_MOVE = "ILLMOVE"
