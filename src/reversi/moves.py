"""
Placement and capturing rules

Key idea: every question about a move is answered by the same raycast (`scan_direction`) along the eight directions.

* scanning  : does a single direction capture anything?                  (pure)
* validation: does any direction capture? is this a legal move? any at all? (pure)
* execution : place the piece and flip every captured run                (the only mutator)
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from src.core.exceptions import IllegalMoveError
from src.reversi.pieces import Cell
from src.reversi.square import Square, Vector


class Board(Protocol):
    """Just the parts the rules need"""

    def piece(self, square: Square) -> Cell: ...
    def place_piece(self, piece: Cell, square: Square) -> None: ...
    def empty_squares(self) -> list[Square]: ...


# All eight unit vectors (row delta, col delta), (0, 0) excluded
DIRECTIONS: tuple[Vector, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


@dataclass(frozen=True)
class CaptureRun:
    """The opponent pieces that flip along one direction, ordered outwards from the origin"""

    direction: Vector
    squares: tuple[Square, ...]


# --- DIRECTION SCANNING ---
def scan_direction(
    board: Board, origin: Square, piece: Cell, direction: Vector
) -> Optional[CaptureRun]:
    """
    Raycasting algorithm
    -----

    ---
    Walk away from the origin (the origin itself is never inspected) while we stay on the board.

    * an opponent piece: extend the run and keep walking
    * our own piece    : the run is captured, if there is one
    * an empty cell    : nothing is captured
    * off the board    : nothing is captured (the run was never closed)
    """
    opponent = piece.opponent()
    run: list[Square] = []
    square = origin.shifted(direction)
    while square.is_within_bounds():
        found = board.piece(square)
        if found == opponent:
            run.append(square)
            square = square.shifted(direction)
            continue

        if found == piece and run:
            return CaptureRun(direction=direction, squares=tuple(run))
        return None
    return None


# --- VALIDATION ---
def capture_runs(board: Board, origin: Square, piece: Cell) -> list[CaptureRun]:
    """Every capturing direction from the origin, in the order of DIRECTIONS"""
    runs: list[CaptureRun] = []
    for direction in DIRECTIONS:
        run = scan_direction(board, origin, piece, direction)
        if run is not None:
            runs.append(run)
    return runs


def capture_set(board: Board, origin: Square, piece: Cell) -> set[Vector]:
    return {run.direction for run in capture_runs(board, origin, piece)}


def has_capture(board: Board, origin: Square, piece: Cell) -> bool:
    """Stops at the first capturing direction"""
    return any(
        scan_direction(board, origin, piece, direction) is not None
        for direction in DIRECTIONS
    )


def is_legal_move(board: Board, origin: Square, piece: Cell) -> bool:
    """On the board, on an empty cell, and capturing in at least one direction"""
    if not origin.is_within_bounds():
        return False
    if board.piece(origin) != Cell.EMPTY:
        return False
    return has_capture(board, origin, piece)


def any_legal_move(board: Board, piece: Cell) -> bool:
    """Row-major scan over the empty cells, short-circuits on the first legal one"""
    return any(has_capture(board, square, piece) for square in board.empty_squares())


def legal_moves(board: Board, piece: Cell) -> list[Square]:
    """All legal cells for the piece, row-major"""
    return [
        square for square in board.empty_squares() if has_capture(board, square, piece)
    ]


# --- EXECUTION ---
def apply_move(board: Board, origin: Square, piece: Cell) -> list[Square]:
    """
    Place the piece and flip every captured run. Returns the flipped squares.
    ---

    NOTE: all runs are collected before the board is touched. If the move is illegal, nothing changes.
    """
    if not origin.is_within_bounds():
        raise IllegalMoveError(f"Square {origin} is not on the board.")

    if board.piece(origin) != Cell.EMPTY:
        raise IllegalMoveError(f"Square {origin} is already occupied.")

    runs = capture_runs(board, origin, piece)
    if not runs:
        raise IllegalMoveError(
            f"Placing {piece.name} on {origin} does not capture anything."
        )

    board.place_piece(piece, origin)
    flipped: list[Square] = []
    for run in runs:
        # flips stop right before the terminating friendly piece (it is not part of the run)
        for square in run.squares:
            board.place_piece(piece, square)
            flipped.append(square)
    return flipped
