"""
The Game class will be the entrypoint into the domain layer for the service layer.
It holds one game session (board, whose turn it is, which side the human plays) and enforces the turn rules:
who may move, when a turn may be skipped, and when the game is over.
"""

from copy import deepcopy
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Self

from src.core.exceptions import (
    IllegalMoveError,
    InvalidFormatError,
    NoGameError,
    OutOfTurnError,
)
from src.core.models import SessionModel
from src.core.shared_types import Result
from src.reversi.board import Board
from src.reversi.bot import first_legal_move
from src.reversi.moves import any_legal_move, apply_move
from src.reversi.pieces import PLAYER_PIECES, Cell
from src.reversi.scoring import score
from src.reversi.square import Square


class Status(Enum):
    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    # The final board may still be printed, every other command needs a new game first
    JUST_ENDED = auto()


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    turn: Cell
    human_side: Cell
    status: Status
    last_move: Optional[Square] = None
    result: Optional[Result] = None

    @classmethod
    def not_started(cls) -> Self:
        """A session before the first StartGame: empty board, nothing is allowed but starting."""
        return cls(
            board=Board.empty(),
            turn=Cell.PIECE_A,
            human_side=Cell.PIECE_A,
            status=Status.NOT_STARTED,
        )

    @classmethod
    def new_game(cls, human_side: Cell) -> Self:
        game = cls.not_started()
        game.start(human_side)
        return game

    @classmethod
    def from_model(cls, model: SessionModel) -> Self:
        """Define how to construct a Game from a session snapshot"""

        # Validation
        status_name = model.status.replace(" ", "_").upper()
        if status_name not in Status.__members__:
            raise InvalidFormatError(
                f"Invalid status: {model.status!r}. \nPick one from {','.join([status.name.lower() for status in Status])}"
            )
        turn = _player_piece(model.turn)
        human_side = _player_piece(model.human_side)

        # create the Game
        board = Board.from_text(model.board)
        status = Status[status_name]
        game = cls(board, turn, human_side, status)
        if status == Status.JUST_ENDED:
            game.result = score(board, human_side)
        return game

    def to_model(self) -> SessionModel:
        return SessionModel(
            board=self.board.to_text(),
            turn=self.turn.value,
            human_side=self.human_side.value,
            status=self.status.name.lower(),
        )

    @property
    def bot_side(self) -> Cell:
        return self.human_side.opponent()

    def start(self, human_side: Cell) -> None:
        """Allowed in any state. Resets everything, PIECE_A always moves first."""
        if human_side not in PLAYER_PIECES:
            raise InvalidFormatError(f"Cannot play with {human_side}.")

        self.board = Board.starting_position()
        self.human_side = human_side
        self.turn = Cell.PIECE_A
        self.status = Status.IN_PROGRESS
        self.last_move = None
        self.result = None

    def snapshot(self) -> Board:
        """A copy of the board: while playing, or once right after the game ended."""
        if self.status == Status.NOT_STARTED:
            raise NoGameError("No game has been started yet.")
        return deepcopy(self.board)

    def place_move(self, square: Square) -> Optional[Result]:
        """
        The human places a piece.
        ----

        Returns the result if this move ended the game, None otherwise.
        """
        self._assert_in_progress()
        self._assert_turn(self.human_side)
        apply_move(self.board, square, self.turn)
        self.last_move = square
        return self._finish_turn()

    def bot_move(self) -> Optional[Result]:
        """The bot plays the first legal cell it finds (row-major)."""
        self._assert_in_progress()
        self._assert_turn(self.bot_side)

        square = first_legal_move(self.board, self.turn)
        if square is None:
            raise IllegalMoveError(f"{self.turn.name} has no legal move anywhere.")

        apply_move(self.board, square, self.turn)
        self.last_move = square
        return self._finish_turn()

    def skip_turn(self) -> None:
        """Passing is only allowed when the side to move has no legal move."""
        self._assert_in_progress()
        if any_legal_move(self.board, self.turn):
            raise IllegalMoveError(
                f"{self.turn.name} still has a legal move and cannot pass."
            )
        self.turn = self.turn.opponent()

    # -- PRIVATE HELPERS ---
    def _assert_in_progress(self) -> None:
        if self.status != Status.IN_PROGRESS:
            raise NoGameError(f"Game is not in progress. status: {self.status}")

    def _assert_turn(self, side: Cell) -> None:
        if self.turn != side:
            raise OutOfTurnError(
                f"It is not your turn. Waiting for {self.turn.name} to move first."
            )

    def _is_game_over(self) -> bool:
        """Neither side can place a piece anywhere"""
        return not any(any_legal_move(self.board, piece) for piece in PLAYER_PIECES)

    def _finish_turn(self) -> Optional[Result]:
        """After a successful placement: either score the finished game or hand the turn over."""
        if self._is_game_over():
            self.status = Status.JUST_ENDED
            self.result = score(self.board, self.human_side)
            return self.result

        self.turn = self.turn.opponent()
        return None


def _player_piece(value: str) -> Cell:
    if value not in [piece.value for piece in PLAYER_PIECES]:
        raise InvalidFormatError(f"Invalid side: {value!r}")
    return Cell(value)
