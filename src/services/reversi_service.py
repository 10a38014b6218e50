"""Orchestration of communication from the transport (decoded commands) to the game logic (and the reverse direction)."""

import logging
from threading import Lock
from typing import Optional

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
from src.core.exceptions import GameError
from src.core.models import SessionModel
from src.core.shared_types import Result
from src.protocol.codec import decode_command, encode_response
from src.reversi.game import Game, Status
from src.reversi.pieces import Cell
from src.reversi.square import Square

logger = logging.getLogger(__name__)


class ReversiService:
    """One shared session, one command at a time."""

    def __init__(self, game: Optional[Game] = None) -> None:
        self.game = game if game is not None else Game.not_started()
        # single writer: a command runs to completion (scoring included) before the next one is looked at
        self._lock = Lock()

    # -- Transport entry points ---
    def handle(self, command: Command) -> Response:
        """Run one decoded command. Errors never escape: they become an ErrorResponse and the session is unchanged."""
        with self._lock:
            try:
                return self._dispatch(command)
            except GameError as exc:
                logger.debug("Rejected %s: %s (%s)", command.op, exc.kind.value, exc)
                return ErrorResponse(error=exc.kind)

    def handle_line(self, line: str) -> str:
        """Decode a raw request line, run it, encode the response line."""
        try:
            command = decode_command(line)
        except GameError as exc:
            logger.debug("Malformed request %r: %s", line, exc)
            return encode_response(ErrorResponse(error=exc.kind))
        return encode_response(self.handle(command))

    def session(self) -> Optional[SessionModel]:
        """Snapshot of the current session, None before the first game"""
        with self._lock:
            if self.game.status == Status.NOT_STARTED:
                return None
            return self.game.to_model()

    # -- Command logic --
    def _dispatch(self, command: Command) -> Response:
        logger.debug("Handling %s", command)
        match command:
            case StartGame():
                return self._start_game(command)
            case PrintBoard():
                return self._print_board()
            case PlaceMove():
                return self._place_move(command)
            case BotMove():
                return self._bot_move()
            case SkipTurn():
                return self._skip_turn()
            case _:
                raise TypeError(f"Unknown command {command!r}")

    def _start_game(self, command: StartGame) -> Response:
        self.game.start(Cell.from_side(command.human_side))
        logger.info("New game started, human plays %s", command.human_side.name)
        return OkResponse()

    def _print_board(self) -> Response:
        board = self.game.snapshot()
        return BoardSnapshotResponse(
            cells=[[cell.to_state() for cell in row] for row in board.rows()],
            turn=self.game.turn.to_side(),
        )

    def _place_move(self, command: PlaceMove) -> Response:
        result = self.game.place_move(Square(command.row, command.col))
        return self._move_response(result)

    def _bot_move(self) -> Response:
        result = self.game.bot_move()
        logger.debug("Bot played %s", self.game.last_move)
        return self._move_response(result)

    def _skip_turn(self) -> Response:
        self.game.skip_turn()
        logger.debug("Turn skipped, %s to move", self.game.turn.name)
        return OkResponse()

    # -- Internal helpers --
    def _move_response(self, result: Optional[Result]) -> Response:
        """A move that ends the game answers with the outcome instead of OK"""
        if result is None:
            return OkResponse()
        logger.info("Game over: %s for the human player", result.value)
        return OutcomeResponse(result=result)
