"""
Errors shared by all layers.

Every error is recoverable: the service turns it into an Error response and the game is left as it was before the command.
NOTE: GameError deliberately does not derive from ValueError, so raising it inside a pydantic validator is not wrapped into a ValidationError.
"""

from src.core.shared_types import ErrorKind


class GameError(Exception):
    kind: ErrorKind


class InvalidFormatError(GameError):
    """Malformed command line or malformed board text"""

    kind = ErrorKind.INVALID_FORMAT


class NoGameError(GameError):
    """No game in progress"""

    kind = ErrorKind.NO_GAME


class OutOfTurnError(GameError):
    kind = ErrorKind.OUT_OF_TURN


class IllegalMoveError(GameError):
    """Occupied / off-board target, no capture in any direction, or a refused skip"""

    kind = ErrorKind.ILLEGAL_MOVE
