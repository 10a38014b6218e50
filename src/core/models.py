"""
Boundary layer data model(s).

A plain snapshot of a game session. The service hands these out instead of the live Game, so callers can never mutate the Board directly.
Tests use them the other way round: to construct a Game in an engineered position.
"""

from dataclasses import dataclass

# Type aliases to make SessionModel easier to read
BoardText = str
SideName = str


@dataclass
class SessionModel:
    """Transport-safe representation of a session: board as 8 '/'-separated rows of '-', 'X', 'O'."""

    board: BoardText
    turn: SideName
    human_side: SideName
    status: str
