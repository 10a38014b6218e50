"""
The line protocol: raw request lines in, decoded Commands out (and the reverse for Responses).

Requests always start with '0' followed by the operation digit:

* "00 X" / "00 O" : start a game, the human plays X (moves first) or O
* "01"            : print the board
* "02 C R"        : the human places a piece on column C, row R (single digits, column first!)
* "03"            : the bot moves
* "04"            : skip the turn of the side to move

A request may end in a newline and is at most 7 characters long, newline included.
Anything else is rejected with INVFMT before the engine ever sees it.
"""

from string import digits

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
from src.core.shared_types import Side

MAX_REQUEST_LENGTH = 7
COMMAND_PREFIX = "0"
OK_TEXT = "OK"
BOARD_TURN_SEPARATOR = "\t"
LINE_END = "\n"


def decode_command(line: str) -> Command:
    """Parse one request line"""
    if len(line) > MAX_REQUEST_LENGTH:
        raise InvalidFormatError(f"Request is too long: {line!r}")

    request = line.removesuffix(LINE_END)
    if len(request) < 2 or request[0] != COMMAND_PREFIX:
        raise InvalidFormatError(f"Request must start with '0<op>': {line!r}")

    op_code = request[1]
    arguments = request[2:]
    match op_code:
        case "0":
            return _decode_start_game(arguments)
        case "1":
            _assert_no_arguments(arguments)
            return PrintBoard()
        case "2":
            return _decode_place_move(arguments)
        case "3":
            _assert_no_arguments(arguments)
            return BotMove()
        case "4":
            _assert_no_arguments(arguments)
            return SkipTurn()
        case _:
            raise InvalidFormatError(f"Unknown operation {op_code!r}")


def encode_response(response: Response) -> str:
    """Every response is a single line"""
    match response:
        case OkResponse():
            text = OK_TEXT
        case ErrorResponse(error=error):
            text = error.value
        case OutcomeResponse(result=result):
            text = result.value
        case BoardSnapshotResponse(cells=cells, turn=turn):
            # 64 cells row-major, then the side to move
            board_text = "".join(cell.value for row in cells for cell in row)
            text = f"{board_text}{BOARD_TURN_SEPARATOR}{turn.value}"
        case _:
            raise TypeError(f"Cannot encode {response!r}")
    return f"{text}{LINE_END}"


# --- HELPERS ---
def _assert_no_arguments(arguments: str) -> None:
    if arguments:
        raise InvalidFormatError(f"Operation takes no arguments, got {arguments!r}")


def _decode_start_game(arguments: str) -> StartGame:
    """expects ' X' or ' O'"""
    if len(arguments) != 2 or arguments[0] != " ":
        raise InvalidFormatError(f"Expected ' X' or ' O', got {arguments!r}")

    side_char = arguments[1]
    if side_char not in [side.value for side in Side]:
        raise InvalidFormatError(f"Invalid side {side_char!r}")
    return StartGame(human_side=Side(side_char))


def _decode_place_move(arguments: str) -> PlaceMove:
    """expects ' C R' where C and R are single digits"""
    if len(arguments) != 4 or arguments[0] != " " or arguments[2] != " ":
        raise InvalidFormatError(f"Expected ' <col> <row>', got {arguments!r}")

    col_char = arguments[1]
    row_char = arguments[3]
    if col_char not in digits or row_char not in digits:
        raise InvalidFormatError(f"Coordinates must be digits, got {arguments!r}")
    return PlaceMove(row=int(row_char), col=int(col_char))
