"""
Console front end: reads request lines from stdin and writes one response line per request to stdout.

Logs go to stderr so they never mix with protocol output.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from src.core.config import Settings, load_settings
from src.protocol.codec import BOARD_TURN_SEPARATOR
from src.reversi.square import BOARD_DIMENSIONS
from src.services.reversi_service import ReversiService

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings) -> None:
    root = logging.getLogger()
    if root.handlers:
        root.handlers = []

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(settings.log_format))
    root.setLevel(settings.log_level)
    root.addHandler(handler)


def render_board(response_line: str) -> str:
    """Turn an encoded board snapshot into an 8x8 grid with coordinates. Other responses pass through."""
    board_text, separator, turn = response_line.rstrip("\n").partition(
        BOARD_TURN_SEPARATOR
    )
    rows, cols = BOARD_DIMENSIONS
    if not separator or len(board_text) != rows * cols:
        return response_line

    lines = ["  " + " ".join(str(col) for col in range(cols))]
    for row in range(rows):
        cells = board_text[row * cols : (row + 1) * cols]
        lines.append(f"{row} " + " ".join(cells))
    lines.append(f"turn: {turn}")
    return "\n".join(lines) + "\n"


def run(
    service: ReversiService,
    stdin: TextIO,
    stdout: TextIO,
    pretty_board: bool = False,
) -> int:
    """Serve requests until end of input. Returns the number of requests handled."""
    handled = 0
    for line in stdin:
        if not line.strip():
            continue
        response = service.handle_line(line)
        stdout.write(render_board(response) if pretty_board else response)
        stdout.flush()
        handled += 1
    logger.info("End of input after %d requests", handled)
    return handled


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Play Reversi against a first-legal-move bot over a line protocol"
    )
    parser.add_argument("--log-level", help="Override REVERSI_LOG_LEVEL")
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Print boards as a grid instead of the raw 64-character line",
    )
    args = parser.parse_args(argv)

    settings = load_settings()
    if args.log_level:
        settings = Settings.model_validate(
            {**settings.model_dump(), "log_level": args.log_level}
        )
    setup_logging(settings)

    run(
        ReversiService(),
        sys.stdin,
        sys.stdout,
        pretty_board=args.pretty or settings.pretty_board,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
