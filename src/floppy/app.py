#!/usr/bin/env python3
"""
app.py

Entry point: command line, logging, window lifetime and the 60 FPS frame loop.
"""

import argparse
import logging
from typing import List, Optional

from .constants import ASSETS_DIR, HIGHSCORE_FILE
from .data_models import InputState
from .game import FloppyGame
from .highscores import HighScoreLedger
from .logger import setup_logging

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="The Adventure of Floppy.")
    parser.add_argument("--highscores", default=HIGHSCORE_FILE,
                        help="High score file (default: %(default)s).")
    parser.add_argument("--assets", default=ASSETS_DIR,
                        help="Directory holding the textures (default: %(default)s).")
    parser.add_argument("--log-level", default="info",
                        choices=["debug", "info", "warning", "error"])
    parser.add_argument("--log-file", default=None, help="Also write NDJSON logs here.")
    return parser.parse_args(argv)


def run(game: FloppyGame, backend) -> None:
    """Runs frames until the window asks to close. One update, then one draw."""
    game.init(backend)
    try:
        while not backend.window_should_close():
            backend.poll_events()
            game.update(InputState.capture(backend))
            game.draw(backend)
    finally:
        game.shutdown(backend)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    # pygame is only needed once a window is opened
    from .pygame_backend import PygameBackend

    ledger = HighScoreLedger(args.highscores)
    ledger.load()

    backend = PygameBackend(assets_dir=args.assets)
    logger.info("Starting Floppy (best score %d)", ledger.best)
    try:
        run(FloppyGame(ledger), backend)
    finally:
        backend.close()
    logger.info("Bye")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
