"""Command-line entry point and main loop."""

from __future__ import annotations

import argparse
import logging
import sys

from .game import AppState, GameStatus
from .logsetup import DEFAULT_LOG_DIR, setup_logging
from .tui import TerminalSession

logger = logging.getLogger(__name__)

POLL_INTERVAL = 0.25
DEFAULT_TEXT = "Example text..."


def run_app(target_text: str, session=None) -> AppState:
    """Run one race in ``session`` until it finishes or is cancelled."""
    logger.debug("Entering main loop.")
    state = AppState(target_text)
    if session is None:
        session = TerminalSession()

    with session:
        while True:
            session.draw(state)
            if state.status in (GameStatus.FINISHED, GameStatus.EXITING):
                logger.debug("Game %s, leaving loop.", state.status.value)
                return state
            key = session.read_key(POLL_INTERVAL)
            if key is not None:
                state.handle_keypress(key)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="typerace", description="Terminal typing race.")
    parser.add_argument("--text", default=DEFAULT_TEXT, help="text to type")
    parser.add_argument("--log-dir", default=DEFAULT_LOG_DIR, help="directory for app.log")
    args = parser.parse_args(argv)

    try:
        setup_logging(args.log_dir)
    except OSError as error:
        print(f"CRITICAL: Failed to set up logging: {error}", file=sys.stderr)
        return 1
    logger.info("Initializing application...")

    try:
        run_app(args.text)
    except Exception:
        logger.exception("Error during app execution")

    logger.info("Exiting application...")
    return 0


if __name__ == "__main__":
    sys.exit(main())