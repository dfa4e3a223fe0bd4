#!/usr/bin/env python3
"""Project entry point. Bootstraps the process and calls into the C bridge."""

import logging
import os
import sys

from core import Core, initialize
from modules.cbridge import COMMAND, CBridgeModule

logger = logging.getLogger("sample.main")

START_MESSAGE = "main 関数が開始されました"
FINISH_MESSAGE = "main 関数が終了しました"


def configure_logging() -> None:
    level = os.getenv("SAMPLE_LOG_LEVEL", "WARNING").strip().upper()
    logging.basicConfig(stream=sys.stderr, level=getattr(logging, level, logging.WARNING))


def build_core() -> Core:
    """Register the C bridge with a fresh core."""
    return Core([CBridgeModule()])


def main() -> None:
    initialize()
    core = build_core()

    print(START_MESSAGE)
    logger.debug({"evt": "lifecycle", "state": "started"})
    logger.debug({"evt": "lifecycle", "state": "delegating", "command": COMMAND})
    core.dispatch(COMMAND)

    print(FINISH_MESSAGE)
    logger.debug({"evt": "lifecycle", "state": "finished"})


# Module-level so the hook fires on import, ahead of any main() call.
initialize()


if __name__ == "__main__":
    configure_logging()
    main()
