"""
One-time process initialisation.

`initialize()` runs when `main` is imported and again as the first
statement of `main()`; only the first call in a process has any effect.
"""

from __future__ import annotations

import logging
import threading

logger = logging.getLogger("sample.bootstrap")

BOOTSTRAP_MESSAGE = "main package の init 関数が実行されました"

_lock = threading.Lock()
_ran = False


def initialize() -> None:
    global _ran
    with _lock:
        if _ran:
            return
        print(BOOTSTRAP_MESSAGE)
        _ran = True
    logger.debug({"evt": "bootstrap_complete"})


def has_run() -> bool:
    return _ran


def reset() -> None:
    """Forget that the hook ran. Intended for tests."""
    global _ran
    with _lock:
        _ran = False
