#!/usr/bin/env python3
"""Bridge module exposing the native C function to the rest of the program."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from core.core import CommandHandler
from utils import native

from .base import BaseModule

logger = logging.getLogger("sample.cbridge")

COMMAND = "call_c_function"


def call_c_function() -> None:
    """Invoke the configured native function once. Errors propagate."""
    config = native.NativeConfig.from_env()
    logger.debug({"evt": "cbridge_call", "library": config.library, "symbol": config.symbol})
    native.invoke(config)


class CBridgeModule(BaseModule):
    name = "cbridge"

    def build_command_map(self) -> Dict[str, CommandHandler]:
        return {COMMAND: self._handle_call}

    def _handle_call(self, payload: Optional[Dict[str, Any]] = None) -> None:
        # Resolved at call time so the module-level function can be patched.
        call_c_function()


__all__ = ["COMMAND", "CBridgeModule", "call_c_function"]
