"""Base class for modules plugged into the core."""

from __future__ import annotations

from typing import Dict, Optional

from core.core import CommandHandler, Core


class BaseModule:
    name = "base"

    def __init__(self) -> None:
        self.core: Optional[Core] = None

    def attach(self, core: Core) -> Dict[str, CommandHandler]:
        """Bind to `core` and return the commands this module answers."""
        self.core = core
        return self.build_command_map()

    def build_command_map(self) -> Dict[str, CommandHandler]:
        return {}
