"""Routes named commands from the entry point to the module that owns them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional, Protocol

CommandHandler = Callable[[Dict[str, Any]], Any]


class Module(Protocol):
    name: str

    def attach(self, core: "Core") -> Dict[str, CommandHandler]: ...


@dataclass
class CommandResult:
    """What `Core.dispatch` hands back; `handled` is False for unknown commands."""

    command: str
    handled: bool
    payload: Optional[Any] = None


class Core:
    def __init__(self, modules: Iterable[Module] = ()) -> None:
        self._modules: Dict[str, Module] = {}
        self._handlers: Dict[str, CommandHandler] = {}
        for module in modules:
            self.register_module(module)

    @property
    def modules(self) -> Dict[str, Module]:
        return dict(self._modules)

    def register_module(self, module: Module) -> None:
        if module.name in self._modules:
            raise ValueError(f"Module '{module.name}' already registered")
        handlers = module.attach(self)
        taken = sorted(set(handlers) & set(self._handlers))
        if taken:
            raise ValueError(f"Command(s) {', '.join(taken)} already bound")
        self._handlers.update(handlers)
        self._modules[module.name] = module

    def dispatch(self, command: str, payload: Optional[Dict[str, Any]] = None) -> CommandResult:
        """Run the handler bound to `command`. Handler exceptions propagate."""
        handler = self._handlers.get(command)
        if handler is None:
            return CommandResult(command=command, handled=False)
        return CommandResult(command=command, handled=True, payload=handler(payload or {}))


__all__ = ["Core", "CommandHandler", "CommandResult", "Module"]
