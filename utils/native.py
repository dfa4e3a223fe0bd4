#!/usr/bin/env python3
"""
Helpers for calling into a native (C ABI) shared library through ctypes.
"""
from __future__ import annotations

import ctypes
import ctypes.util
import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional

__all__ = [
    "DEFAULT_MESSAGE",
    "DEFAULT_SYMBOL",
    "NativeCallError",
    "NativeConfig",
    "NativeLibraryError",
    "NativeSymbolError",
    "invoke",
    "load_library",
    "resolve_symbol",
]

logger = logging.getLogger("sample.native")

DEFAULT_SYMBOL = "puts"
DEFAULT_MESSAGE = "C の関数が呼び出されました"


class NativeCallError(RuntimeError):
    """Base error for native library problems."""


class NativeLibraryError(NativeCallError):
    pass


class NativeSymbolError(NativeCallError):
    pass


@dataclass
class NativeConfig:
    """Which library and export to call, plus the `puts` argument."""

    library: Optional[str] = None
    symbol: str = DEFAULT_SYMBOL
    message: str = DEFAULT_MESSAGE

    @classmethod
    def from_env(cls) -> "NativeConfig":
        library = os.getenv("NATIVE_LIBRARY", "").strip() or None
        symbol = os.getenv("NATIVE_SYMBOL", DEFAULT_SYMBOL).strip() or DEFAULT_SYMBOL
        message = os.getenv("NATIVE_MESSAGE", DEFAULT_MESSAGE)
        return cls(library=library, symbol=symbol, message=message)


def _default_library() -> Optional[str]:
    # POSIX: None opens the running process, which links the C runtime.
    # Windows has no such handle and ctypes raises TypeError for None.
    return ctypes.util.find_library("c")


def load_library(name: Optional[str] = None) -> ctypes.CDLL:
    """Open `name`, or the C runtime when no name is given."""
    target = name if name is not None else _default_library()
    try:
        return ctypes.CDLL(target)
    except (OSError, TypeError) as exc:
        raise NativeLibraryError(f"Unable to load native library {target!r}: {exc}") from exc


def resolve_symbol(lib: ctypes.CDLL, symbol: str):
    try:
        return getattr(lib, symbol)
    except AttributeError as exc:
        raise NativeSymbolError(f"Symbol {symbol!r} not exported by {lib._name!r}") from exc


def _flush_c_stdio(lib: ctypes.CDLL) -> None:
    try:
        fflush = lib.fflush
    except AttributeError:
        return
    fflush.argtypes = [ctypes.c_void_p]
    fflush(None)


def invoke(config: Optional[NativeConfig] = None) -> None:
    """
    Call the configured native function once.

    `puts` receives `config.message`; any other export is called with no
    arguments and its return value is discarded.
    """
    config = config or NativeConfig.from_env()
    lib = load_library(config.library)
    func = resolve_symbol(lib, config.symbol)

    # Python and C keep separate stdout buffers; drain ours before C writes.
    sys.stdout.flush()
    if config.symbol == DEFAULT_SYMBOL:
        func.argtypes = [ctypes.c_char_p]
        func.restype = ctypes.c_int
        func(os.fsencode(config.message))
    else:
        func.argtypes = []
        func.restype = None
        func()
    _flush_c_stdio(lib)
    logger.debug({"evt": "native_call", "library": lib._name, "symbol": config.symbol})
