"""Modules registered with the core."""

from .cbridge import CBridgeModule, call_c_function

__all__ = ["CBridgeModule", "call_c_function"]
