"""Core package exposing the command router and the bootstrap hook."""

from .bootstrap import initialize
from .core import Core

__all__ = ["Core", "initialize"]
