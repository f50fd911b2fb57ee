"""
Query layer: match modes, the command set and close-time dispatch.
"""

from .matcher import MatchMode, QueryEngine, compile_pattern
from .commands import Command

__all__ = [
    "MatchMode",
    "QueryEngine",
    "compile_pattern",
    "Command",
]
