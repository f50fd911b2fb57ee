"""
Name matching and dispatch at container close.
"""

import re
from enum import Enum
from typing import Callable

from termedit.logging_config import logger
from termedit.parser.names import NameResolver


class MatchMode(str, Enum):
    EXACT = "exact"
    PREFIX = "prefix"
    SUFFIX = "suffix"
    SUBSTRING = "substring"


def compile_pattern(pattern: str, mode: MatchMode, regex: bool = False) -> re.Pattern:
    """
    Build the regex used to test dotted names.

    Names contain '.', '[' and ']', so the pattern is escaped unless the
    caller asks for raw regex semantics.

    Args:
        pattern: Caller-supplied name or fragment
        mode: How the pattern is anchored
        regex: Use `pattern` verbatim instead of escaping it

    Returns:
        Compiled pattern

    Raises:
        re.error: If `regex` is set and the pattern is invalid
    """
    body = pattern if regex else re.escape(pattern)
    if mode is MatchMode.EXACT:
        return re.compile(f"^(?:{body})$")
    if mode is MatchMode.PREFIX:
        return re.compile(f"^(?:{body})")
    if mode is MatchMode.SUFFIX:
        return re.compile(f"(?:{body})$")
    return re.compile(body)


class QueryEngine:
    """
    Test each closed container against a pattern and dispatch on match.

    Wired as the TreeBuilder close callback; `handler` receives the id of
    every matching container, innermost first.
    """

    def __init__(
        self,
        resolver: NameResolver,
        pattern: re.Pattern,
        handler: Callable[[int], None],
    ):
        self.resolver = resolver
        self.pattern = pattern
        self.handler = handler
        self.matches = 0

    def on_close(self, node_id: int) -> None:
        name = self.resolver.full_name(node_id)
        if not self.pattern.search(name):
            return
        self.matches += 1
        logger.debug(f"Matched '{name}' (container {node_id})")
        self.handler(node_id)
