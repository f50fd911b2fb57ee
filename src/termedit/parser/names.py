"""
Fully qualified dotted names for containers.

Only tuple ancestors contribute a segment; lists are transparent and the
root contributes nothing.
"""

from typing import Dict

from .tree import Node, NodeKind, ROOT_ID

MISSING_NAME = "[]"


class NameResolver:
    """Lazily resolve and memoize container names from their ancestor chain."""

    def __init__(self, nodes: Dict[int, Node]):
        self.nodes = nodes
        self._cache: Dict[int, str] = {}

    def full_name(self, node_id: int) -> str:
        """
        Resolve the dotted name of a container.

        Args:
            node_id: Container id (id of its opening token)

        Returns:
            Dotted name such as "kernel.logger_level" or "http.[2]"
        """
        cached = self._cache.get(node_id)
        if cached is not None:
            return cached

        node = self.nodes[node_id]
        segments = [
            self.nodes[ancestor].name or MISSING_NAME
            for ancestor in node.branch
            if ancestor != ROOT_ID and self.nodes[ancestor].kind is NodeKind.TUPLE
        ]
        if node_id != ROOT_ID:
            segments.append(node.name or MISSING_NAME)

        name = ".".join(segments)
        self._cache[node_id] = name
        return name
