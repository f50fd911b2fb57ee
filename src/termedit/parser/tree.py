"""
TreeBuilder: single-pass CST annotation over the token arena.

Tokens are fed one at a time in document order. An explicit stack of open
container ids replaces recursion, so nesting depth is bounded only by the
input. Nothing is dropped or reordered; the builder only records structure
on the side (Node records keyed by the id of their opening token).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional

from termedit.exceptions import StructuralError
from termedit.logging_config import logger
from .tokens import (
    CLOSE_KINDS,
    LITERAL_KINDS,
    OPEN_KINDS,
    Token,
    TokenKind,
)


class NodeKind(str, Enum):
    ROOT = "root"
    TUPLE = "tuple"
    LIST = "list"


ROOT_ID = 0

# Kinds that can own a trailing separator
_SEPARATED_KINDS = frozenset({TokenKind.END_TUPLE, TokenKind.END_LIST}) | LITERAL_KINDS
# Kinds that stop the backward separator scan
_SCAN_BARRIERS = frozenset({TokenKind.BEGIN_TUPLE, TokenKind.BEGIN_LIST, TokenKind.COMMA,
                            TokenKind.END_ROOT, TokenKind.ROOT})


@dataclass
class Node:
    """Structural annotation for a root, tuple or list container."""
    id: int
    kind: NodeKind
    order: int
    parent: Optional[int]
    branch: List[int]
    name: Optional[str] = None
    children: List[int] = field(default_factory=list)
    values: List[int] = field(default_factory=list)
    start: Optional[int] = None
    end: Optional[int] = None
    comma: Optional[int] = None
    named_list: Optional[int] = None
    child_count: int = 0

    @property
    def is_endpoint(self) -> bool:
        """Endpoints hold at least one direct literal value."""
        return bool(self.values)

    @property
    def depth(self) -> int:
        """Number of enclosing containers, not counting the root."""
        return max(len(self.branch) - 1, 0)


class TreeBuilder:
    """
    Annotate tokens with container structure as they arrive.

    The optional `on_close` callback receives the id of every tuple when it
    closes, innermost first. It is how the query engine hooks into the pass.
    """

    def __init__(self, on_close: Optional[Callable[[int], None]] = None):
        self.tokens: List[Token] = []
        self.nodes: Dict[int, Node] = {}
        self._stack: List[int] = []
        self.on_close = on_close
        self._open_statement = False

    def feed(self, token: Token) -> None:
        """
        Consume the next token.

        Raises:
            StructuralError: On mismatched or misplaced delimiters
        """
        if token.id != len(self.tokens):
            raise ValueError(f"Token {token.id} fed out of order (expected {len(self.tokens)})")
        self.tokens.append(token)

        kind = token.kind
        if kind is TokenKind.ROOT:
            self._open_root(token)
        elif not self._stack:
            raise ValueError("The first token fed must be the synthetic root token")
        elif kind in OPEN_KINDS:
            self._open(token)
        elif kind in LITERAL_KINDS:
            self._add_literal(token)
        elif kind is TokenKind.COMMA:
            self._attach_separator(token)
        elif kind in CLOSE_KINDS:
            self._close(token)
        elif kind is TokenKind.END_ROOT:
            self._end_statement(token)

    def finish(self) -> Node:
        """
        Close the root after the last token.

        Returns:
            The root node

        Raises:
            StructuralError: If containers are left open or the last statement lacks its '.'
        """
        last_line = self.tokens[-1].line if self.tokens else 1

        if len(self._stack) > 1:
            node = self.nodes[self._stack[-1]]
            raise StructuralError(
                last_line,
                f"unterminated {node.kind.value} opened on line {self.tokens[node.id].line}",
            )
        if self._open_statement:
            raise StructuralError(last_line, "last statement is missing its terminating '.'")

        root = self.nodes[ROOT_ID]
        root.start = ROOT_ID
        root.end = len(self.tokens) - 1
        return root

    @property
    def root(self) -> Node:
        return self.nodes[ROOT_ID]

    def _open_root(self, token: Token) -> None:
        if self.tokens[0] is not token:
            raise ValueError("Root token must be token 0")
        root = Node(id=token.id, kind=NodeKind.ROOT, order=0, parent=None, branch=[], name="")
        self.nodes[root.id] = root
        token.node = root.id
        self._stack.append(root.id)

    def _synthetic_name(self, node: Node) -> str:
        # List members get 1-based display ordinals; everything else is 0-based.
        parent = self.nodes[node.parent] if node.parent is not None else None
        if parent is not None and parent.kind is NodeKind.LIST:
            return f"[{node.order + 1}]"
        return f"[{node.order}]"

    def _open(self, token: Token) -> None:
        parent = self.nodes[self._stack[-1]]
        kind = NodeKind.LIST if token.kind is TokenKind.BEGIN_LIST else NodeKind.TUPLE

        node = Node(
            id=token.id,
            kind=kind,
            order=parent.child_count,
            parent=parent.id,
            branch=list(self._stack),
        )
        if kind is NodeKind.LIST:
            node.name = f"[{node.order}]"

        # A tuple whose first element is a container has no atom to take its name from
        if parent.name is None:
            parent.name = self._synthetic_name(parent)

        parent.children.append(node.id)
        parent.child_count += 1

        self.nodes[node.id] = node
        token.node = node.id
        self._stack.append(node.id)
        if parent.kind is NodeKind.ROOT:
            self._open_statement = True

    def _add_literal(self, token: Token) -> None:
        node = self.nodes[self._stack[-1]]
        if node.kind is NodeKind.ROOT:
            self._open_statement = True

        if node.name is None:
            if token.kind is TokenKind.ATOM:
                node.name = token.content[1:-1] if token.is_quoted_atom else token.content
                return
            node.name = self._synthetic_name(node)

        node.values.append(token.id)

    def _previous_element(self, token: Token) -> Optional[Token]:
        """Most recent separable element before `token`, or None if a barrier comes first."""
        for index in range(token.id - 1, -1, -1):
            candidate = self.tokens[index]
            if candidate.kind in _SEPARATED_KINDS:
                return candidate
            if candidate.kind in _SCAN_BARRIERS:
                return None
        return None

    def _attach_separator(self, token: Token) -> None:
        element = self._previous_element(token)
        if element is None:
            logger.debug(f"Separator on line {token.line} follows no element")
            return

        if element.kind in CLOSE_KINDS:
            self.nodes[element.node].comma = token.id
        else:
            element.comma = token.id

    def _close(self, token: Token) -> None:
        if len(self._stack) <= 1:
            raise StructuralError(token.line, f"'{token.content}' has no open container to close")

        node = self.nodes[self._stack.pop()]
        expected = NodeKind.LIST if token.kind is TokenKind.END_LIST else NodeKind.TUPLE
        if node.kind is not expected:
            raise StructuralError(
                token.line,
                f"'{token.content}' closes a {node.kind.value} opened on line {self.tokens[node.id].line}",
            )

        node.start = node.id
        node.end = token.id
        token.node = node.id

        if node.kind is NodeKind.TUPLE:
            if len(node.children) == 1 and self.nodes[node.children[0]].kind is NodeKind.LIST:
                node.named_list = node.children[0]
            if self.on_close is not None:
                self.on_close(node.id)

    def _end_statement(self, token: Token) -> None:
        if len(self._stack) > 1:
            node = self.nodes[self._stack[-1]]
            raise StructuralError(
                token.line,
                f"'.' inside an unclosed {node.kind.value} opened on line {self.tokens[node.id].line}",
            )
        # The terminator plays the separator role for the statement it ends
        self._attach_separator(token)
        self._open_statement = False
