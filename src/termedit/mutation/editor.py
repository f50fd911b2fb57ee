"""
TermEditor: the three edit primitives plus read rendering.

All edits are recorded on the token arena itself. Replacing a value
overwrites a token's content, removing marks tokens with Action.REMOVE, and
appending extends the content of an existing token, so token ids never
shift and untouched regions serialize byte for byte.
"""

from typing import Dict, List, Optional, Sequence

from termedit.exceptions import (
    InputError,
    MissingTargetError,
    SeparatorWarning,
    TargetShapeError,
    TypeMismatchError,
)
from termedit.logging_config import logger
from termedit.parser.names import NameResolver
from termedit.parser.tokens import Action, Token, TokenKind, TRIVIA_KINDS
from termedit.parser.tree import Node, NodeKind
from termedit.schemas import EditOptions, MatchRecord
from . import formatter
from .literals import (
    LiteralKind,
    SKIP_PLACEHOLDER,
    classify_literal,
    coerce_to_text,
    describe,
    kind_of_token,
)


class TermEditor:
    """
    Apply edits to matched containers.

    Warnings and notices raised along the way are collected on the instance
    (and logged) so the caller can report them after the pass.
    """

    def __init__(
        self,
        tokens: List[Token],
        nodes: Dict[int, Node],
        resolver: NameResolver,
        options: Optional[EditOptions] = None,
    ):
        self.tokens = tokens
        self.nodes = nodes
        self.resolver = resolver
        self.options = options or EditOptions()
        self.warnings: List[str] = []
        self.notices: List[str] = []

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def record(self, node_id: int, positions: Optional[Sequence[int]] = None) -> MatchRecord:
        """
        Describe a container for read output.

        Args:
            node_id: Container id
            positions: 1-based value positions to keep; out-of-range ones are dropped

        Returns:
            MatchRecord for the container
        """
        node = self.nodes[node_id]
        values = [self.tokens[value_id].content for value_id in node.values]
        if positions:
            values = [values[p - 1] for p in positions if 1 <= p <= len(values)]

        return MatchRecord(
            line=self.tokens[node.id].line,
            name=self.resolver.full_name(node_id),
            values=values,
            endpoint=node.is_endpoint,
        )

    # ------------------------------------------------------------------
    # Replace
    # ------------------------------------------------------------------

    def replace(self, node_id: int, args: Sequence[str]) -> bool:
        """
        Overwrite an endpoint's values positionally.

        Args:
            node_id: Container id
            args: New literal texts; SKIP_PLACEHOLDER leaves a position alone

        Returns:
            True if any token content changed

        Raises:
            InputError: More arguments than the endpoint has values
            TypeMismatchError: Invalid literal, or kind mismatch without force
        """
        node = self.nodes[node_id]
        name = self.resolver.full_name(node_id)

        if not node.is_endpoint:
            logger.debug(f"Skipping '{name}': no values to modify")
            return False

        if len(args) > len(node.values):
            raise InputError(f"'{name}' has {len(node.values)} value(s) but {len(args)} were given")

        changed = False
        for position, (value_id, arg) in enumerate(zip(node.values, args), start=1):
            if arg == SKIP_PLACEHOLDER:
                continue

            target = self.tokens[value_id]
            kind = classify_literal(arg)
            if kind is None:
                raise TypeMismatchError(name, arg, f"value {position} is not a valid literal")

            expected = kind_of_token(target)
            if kind is not expected:
                message = (
                    f"value {position} is {describe(expected)} ({target.content}) "
                    f"but the replacement is {describe(kind)}"
                )
                if not self.options.force:
                    raise TypeMismatchError(name, arg, f"{message}; use --force to override")
                self._warn(f"{name}: {message}; replacing anyway (--force)")

            if target.content != arg:
                logger.debug(f"{name}: value {position} {target.content} -> {arg}")
                target.content = arg
                changed = True

        return changed

    # ------------------------------------------------------------------
    # Soft delete
    # ------------------------------------------------------------------

    def remove(self, node_id: int) -> bool:
        """
        Mark a container and its separator as removed.

        Returns:
            True (removal always requires a write)

        Raises:
            MissingTargetError: If the container is not registered under its parent
        """
        node = self.nodes[node_id]
        name = self.resolver.full_name(node_id)
        parent = self.nodes.get(node.parent) if node.parent is not None else None

        if parent is None or node_id not in parent.children:
            raise MissingTargetError(f"'{name}' is not a child of any container")
        if node.start is None or node.end is None:
            raise MissingTargetError(f"'{name}' was never closed")

        line_start = formatter.starts_line(self.tokens, node.start)
        indentation = formatter.spaces_before(self.tokens, node.start)

        self._mark(node.start, node.end)
        separator, own = self._drop_separator(node, parent, name)
        self._tidy_layout(node, indentation, line_start, separator, own)

        logger.debug(f"Removed '{name}' (tokens {node.start}-{node.end})")
        return True

    def _mark(self, first: int, last: int) -> None:
        for index in range(first, last + 1):
            self.tokens[index].action = Action.REMOVE

    def _preceding_comma(self, token_id: int) -> Optional[int]:
        """Nearest comma before `token_id`, reached over trivia and removed tokens only."""
        for index in range(token_id - 1, 0, -1):
            token = self.tokens[index]
            if token.is_removed or token.kind in TRIVIA_KINDS:
                continue
            if token.kind is TokenKind.COMMA:
                return index
            return None
        return None

    def _is_first_element(self, node: Node) -> bool:
        for index in range(node.start - 1, 0, -1):
            token = self.tokens[index]
            if token.is_removed or token.kind in TRIVIA_KINDS:
                continue
            return token.kind in (TokenKind.BEGIN_LIST, TokenKind.BEGIN_TUPLE)
        return True

    def _drop_separator(self, node: Node, parent: Node, name: str):
        """
        Remove the separator that belongs with `node`.

        Returns:
            (separator token id or None, True if it was the node's own trailing separator)
        """
        if node.comma is not None and not self.tokens[node.comma].is_removed:
            self._mark(node.comma, node.comma)
            return node.comma, True

        # Statements own their terminator; never borrow a neighbour's
        if parent.kind is NodeKind.ROOT:
            return None, False

        # Last element: drop the separator in front of it. This is the previous
        # sibling's comma, or a literal value's comma when one sits in between.
        nearest = self._preceding_comma(node.start)
        if nearest is not None:
            self._mark(nearest, nearest)
            return nearest, False

        if not self._is_first_element(node):
            self._warn(str(SeparatorWarning(name, self.tokens[node.start].line)))
        return None, False

    def _tidy_layout(
        self,
        node: Node,
        indentation: List[int],
        line_start: bool,
        separator: Optional[int],
        own: bool,
    ) -> None:
        """Drop the whitespace that only existed to lay out the removed element."""
        last = separator if own and separator is not None else node.end

        if line_start:
            for index in indentation:
                self._mark(index, index)
            if not own:
                self._drop_line_break_before(indentation[0] if indentation else node.start)
            elif not self._drop_rest_of_line(last):
                # Another element follows on the same line and now starts it
                self._drop_spaces_after(last)
            return

        if not own or self._at_line_end(self._drop_spaces_after(last)):
            for index in indentation:
                self._mark(index, index)

    def _drop_spaces_after(self, last: int) -> int:
        """Remove the space run after `last`; returns the id of the first token past it."""
        index = last + 1
        while index < len(self.tokens) and self.tokens[index].kind is TokenKind.SPACE:
            self._mark(index, index)
            index += 1
        return index

    def _at_line_end(self, index: int) -> bool:
        return index >= len(self.tokens) or self.tokens[index].kind is TokenKind.NEWLINE

    def _drop_rest_of_line(self, last: int) -> bool:
        """Remove trailing spaces, a comment and the newline after `last`, if nothing else follows."""
        index = last + 1
        while index < len(self.tokens) and self.tokens[index].kind is TokenKind.SPACE:
            index += 1
        if index < len(self.tokens) and self.tokens[index].kind is TokenKind.COMMENT:
            index += 1
        if index < len(self.tokens) and self.tokens[index].kind is not TokenKind.NEWLINE:
            return False
        self._mark(last + 1, min(index, len(self.tokens) - 1))
        return True

    def _drop_line_break_before(self, first: int) -> None:
        """Remove the nearest live newline before `first` and the trailing spaces of that line."""
        index = first - 1
        while index > 0 and self.tokens[index].is_removed:
            index -= 1
        if index <= 0 or self.tokens[index].kind is not TokenKind.NEWLINE:
            return
        self._mark(index, index)
        index -= 1
        while index > 0 and (self.tokens[index].is_removed or self.tokens[index].kind is TokenKind.SPACE):
            self._mark(index, index)
            index -= 1

    # ------------------------------------------------------------------
    # Append
    # ------------------------------------------------------------------

    def append(self, node_id: int, args: Sequence[str]) -> bool:
        """
        Add a new `{...}` entry to the list held by a named-list tuple.

        Args:
            node_id: Container id of the tuple owning the list
            args: Literal texts for the new tuple

        Returns:
            True (an append always requires a write)

        Raises:
            TargetShapeError: If the container is not a named list
            TypeMismatchError: If an argument cannot be stored as a literal
        """
        node = self.nodes[node_id]
        name = self.resolver.full_name(node_id)

        if node.named_list is None:
            raise TargetShapeError(name)
        target_list = self.nodes[node.named_list]

        literals = [self._literal_for_add(name, arg) for arg in args]
        if len(literals) == 1 and classify_literal(literals[0]) is not LiteralKind.EMPTY_LIST:
            literals.append("[]")
        entry = formatter.format_tuple(literals)

        last = self._last_element(target_list)
        if last is None:
            if formatter.same_line(self.tokens, target_list.start, target_list.end):
                insertion = entry
            else:
                indent = formatter.indent_for_depth(target_list.depth, self.options.indent_unit)
                insertion = "\n" + indent + entry
            anchor = target_list.start
        else:
            first, anchor = last
            layout = formatter.layout_before(self.tokens, first)
            if "\n" not in layout and self._preceding_comma(first) is None:
                layout = " "
            self.tokens[anchor].content += ","
            insertion = layout + entry

        # A comment trailing the anchor stays on the anchor's line
        if insertion.startswith(("\n", "\r\n")):
            comment = formatter.trailing_comment(self.tokens, anchor)
            if comment is not None:
                anchor = comment
        self.tokens[anchor].content += insertion
        logger.debug(f"Appended {entry} to '{name}'")
        return True

    def _last_element(self, node: Node):
        """(first token id, last token id) of the last live element in a container, or None."""
        candidates = []
        for child_id in node.children:
            child = self.nodes[child_id]
            if not self.tokens[child.end].is_removed:
                candidates.append((child.start, child.end))
        for value_id in node.values:
            if not self.tokens[value_id].is_removed:
                candidates.append((value_id, value_id))
        if not candidates:
            return None
        return max(candidates, key=lambda span: span[1])

    def _literal_for_add(self, name: str, arg: str) -> str:
        if classify_literal(arg) is not None:
            return arg

        coerced = coerce_to_text(arg)
        if coerced is None:
            raise TypeMismatchError(name, arg, "cannot be stored as a literal value")

        notice = f"{name}: storing {arg!r} as the string {coerced}"
        logger.info(notice)
        self.notices.append(notice)
        return coerced

    def _warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)
