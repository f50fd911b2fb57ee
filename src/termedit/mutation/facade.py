"""
EditSession: run one command over one document.

Pipeline:
1. Tokenize (generator, one token at a time)
2. Feed each token to the TreeBuilder
3. On every tuple close, the QueryEngine tests the dotted name and dispatches
4. Read commands render their record at dispatch time; write commands queue
   the container and apply the edit once the pass has finished, when every
   trailing separator is known and the whole document is known to be valid
5. Serialize if anything changed
"""

import re
from pathlib import Path
from typing import List, Optional, Sequence

from termedit.exceptions import InputError, NoMatchError
from termedit.logging_config import logger
from termedit.parser.names import NameResolver
from termedit.parser.tokenizer import tokenize
from termedit.parser.tree import TreeBuilder
from termedit.query.commands import Command
from termedit.query.matcher import QueryEngine, compile_pattern
from termedit.schemas import EditOptions, EditResult
from .editor import TermEditor
from .serializer import serialize


def read_document(path: Path) -> str:
    """Read a config file without translating line endings."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


class EditSession:
    """
    One pass of one command over an in-memory document.

    Usage:
        session = EditSession(text, Command.GET, "kernel.logger_level")
        result = session.run()
        print("\\n".join(result.render_records()))
    """

    def __init__(
        self,
        text: str,
        command: Command,
        target: str = "",
        args: Optional[Sequence[str]] = None,
        options: Optional[EditOptions] = None,
    ):
        """
        Initialize an edit session.

        Args:
            text: Full document text
            command: Command to run
            target: Name pattern (exact, prefix or substring depending on command)
            args: Positional arguments passed to the command's operation
            options: Force/show-all/regex switches
        """
        self.text = text
        self.command = command
        self.target = target
        self.args = list(args or [])
        self.options = options or EditOptions()

        self.builder = TreeBuilder()
        self.resolver = NameResolver(self.builder.nodes)
        self.editor = TermEditor(self.builder.tokens, self.builder.nodes, self.resolver, self.options)
        self.result = EditResult(command=command.value, target=target)
        self._queued: List[int] = []
        self._positions = self._parse_positions() if command is Command.GET else None

    def run(self) -> EditResult:
        """
        Execute the command.

        Returns:
            EditResult with records (read commands) or new text (write commands)

        Raises:
            TermEditError: Any fatal condition; nothing has been written when it propagates
        """
        self.command.check_args(self.args)

        try:
            pattern = compile_pattern(self.target, self.command.mode, self.options.regex)
        except re.error as e:
            raise InputError(f"Invalid pattern {self.target!r}: {e}") from e

        engine = QueryEngine(self.resolver, pattern, self._dispatch)
        self.builder.on_close = engine.on_close

        for token in tokenize(self.text):
            self.builder.feed(token)
        self.builder.finish()

        self.result.matches = engine.matches
        if engine.matches == 0 and not self.command.allows_no_match:
            raise NoMatchError(self.target, self.command.value)

        write_required = False
        for node_id in self._queued:
            write_required = self._apply(node_id) or write_required

        self.result.write_required = write_required
        self.result.warnings = list(self.editor.warnings)
        self.result.notices = list(self.editor.notices)
        if write_required:
            self.result.text = serialize(self.builder.tokens)

        logger.debug(
            f"{self.command.value} '{self.target}': {engine.matches} match(es), "
            f"write_required={write_required}"
        )
        return self.result

    def _dispatch(self, node_id: int) -> None:
        """Per-match handler, one branch per command variant."""
        command = self.command
        if command in (Command.LIST, Command.SEARCH, Command.GET):
            node = self.builder.nodes[node_id]
            if node.is_endpoint or self.options.show_all:
                self.result.records.append(self.editor.record(node_id, self._positions))
        elif command in (Command.ADD, Command.MODIFY, Command.REMOVE):
            self._queued.append(node_id)
        else:
            raise ValueError(f"Unhandled command {command!r}")

    def _apply(self, node_id: int) -> bool:
        if self.command is Command.ADD:
            return self.editor.append(node_id, self.args)
        if self.command is Command.MODIFY:
            return self.editor.replace(node_id, self.args)
        return self.editor.remove(node_id)

    def _parse_positions(self) -> List[int]:
        positions = []
        for arg in self.args:
            try:
                position = int(arg)
            except ValueError:
                raise InputError(f"Value index must be a positive integer, got {arg!r}") from None
            if position < 1:
                raise InputError(f"Value index must be a positive integer, got {arg!r}")
            positions.append(position)
        return positions
