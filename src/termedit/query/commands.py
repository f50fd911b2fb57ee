"""
The closed set of commands the engine understands.

Each variant carries its match mode and argument constraints, so callers
never look a command up by string at dispatch time.
"""

from enum import Enum

from termedit.exceptions import InputError
from .matcher import MatchMode


class Command(str, Enum):
    LIST = "list"
    GET = "get"
    SEARCH = "search"
    ADD = "add"
    MODIFY = "modify"
    REMOVE = "remove"

    @property
    def mode(self) -> MatchMode:
        if self is Command.LIST:
            return MatchMode.PREFIX
        if self is Command.SEARCH:
            return MatchMode.SUBSTRING
        return MatchMode.EXACT

    @property
    def writes(self) -> bool:
        """Write commands re-serialize the whole file instead of printing records."""
        return self in (Command.ADD, Command.MODIFY, Command.REMOVE)

    @property
    def allows_no_match(self) -> bool:
        """Listing-style commands treat zero matches as empty output."""
        return self in (Command.LIST, Command.SEARCH)

    @property
    def min_args(self) -> int:
        return 1 if self in (Command.ADD, Command.MODIFY) else 0

    @property
    def max_args(self):
        """Upper bound on positional arguments, or None when unbounded."""
        if self in (Command.LIST, Command.SEARCH, Command.REMOVE):
            return 0
        return None

    def check_args(self, args) -> None:
        """
        Validate the positional argument count for this command.

        Raises:
            InputError: If too few or too many arguments were supplied
        """
        if len(args) < self.min_args:
            raise InputError(f"'{self.value}' needs at least {self.min_args} value(s)")
        if self.max_args is not None and len(args) > self.max_args:
            raise InputError(f"'{self.value}' takes no values, got {len(args)}")
