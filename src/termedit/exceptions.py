# Custom exceptions for termedit

from typing import Optional


class TermEditError(Exception):
    """Base exception for all application-specific errors."""
    exit_code = 1
    show_usage = False


class LexError(TermEditError):
    """Raised when no token rule matches at the current input position."""
    def __init__(self, line: int, snippet: str):
        self.line = line
        self.snippet = snippet
        super().__init__(f"Unrecognized input on line {line}: {snippet!r}")


class StructuralError(TermEditError):
    """Raised when a closing delimiter does not match the innermost open container."""
    def __init__(self, line: int, message: str):
        self.line = line
        self.message = message
        super().__init__(f"Structural error on line {line}: {message}")


class NoMatchError(TermEditError):
    """Raised when the document closes with zero matches for a non-listing command."""
    def __init__(self, pattern: str, command: str):
        self.pattern = pattern
        self.command = command
        super().__init__(f"No entry matches '{pattern}' for '{command}'")


class TypeMismatchError(TermEditError):
    """Raised when a supplied value's lexical form does not fit its target."""
    def __init__(self, name: str, value: str, message: str):
        self.name = name
        self.value = value
        super().__init__(f"{name}: {message} (got {value!r})")


class MissingTargetError(TermEditError):
    """Raised when a removal target is not registered under its parent."""
    pass


class TargetShapeError(TermEditError):
    """Raised when 'add' targets a container that is not a named list."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"'{name}' is not a named list; add needs a tuple holding exactly one list"
        )


class InputError(TermEditError):
    """Raised for malformed command-line input."""
    exit_code = 2
    show_usage = True


class ConfigError(TermEditError):
    """Raised for configuration-related problems."""
    pass


class SeparatorWarning(UserWarning):
    """
    Recoverable condition: a separator could not be located during removal.

    Never raised; instances are logged and collected on the edit result.
    """
    def __init__(self, name: str, line: Optional[int] = None):
        self.name = name
        self.line = line
        where = f" (line {line})" if line is not None else ""
        super().__init__(
            f"Could not find a separator to drop while removing '{name}'{where}; "
            f"re-run with --diff to inspect the result"
        )
