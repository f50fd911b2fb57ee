"""
Token records for the lossless term tokenizer.

A token keeps the exact source text it spans. Position fields are fixed at
tokenization time; `content` and `action` are the only edit slots.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TokenKind(str, Enum):
    """Lexical categories, in no particular order (rule order lives in TOKEN_RULES)."""
    ROOT = "root"
    COMMENT = "comment"
    SPACE = "space"
    COMMA = "comma"
    BEGIN_LIST = "begin_list"
    END_LIST = "end_list"
    BEGIN_TUPLE = "begin_tuple"
    END_TUPLE = "end_tuple"
    ATOM = "atom"
    NUM = "num"
    TEXT = "text"
    END_ROOT = "end_root"
    NEWLINE = "newline"


class Action(str, Enum):
    """Edit markers checked at serialization time."""
    REMOVE = "remove"


LITERAL_KINDS = frozenset({TokenKind.ATOM, TokenKind.NUM, TokenKind.TEXT})
OPEN_KINDS = frozenset({TokenKind.BEGIN_LIST, TokenKind.BEGIN_TUPLE})
CLOSE_KINDS = frozenset({TokenKind.END_LIST, TokenKind.END_TUPLE})
TRIVIA_KINDS = frozenset({TokenKind.SPACE, TokenKind.NEWLINE, TokenKind.COMMENT})
WHITESPACE_KINDS = frozenset({TokenKind.SPACE, TokenKind.NEWLINE})


@dataclass
class Token:
    """One lexical unit of the source text."""
    id: int
    kind: TokenKind
    content: str
    line: int
    offset: int
    length: int
    node: Optional[int] = None  # container opened/closed by this token
    comma: Optional[int] = None  # trailing separator of a literal value
    action: Optional[Action] = None

    @property
    def is_literal(self) -> bool:
        return self.kind in LITERAL_KINDS

    @property
    def is_removed(self) -> bool:
        return self.action is Action.REMOVE

    @property
    def is_quoted_atom(self) -> bool:
        return self.kind is TokenKind.ATOM and self.content.startswith("'")
