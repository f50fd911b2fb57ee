"""
Literal classification for values supplied on the command line.

Arguments are classified with the same rule table the tokenizer uses, so a
value is accepted exactly when the file parser would read it back as a
single literal of that kind.
"""

from enum import Enum
from typing import Optional

from termedit.exceptions import LexError
from termedit.parser.tokenizer import tokenize_all
from termedit.parser.tokens import Token, TokenKind


class LiteralKind(str, Enum):
    ATOM = "atom"
    NUM = "num"
    TEXT = "text"
    EMPTY_LIST = "empty_list"
    EMPTY_TUPLE = "empty_tuple"


DESCRIPTIONS = {
    LiteralKind.ATOM: "an atom",
    LiteralKind.NUM: "a number",
    LiteralKind.TEXT: "a quoted string",
    LiteralKind.EMPTY_LIST: "an empty list",
    LiteralKind.EMPTY_TUPLE: "an empty tuple",
}

SKIP_PLACEHOLDER = "_"


def classify_literal(value: str) -> Optional[LiteralKind]:
    """
    Classify a command-line value by its lexical form.

    Args:
        value: Raw argument text, e.g. `info`, `'my-app'`, `8080`, `"x"`, `[]`

    Returns:
        The literal kind, or None if the value is not exactly one literal
    """
    try:
        tokens = tokenize_all(value)[1:]
    except LexError:
        return None

    kinds = [token.kind for token in tokens]
    if len(tokens) == 1 and tokens[0].is_literal:
        return LiteralKind(tokens[0].kind.value)
    if kinds == [TokenKind.BEGIN_LIST, TokenKind.END_LIST]:
        return LiteralKind.EMPTY_LIST
    if kinds == [TokenKind.BEGIN_TUPLE, TokenKind.END_TUPLE]:
        return LiteralKind.EMPTY_TUPLE
    return None


def kind_of_token(token: Token) -> LiteralKind:
    """Literal kind of an existing value token (quoted atoms are atoms)."""
    return LiteralKind(token.kind.value)


def coerce_to_text(value: str) -> Optional[str]:
    """
    Quote a scalar value as a string literal.

    Container-shaped input is not a scalar and is refused.

    Returns:
        The quoted literal, or None if the value cannot be coerced
    """
    if value.startswith(("[", "{")):
        return None

    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    quoted = f'"{escaped}"'
    if classify_literal(quoted) is not LiteralKind.TEXT:
        return None
    return quoted


def describe(kind: LiteralKind) -> str:
    return DESCRIPTIONS[kind]
