"""
Tokenizer: lossless lexer for the term configuration syntax.

Every byte of the input ends up in exactly one token, so concatenating the
token contents reproduces the source. Rules are tried in order and the
first one that matches a non-empty prefix wins.
"""

import re
from typing import Iterator, List, Tuple

from termedit.exceptions import LexError
from .tokens import Token, TokenKind


# Order is significant: first match wins, not longest match.
TOKEN_RULES: List[Tuple[TokenKind, re.Pattern]] = [
    (TokenKind.COMMENT, re.compile(r"%[^\n]*")),
    (TokenKind.SPACE, re.compile(r"[ \t\r\f\v]+")),
    (TokenKind.COMMA, re.compile(r",")),
    (TokenKind.BEGIN_LIST, re.compile(r"\[")),
    (TokenKind.END_LIST, re.compile(r"\]")),
    (TokenKind.BEGIN_TUPLE, re.compile(r"\{")),
    (TokenKind.END_TUPLE, re.compile(r"\}")),
    (TokenKind.ATOM, re.compile(r"[a-z][A-Za-z0-9_@]*")),
    (TokenKind.ATOM, re.compile(r"'(?:[^'\\]|\\.)*'", re.DOTALL)),
    (TokenKind.NUM, re.compile(r"-?[0-9]*\.?[0-9]+(?:[eE][+-]?[0-9]+)?")),
    (TokenKind.TEXT, re.compile(r'"(?:[^"\\]|\\.)*"', re.DOTALL)),
    (TokenKind.END_ROOT, re.compile(r"\.")),
    (TokenKind.NEWLINE, re.compile(r"\n")),
]

SNIPPET_LENGTH = 30


def tokenize(text: str) -> Iterator[Token]:
    """
    Yield tokens for `text`, starting with the synthetic root token.

    Args:
        text: Full source text

    Yields:
        Token records in document order, ids 0..n

    Raises:
        LexError: If no rule matches at some position
    """
    line = 1
    position = 0
    token_id = 0

    yield Token(id=token_id, kind=TokenKind.ROOT, content="", line=line, offset=0, length=0)

    while position < len(text):
        for kind, pattern in TOKEN_RULES:
            match = pattern.match(text, position)
            if match and match.end() > position:
                break
        else:
            raise LexError(line, text[position:position + SNIPPET_LENGTH])

        content = match.group(0)
        token_id += 1
        yield Token(
            id=token_id,
            kind=kind,
            content=content,
            line=line,
            offset=position,
            length=len(content),
        )

        line += content.count("\n")
        position = match.end()


def tokenize_all(text: str) -> List[Token]:
    """Tokenize eagerly. Convenience wrapper for callers that need the whole list."""
    return list(tokenize(text))
