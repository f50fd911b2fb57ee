"""
Layout helpers: read the whitespace around existing elements so inserted
and removed text keeps the file's own indentation style.
"""

from typing import List, Optional

from termedit.parser.tokens import Token, TokenKind, WHITESPACE_KINDS


def format_tuple(literals: List[str]) -> str:
    """Render literal texts as a tuple, e.g. `{foo, "1.0"}`."""
    return "{" + ", ".join(literals) + "}"


def indent_for_depth(depth: int, indent_unit: str) -> str:
    return indent_unit * max(depth, 0)


def spaces_before(tokens: List[Token], token_id: int) -> List[int]:
    """
    Ids of the live space tokens directly before `token_id`, nearest last.

    Tokens already removed by an earlier edit are stepped over.
    """
    run = []
    index = token_id - 1
    while index > 0 and (tokens[index].is_removed or tokens[index].kind is TokenKind.SPACE):
        if not tokens[index].is_removed:
            run.append(index)
        index -= 1
    run.reverse()
    return run


def starts_line(tokens: List[Token], token_id: int) -> bool:
    """True if only indentation (or removed text) separates `token_id` from a line start."""
    index = token_id - 1
    while index > 0 and (tokens[index].is_removed or tokens[index].kind is TokenKind.SPACE):
        index -= 1
    if index <= 0:
        return True
    return tokens[index].kind is TokenKind.NEWLINE


def layout_before(tokens: List[Token], token_id: int) -> str:
    """
    Whitespace that introduces the element starting at `token_id`.

    Multi-line runs are cut back to their last newline, so the result is
    either "\\n" + indentation or the inline spacing.
    """
    parts = []
    index = token_id - 1
    while index > 0 and tokens[index].kind in WHITESPACE_KINDS and not tokens[index].is_removed:
        parts.append(tokens[index].content)
        index -= 1
    layout = "".join(reversed(parts))
    if "\n" in layout:
        cut = layout.rindex("\n")
        # Keep a CRLF pair intact
        if cut > 0 and layout[cut - 1] == "\r":
            cut -= 1
        layout = layout[cut:]
    return layout


def same_line(tokens: List[Token], first: int, last: int) -> bool:
    """True if no newline occurs in the tokens from `first` to `last` inclusive."""
    return not any("\n" in tokens[index].content for index in range(first, last + 1))


def trailing_comment(tokens: List[Token], token_id: int) -> Optional[int]:
    """Id of a comment following `token_id` on the same line, or None."""
    index = token_id + 1
    while index < len(tokens) and tokens[index].kind is TokenKind.SPACE:
        index += 1
    if index < len(tokens) and tokens[index].kind is TokenKind.COMMENT:
        return index
    return None
