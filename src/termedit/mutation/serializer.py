from typing import List, Optional

from termedit.parser.tokens import Token


def serialize(tokens: List[Token], start: int = 0, end: Optional[int] = None) -> str:
    """
    Rebuild text from the token arena.

    Removed tokens contribute nothing; every other token contributes its
    (possibly replaced) content, in original order.

    Args:
        tokens: Token arena
        start: First token id to include
        end: Last token id to include (defaults to the last token)

    Returns:
        Serialized text
    """
    if end is None:
        end = len(tokens) - 1
    return "".join(
        token.content
        for token in tokens[start:end + 1]
        if not token.is_removed
    )
