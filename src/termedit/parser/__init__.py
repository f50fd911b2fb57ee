"""
Lossless parsing for term configuration files.

tokenize() produces the token arena; TreeBuilder annotates it with
containers; NameResolver turns containers into dotted names.
"""

from .tokens import Action, Token, TokenKind
from .tokenizer import TOKEN_RULES, tokenize, tokenize_all
from .tree import Node, NodeKind, TreeBuilder, ROOT_ID
from .names import NameResolver

__all__ = [
    "Action",
    "Token",
    "TokenKind",
    "TOKEN_RULES",
    "tokenize",
    "tokenize_all",
    "Node",
    "NodeKind",
    "TreeBuilder",
    "ROOT_ID",
    "NameResolver",
]
