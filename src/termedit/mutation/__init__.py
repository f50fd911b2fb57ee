"""
Mutation package: edit primitives, serialization and the save step.

Edits are applied to the token arena in place (content overwrite, soft
delete, append-to-content), so unchanged regions serialize byte for byte.
"""

from .facade import EditSession, read_document
from .editor import TermEditor
from .serializer import serialize
from .writer import ConfigWriter
from .literals import LiteralKind, classify_literal, coerce_to_text
from .config import get_mutation_config, validate_mutation_config

__all__ = [
    # Main facade
    "EditSession",
    "read_document",

    # Components
    "TermEditor",
    "ConfigWriter",
    "serialize",

    # Literals
    "LiteralKind",
    "classify_literal",
    "coerce_to_text",

    # Configuration
    "get_mutation_config",
    "validate_mutation_config",
]
