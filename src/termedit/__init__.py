"""
termedit - format-preserving editor for Erlang-style term config files

Query and edit nested tuple/list terms by dotted name without disturbing
comments, whitespace or layout.
"""

__version__ = "0.3.0"

# Core exports
from termedit.exceptions import TermEditError
from termedit.mutation import ConfigWriter, EditSession, read_document
from termedit.query import Command
from termedit.schemas import EditOptions, EditResult, MatchRecord

__all__ = [
    "__version__",
    "TermEditError",
    "ConfigWriter",
    "EditSession",
    "read_document",
    "Command",
    "EditOptions",
    "EditResult",
    "MatchRecord",
]
