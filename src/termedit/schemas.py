from pydantic import BaseModel, Field
from typing import List, Optional


class MatchRecord(BaseModel):
    """
    One matched container as shown by read commands.
    """
    line: int  # Line of the container's opening delimiter (1-indexed)
    name: str  # Fully qualified dotted name
    values: List[str] = Field(default_factory=list)  # Literal source text, in order
    endpoint: bool = True  # False for containers without direct values

    def render(self, line_numbers: bool = False) -> str:
        """
        Format as `[line: ]name: v1 v2`, or `[line: ]name.*` for non-endpoints.
        A record whose selected values are all out of range renders as `name:`.
        """
        prefix = f"{self.line}: " if line_numbers else ""
        if not self.endpoint:
            return f"{prefix}{self.name}.*"
        if not self.values:
            return f"{prefix}{self.name}:"
        return f"{prefix}{self.name}: {' '.join(self.values)}"


class EditOptions(BaseModel):
    """
    Caller switches that shape matching and mutation.
    """
    force: bool = False  # Accept literal kind mismatches on modify
    show_all: bool = False  # Include non-endpoint containers in read output
    line_numbers: bool = False  # Prefix read output with the opening line
    regex: bool = False  # Treat the target as a raw regular expression
    indent_unit: str = "    "  # Indentation for entries added to multi-line empty lists


class EditResult(BaseModel):
    """
    Outcome of one pass over a document.
    """
    command: str
    target: str
    matches: int = 0
    records: List[MatchRecord] = Field(default_factory=list)
    write_required: bool = False
    warnings: List[str] = Field(default_factory=list)
    notices: List[str] = Field(default_factory=list)
    text: Optional[str] = None  # Re-serialized document when write_required

    def render_records(self, line_numbers: bool = False) -> List[str]:
        return [record.render(line_numbers) for record in self.records]
