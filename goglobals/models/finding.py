"""Finding model for global-variable reports."""

from dataclasses import dataclass
import os


RULE_ID = "gochecknoglobals"


@dataclass(frozen=True)
class SourcePosition:
    """Position of a token in a Go source file.

    line and column are 1-based, column counts bytes like the Go
    toolchain does. offset is the 0-based byte offset into the file.
    """
    file_path: str
    line: int
    column: int
    offset: int

    @classmethod
    def from_node(cls, node, file_path: str) -> "SourcePosition":
        """Build a position from a tree-sitter node's start point.

        Args:
            node: tree-sitter node
            file_path: File the node was parsed from

        Returns:
            SourcePosition instance
        """
        row, column = node.start_point
        return cls(
            file_path=os.path.normpath(file_path),
            line=row + 1,
            column=column + 1,
            offset=node.start_byte,
        )

    def __str__(self) -> str:
        return f"{self.file_path}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Finding:
    """One reported global variable."""
    position: SourcePosition
    message: str
    rule_id: str = RULE_ID

    @classmethod
    def for_global(cls, name: str, position: SourcePosition) -> "Finding":
        return cls(position=position, message=f"{name} is a global variable")

    def sort_key(self):
        return (self.position.file_path, self.position.line, self.position.column)

    def to_dict(self) -> dict:
        """Convert to a plain dictionary for reporting.

        Returns:
            Dictionary with file, line, column, offset, rule and message
        """
        return {
            "file": self.position.file_path,
            "line": self.position.line,
            "column": self.position.column,
            "offset": self.position.offset,
            "rule": self.rule_id,
            "message": self.message,
        }

    def __str__(self) -> str:
        return f"{self.position}: {self.message} ({self.rule_id})"
