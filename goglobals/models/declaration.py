"""Declared-name model for package-level var declarations."""

from dataclasses import dataclass
from typing import Any, Optional

from .finding import SourcePosition


def is_exported(name: str) -> bool:
    """Report whether a Go identifier is exported.

    Go exports an identifier when its first character is an uppercase
    letter.

    Args:
        name: Identifier text

    Returns:
        True if the name is exported
    """
    return bool(name) and name[0].isupper()


@dataclass(frozen=True)
class DeclaredName:
    """One identifier introduced by a top-level var declaration."""
    name: str
    exported: bool
    position: SourcePosition

    # tree-sitter expression node positionally paired with the name
    initializer: Optional[Any] = None

    @classmethod
    def from_identifier(
        cls,
        node,
        file_path: str,
        initializer=None
    ) -> "DeclaredName":
        """Build a DeclaredName from an identifier node.

        Args:
            node: tree-sitter identifier node
            file_path: File the node was parsed from
            initializer: Associated expression node, if any

        Returns:
            DeclaredName instance
        """
        name = node.text.decode("utf-8")
        return cls(
            name=name,
            exported=is_exported(name),
            position=SourcePosition.from_node(node, file_path),
            initializer=initializer,
        )

    def __str__(self) -> str:
        return f"{self.name} at {self.position}"
