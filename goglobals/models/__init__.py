"""Data models for global variable detection."""

from .finding import Finding, SourcePosition, RULE_ID
from .declaration import DeclaredName, is_exported

__all__ = [
    "Finding",
    "SourcePosition",
    "RULE_ID",
    "DeclaredName",
    "is_exported",
]
