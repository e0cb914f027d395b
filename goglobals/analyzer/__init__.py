"""Go source analysis for package-level variables."""

from .go_parser import GoAnalyzer, GoParseError, ParsedFile
from .declaration_scanner import (
    DeclarationScanner,
    MalformedTreeError,
    iter_declared_names,
    scan,
)
from .exemptions import (
    EXEMPTION_RULES,
    ExemptionRule,
    is_exempt,
    is_exempt_initializer,
    looks_like_error,
)

__all__ = [
    "GoAnalyzer",
    "GoParseError",
    "ParsedFile",
    "DeclarationScanner",
    "MalformedTreeError",
    "iter_declared_names",
    "scan",
    "EXEMPTION_RULES",
    "ExemptionRule",
    "is_exempt",
    "is_exempt_initializer",
    "looks_like_error",
]
