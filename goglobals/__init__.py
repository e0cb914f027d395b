"""Detection of package-level variables in Go source files."""

from .analyzer import GoAnalyzer, scan, is_exempt
from .models import Finding, SourcePosition, DeclaredName
from .runner import FindingCollector, GlobalsChecker

__version__ = "0.1.0"

__all__ = [
    "GoAnalyzer",
    "scan",
    "is_exempt",
    "Finding",
    "SourcePosition",
    "DeclaredName",
    "FindingCollector",
    "GlobalsChecker",
]
