"""Shared fixtures."""

import pytest

from goglobals.analyzer.go_parser import GoAnalyzer


@pytest.fixture(scope="session")
def analyzer():
    return GoAnalyzer()


@pytest.fixture
def parse(analyzer):
    """Parse a Go snippet into a ParsedFile named main.go."""
    def _parse(source: str, filename: str = "main.go"):
        return analyzer.parse_string(source, filename)
    return _parse
