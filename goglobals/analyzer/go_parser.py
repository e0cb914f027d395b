"""Wrapper around tree-sitter for parsing Go source."""

from dataclasses import dataclass
from typing import Dict
import os
import logging
import threading

import tree_sitter_go
from tree_sitter import Language, Parser

logger = logging.getLogger(__name__)


class GoParseError(Exception):
    """Error raised when a Go source file cannot be parsed."""
    pass


@dataclass(frozen=True)
class ParsedFile:
    """A Go file together with its syntax tree."""
    path: str
    tree: object

    @property
    def root_node(self):
        return self.tree.root_node


class GoAnalyzer:
    """Parses Go source files with tree-sitter.

    Trees are cached per absolute path so repeated lookups of the same
    file are not reparsed. Each thread gets its own tree-sitter Parser.
    """

    def __init__(self):
        """Initialize the analyzer with the tree-sitter-go grammar."""
        self.language = Language(tree_sitter_go.language())

        self._local = threading.local()

        # thread-safe tree cache
        self._trees: Dict[str, ParsedFile] = {}
        self._cache_lock = threading.Lock()

        logger.debug("GoAnalyzer initialized")

    def _parser(self) -> Parser:
        parser = getattr(self._local, "parser", None)
        if parser is None:
            parser = Parser(self.language)
            self._local.parser = parser
        return parser

    def parse_file(self, file_path: str, force_reparse: bool = False) -> ParsedFile:
        """Parse a Go file, using the cache when possible.

        Args:
            file_path: Path to the .go file
            force_reparse: Reparse even if a cached tree exists

        Returns:
            ParsedFile for the file

        Raises:
            GoParseError: If the file cannot be read
        """
        abs_path = os.path.abspath(file_path)

        with self._cache_lock:
            if not force_reparse and abs_path in self._trees:
                return self._trees[abs_path]

        try:
            with open(abs_path, "rb") as f:
                source = f.read()
        except OSError as e:
            raise GoParseError(f"Failed to read {abs_path}: {e}") from e

        parsed = ParsedFile(path=file_path, tree=self._parse_bytes(source, file_path))

        with self._cache_lock:
            self._trees[abs_path] = parsed

        return parsed

    def parse_string(self, source_code: str, filename: str = "temp.go") -> ParsedFile:
        """Parse Go source held in a string.

        Args:
            source_code: Go source text
            filename: Virtual file name used in positions

        Returns:
            ParsedFile for the source
        """
        tree = self._parse_bytes(source_code.encode("utf-8"), filename)
        return ParsedFile(path=filename, tree=tree)

    def _parse_bytes(self, source: bytes, file_path: str):
        tree = self._parser().parse(source)
        if tree.root_node.has_error:
            logger.warning(f"Syntax errors in {file_path}; scanning what parsed")
        return tree

    def clear_cache(self) -> None:
        """Clear the tree cache."""
        with self._cache_lock:
            self._trees.clear()
        logger.debug("Tree cache cleared")
