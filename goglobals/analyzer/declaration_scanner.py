"""Detection of package-level var declarations in Go syntax trees."""

from typing import Iterator, List, Optional
import logging

from ..models.declaration import DeclaredName
from ..models.finding import Finding
from .exemptions import is_exempt

logger = logging.getLogger(__name__)


class MalformedTreeError(Exception):
    """The syntax tree does not have the shape the parser guarantees."""
    pass


def scan(tree, file_path: str) -> List[Finding]:
    """Find non-exempt global variables in one parsed file.

    Only top-level ``var`` declarations are considered. Findings follow
    source declaration order, one per reported name. The tree is not
    modified.

    Args:
        tree: tree-sitter Tree (or its root node) of a Go file
        file_path: Path recorded in finding positions

    Returns:
        List of findings, empty if nothing qualifies

    Raises:
        MalformedTreeError: If the tree violates the grammar's shape
    """
    root = getattr(tree, "root_node", tree)
    if root.type != "source_file":
        raise MalformedTreeError(
            f"Expected source_file root in {file_path}, got {root.type}"
        )

    findings: List[Finding] = []
    for name in iter_declared_names(root, file_path):
        if is_exempt(name):
            logger.debug(f"Exempt global: {name}")
            continue
        findings.append(Finding.for_global(name.name, name.position))

    return findings


def iter_declared_names(root, file_path: str) -> Iterator[DeclaredName]:
    """Yield every name declared by a top-level var declaration.

    Args:
        root: source_file node
        file_path: Path recorded in positions

    Yields:
        DeclaredName in source order
    """
    for decl in root.named_children:
        if decl.type != "var_declaration":
            continue
        for spec in _var_specs(decl):
            yield from _spec_names(spec, file_path)


def _var_specs(decl) -> Iterator:
    # Older grammars put the specs of a parenthesised group directly
    # under var_declaration, newer ones wrap them in var_spec_list.
    for child in decl.named_children:
        if child.type == "var_spec":
            yield child
        elif child.type == "var_spec_list":
            for spec in child.named_children:
                if spec.type == "var_spec":
                    yield spec


def _spec_names(spec, file_path: str) -> Iterator[DeclaredName]:
    identifiers = spec.children_by_field_name("name")
    if not identifiers:
        if spec.has_error:
            logger.debug(
                f"Skipping var spec with parse errors in {file_path} "
                f"at line {spec.start_point[0] + 1}"
            )
            return
        raise MalformedTreeError(
            f"var_spec without names in {file_path} "
            f"at line {spec.start_point[0] + 1}"
        )

    values = _spec_values(spec)
    for index, identifier in enumerate(identifiers):
        initializer = values[index] if index < len(values) else None
        yield DeclaredName.from_identifier(identifier, file_path, initializer)


def _spec_values(spec) -> List:
    value_list: Optional[object] = spec.child_by_field_name("value")
    if value_list is None:
        return []
    if value_list.type != "expression_list":
        return [value_list]
    return [
        node for node in value_list.named_children
        if node.type != "comment"
    ]


class DeclarationScanner:
    """Scanner bound to the parsed files handed out by GoAnalyzer."""

    def scan_file(self, parsed) -> List[Finding]:
        """Scan a ParsedFile.

        Args:
            parsed: ParsedFile from GoAnalyzer

        Returns:
            Findings for the file in declaration order
        """
        findings = scan(parsed.tree, parsed.path)
        logger.debug(f"{parsed.path}: {len(findings)} global(s)")
        return findings
