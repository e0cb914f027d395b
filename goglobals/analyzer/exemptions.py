"""Exemption policy for package-level variables.

A declared name is exempt when it is the blank identifier, the literal
name ``version``, looks like a sentinel error, or is initialized by a
call (or composite literal) of one of the whitelisted qualified
functions below.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..models.declaration import DeclaredName


@dataclass(frozen=True)
class ExemptionRule:
    """Qualified ``owner.member`` reference that exempts an initializer."""
    owner: str
    member: str

    def matches(self, owner: str, member: str) -> bool:
        return self.owner == owner and self.member == member


EXEMPTION_RULES: Tuple[ExemptionRule, ...] = (
    ExemptionRule(owner="errors", member="New"),
    ExemptionRule(owner="fmt", member="Errorf"),
    ExemptionRule(owner="regexp", member="MustCompile"),
)

BLANK_IDENTIFIER = "_"
VERSION_NAME = "version"


def looks_like_error(name: str, exported: bool) -> bool:
    """Report whether a name starts like an error variable.

    Unexported names must start with ``err`` and exported ones with
    ``Err``. This is a plain prefix test, so ``errorCode`` matches.

    Args:
        name: Identifier text
        exported: Whether the identifier is exported

    Returns:
        True if the name carries the error prefix
    """
    prefix = "Err" if exported else "err"
    return name.startswith(prefix)


def is_exempt_selector(owner_node, member_node) -> bool:
    """Check an ``owner.member`` pair against the rule table.

    Args:
        owner_node: Node of the qualifier; must be a plain identifier
        member_node: Node of the selected member

    Returns:
        True if the pair is whitelisted
    """
    if owner_node is None or member_node is None:
        return False
    if owner_node.type not in ("identifier", "package_identifier"):
        return False

    owner = owner_node.text.decode("utf-8")
    member = member_node.text.decode("utf-8")
    return any(rule.matches(owner, member) for rule in EXEMPTION_RULES)


def is_exempt_initializer(node) -> bool:
    """Check whether an initializer expression exempts its name.

    Only ``owner.member(...)`` calls and ``owner.Member{...}`` composite
    literals qualify.

    Args:
        node: tree-sitter expression node, or None

    Returns:
        True if the initializer is a whitelisted qualified call/literal
    """
    if node is None:
        return False

    if node.type == "call_expression":
        target = node.child_by_field_name("function")
    elif node.type == "composite_literal":
        target = node.child_by_field_name("type")
    else:
        return False

    owner, member = _split_qualified(target)
    return is_exempt_selector(owner, member)


def _split_qualified(node) -> Tuple[Optional[object], Optional[object]]:
    if node is None:
        return None, None
    if node.type == "selector_expression":
        return (
            node.child_by_field_name("operand"),
            node.child_by_field_name("field"),
        )
    if node.type == "qualified_type":
        return (
            node.child_by_field_name("package"),
            node.child_by_field_name("name"),
        )
    return None, None


def is_exempt(name: DeclaredName) -> bool:
    """Decide whether a declared name is excluded from reporting.

    Args:
        name: Declared name with its optional initializer

    Returns:
        True if the name must not be reported
    """
    if name.name == BLANK_IDENTIFIER:
        return True
    # exact lowercase spelling only; "Version" is still reported
    if name.name == VERSION_NAME:
        return True
    if looks_like_error(name.name, name.exported):
        return True
    return is_exempt_initializer(name.initializer)
