"""Find parameter declarations and their references in Bicep source.

Parses the file with the tree-sitter Bicep grammar. A declaration's
default is a literal when its expression node is a single ``string``
(interpolated or not); anything else is an expression. A parameter is
used when an ``identifier`` node with its name appears anywhere other
than a declared name, an object key, a custom type name or a called
function name.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

import tree_sitter
import tree_sitter_bicep

from deployparams.reconciler.schemas import (
    DeclaredDefault,
    ExpressionDefault,
    LiteralDefault,
    ParameterDeclaration,
)

logger = logging.getLogger(__name__)

_COMMENT_NODE_TYPES = frozenset({"comment", "diagnostic_comment"})
_SIMPLE_TYPE_NODE_TYPES = frozenset({"primitive_type", "identifier"})

# Nodes whose first direct identifier child is the name they introduce.
_NAMING_NODE_TYPES = frozenset({
    "parameter_declaration",
    "variable_declaration",
    "output_declaration",
    "metadata_declaration",
    "type_declaration",
    "resource_declaration",
    "module_declaration",
    "user_defined_function",
    "parameter",
})


@dataclass(frozen=True)
class ScannedParameter:
    """A ``param`` declaration located in source text."""

    declaration: ParameterDeclaration
    line: int
    offset: int
    is_used: bool


def scan_source(text: str) -> list[ScannedParameter]:
    """Return every parameter declaration in ``text``, in source order.

    ``line`` is 1-based; ``offset`` is the UTF-8 byte offset of the name.
    """
    tree = _get_parser().parse(text.encode("utf-8"))
    if tree.root_node.has_error:
        logger.debug("Bicep source has syntax errors; scanning what parsed")

    nodes: list[tree_sitter.Node] = []
    _collect_declarations(tree.root_node, nodes)

    names: list[tuple[tree_sitter.Node, tree_sitter.Node]] = []
    for node in nodes:
        name_node = _declared_name(node)
        if name_node is not None:
            names.append((node, name_node))

    referenced: set[str] = set()
    _collect_references(
        tree.root_node, {_text(n) for _, n in names}, referenced
    )

    return [
        ScannedParameter(
            declaration=ParameterDeclaration(
                name=_text(name_node),
                type_name=_type_name(node, name_node),
                default=_default(node),
            ),
            line=name_node.start_point[0] + 1,
            offset=name_node.start_byte,
            is_used=_text(name_node) in referenced,
        )
        for node, name_node in names
    ]


def classify_default(node: tree_sitter.Node) -> DeclaredDefault:
    """Literal iff the default expression is exactly one string."""
    if node.type == "string":
        return LiteralDefault(_text(node))
    return ExpressionDefault(_text(node))


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


def _collect_declarations(
    node: tree_sitter.Node, found: list[tree_sitter.Node]
) -> None:
    if node.type == "parameter_declaration":
        found.append(node)
        return
    for child in node.children:
        _collect_declarations(child, found)


def _declared_name(node: tree_sitter.Node) -> tree_sitter.Node | None:
    for child in node.children:
        if child.type == "identifier":
            return child
    return None


def _type_name(
    node: tree_sitter.Node, name_node: tree_sitter.Node
) -> str | None:
    """The type keyword, or None for composite and resource-typed forms."""
    type_node: tree_sitter.Node | None = None
    for child in node.children:
        if child.start_byte <= name_node.start_byte:
            continue
        if child.type in ("resource", "="):
            return None
        if child.is_named and child.type not in _COMMENT_NODE_TYPES:
            type_node = child
            break
    if type_node is None:
        return None

    # ``type`` wraps a single primitive or named type
    while type_node.type == "type" and type_node.named_child_count == 1:
        type_node = type_node.named_children[0]
    if type_node.type in _SIMPLE_TYPE_NODE_TYPES:
        return _text(type_node)
    return None


def _default(node: tree_sitter.Node) -> DeclaredDefault | None:
    seen_equals = False
    for child in node.children:
        if child.type == "=":
            seen_equals = True
        elif (
            seen_equals
            and child.is_named
            and child.type not in _COMMENT_NODE_TYPES
        ):
            return classify_default(child)
    return None


# ---------------------------------------------------------------------------
# References
# ---------------------------------------------------------------------------


def _collect_references(
    node: tree_sitter.Node, names: set[str], found: set[str]
) -> None:
    """Recursively walk the tree collecting referenced names."""
    if node.type == "identifier":
        name = _text(node)
        if name in names and _is_reference(node):
            found.add(name)
        return
    for child in node.children:
        _collect_references(child, names, found)


def _is_reference(node: tree_sitter.Node) -> bool:
    parent = node.parent
    if parent is None:
        return True
    if parent.type in _NAMING_NODE_TYPES:
        return _declared_name(parent) != node
    if parent.type == "type":
        return False
    if parent.type == "call_expression":
        return parent.child_by_field_name("function") != node
    if parent.type == "object_property":
        # keys sit before the colon
        for child in parent.children:
            if child.type == ":":
                return node.start_byte > child.start_byte
    return True


# ---------------------------------------------------------------------------
# Parser cache and helpers
# ---------------------------------------------------------------------------

# One parser per thread: the handler scans from worker threads.
_local = threading.local()


def _get_parser() -> tree_sitter.Parser:
    """Get or create this thread's cached Bicep parser."""
    parser: tree_sitter.Parser | None = getattr(_local, "parser", None)
    if parser is None:
        capsule: object = tree_sitter_bicep.language()
        parser = tree_sitter.Parser(tree_sitter.Language(capsule))
        _local.parser = parser
    return parser


def _text(node: tree_sitter.Node) -> str:
    return node.text.decode("utf-8") if node.text else ""
