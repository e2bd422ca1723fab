"""Java-specific AST pattern recognition."""

from typing import Optional

from tree_sitter import Node

from .ast_walker import ASTWalker

# Local variable type inference keyword, parsed as a plain type_identifier
INFERRED_TYPE = "var"


class JavaPatterns:
    """Recognize Java-specific patterns in the AST."""

    @staticmethod
    def is_public(node: Node) -> bool:
        """Check if a declaration carries the 'public' modifier."""
        modifiers = ASTWalker.get_child_of_type(node, "modifiers")
        if not modifiers:
            return False
        return ASTWalker.has_child_of_type(modifiers, "public")

    @staticmethod
    def get_declared_name(node: Node, source: bytes) -> Optional[str]:
        """Name of a type, method or variable declaration."""
        name_node = node.child_by_field_name("name")
        if not name_node:
            return None
        return ASTWalker.get_text(name_node, source)

    @staticmethod
    def get_type_name(node: Node, source: bytes) -> Optional[str]:
        """Dotted name of a class type, without type arguments or annotations.

        Examples: List, Map.Entry, java.util.List (from List<String>,
        Map.Entry<K, V>, java.util.@NonNull List).
        """
        if node.type == "type_identifier":
            return ASTWalker.get_text(node, source)

        if node.type == "generic_type":
            raw = node.named_children[0] if node.named_children else None
            return JavaPatterns.get_type_name(raw, source) if raw else None

        if node.type == "scoped_type_identifier":
            parts = []
            for child in node.named_children:
                if child.type in ("type_identifier", "scoped_type_identifier", "generic_type"):
                    part = JavaPatterns.get_type_name(child, source)
                    if part:
                        parts.append(part)
            return ".".join(parts) or None

        return None

    @staticmethod
    def get_qualified_name(node: Node, source: bytes) -> Optional[str]:
        """Dotted name of an identifier chain (a.b.c), None for anything else.

        Chains rooted at 'this', 'super', calls or array accesses are not
        names and yield None.
        """
        if node.type == "identifier":
            return ASTWalker.get_text(node, source)

        if node.type in ("field_access", "scoped_identifier"):
            left = node.child_by_field_name("object") or node.child_by_field_name("scope")
            right = node.child_by_field_name("field") or node.child_by_field_name("name")
            if left is None or right is None or right.type != "identifier":
                return None
            prefix = JavaPatterns.get_qualified_name(left, source)
            if prefix is None:
                return None
            return f"{prefix}.{ASTWalker.get_text(right, source)}"

        return None

    @staticmethod
    def get_chain_root(node: Node) -> Node:
        """Leftmost node of a field access chain."""
        current = node
        while current.type in ("field_access", "scoped_identifier"):
            left = current.child_by_field_name("object") or current.child_by_field_name("scope")
            if left is None:
                break
            current = left
        return current

    @staticmethod
    def is_inferred_type(name: str) -> bool:
        return name == INFERRED_TYPE

    @staticmethod
    def is_simple_assignment(node: Node) -> bool:
        """Check if an assignment_expression uses plain '=' (not '+=' etc.)."""
        operator = node.child_by_field_name("operator")
        return operator is not None and operator.type == "="
