from tree_sitter import Node
from typing import Callable, Iterator, Optional, List


class ASTWalker:
    """Utilities for traversing and searching the Java AST"""

    @staticmethod
    def walk(node: Node, callback: Callable[[Node], None]):
        """Perform a depth-first traversal of the AST"""
        callback(node)
        for child in node.children:
            ASTWalker.walk(child, callback)

    @staticmethod
    def get_text(node: Node, source: bytes) -> str:
        """Source text covered by a node"""
        return source[node.start_byte : node.end_byte].decode("utf8", errors="replace")

    @staticmethod
    def get_child_of_type(node: Node, type_name: str) -> Optional[Node]:
        """Find the first direct child of a specific type"""
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    @staticmethod
    def has_child_of_type(node: Node, type_name: str) -> bool:
        return ASTWalker.get_child_of_type(node, type_name) is not None

    @staticmethod
    def find_all_by_type(node: Node, type_name: str) -> List[Node]:
        """Find all descendant nodes of a specific type"""
        results = []

        def check(n):
            if n.type == type_name:
                results.append(n)

        ASTWalker.walk(node, check)
        return results

    @staticmethod
    def named_children_with_fields(node: Node) -> Iterator[tuple[Node, Optional[str]]]:
        """Yield (child, field_name) for every named child, in source order"""
        for index, child in enumerate(node.children):
            if child.is_named:
                yield child, node.field_name_for_child(index)

    @staticmethod
    def iter_errors(node: Node) -> Iterator[Node]:
        """Yield ERROR and missing nodes below (and including) node"""
        if not node.has_error:
            return
        stack = [node]
        while stack:
            current = stack.pop()
            if current.type == "ERROR" or current.is_missing:
                yield current
                continue
            stack.extend(child for child in reversed(current.children) if child.has_error or child.is_missing)
