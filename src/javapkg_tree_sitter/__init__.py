"""
tree-sitter based Java syntax tree provider

Parses Java sources and classifies tree-sitter nodes into the small node
vocabulary the reference extractor works with.
"""

from .ast_walker import ASTWalker
from .java_patterns import JavaPatterns
from .node_types import NodeKind, ParseResult, classify
from .parser import JavaParseError, JavaParser

__all__ = [
    "ASTWalker",
    "JavaPatterns",
    "JavaParseError",
    "JavaParser",
    "NodeKind",
    "ParseResult",
    "classify",
]
