"""
Java parser built on tree-sitter
Turns a source file (or string) into a ParseResult for the extractor
"""

from pathlib import Path
from typing import List, Union

import tree_sitter_java as tsjava
from tree_sitter import Language, Parser

from .ast_walker import ASTWalker
from .node_types import ParseResult


class JavaParseError(Exception):
    """Raised when a file cannot be read or its source is malformed"""

    def __init__(self, path: Union[str, Path, None], message: str, errors: List[str] | None = None):
        self.path = path
        self.errors = errors or []
        location = f"{path}: " if path else ""
        super().__init__(f"{location}{message}")


class JavaParser:
    """Thin wrapper around a tree-sitter parser loaded with the Java grammar"""

    def __init__(self, strict: bool = True):
        """
        Args:
            strict: Reject sources whose tree contains ERROR or missing nodes.
                    When False the partial tree is returned with its errors listed.
        """
        self.strict = strict
        # Tree-sitter v0.25+ API
        self.language = Language(tsjava.language())
        self.parser = Parser(self.language)

    def parse_file(self, file_path: Union[str, Path]) -> ParseResult:
        path = Path(file_path)
        try:
            source = path.read_bytes()
        except OSError as e:
            raise JavaParseError(path, f"cannot read file ({e.strerror or e})") from e
        return self._parse(source, path)

    def parse_string(self, code: str) -> ParseResult:
        return self._parse(code.encode("utf8"), None)

    def _parse(self, source: bytes, path: Path | None) -> ParseResult:
        try:
            source.decode("utf8")
        except UnicodeDecodeError as e:
            raise JavaParseError(path, f"source is not valid UTF-8 ({e.reason})") from e

        tree = self.parser.parse(source)
        errors = [self._describe_error(node) for node in ASTWalker.iter_errors(tree.root_node)]

        if errors and self.strict:
            raise JavaParseError(path, f"malformed source ({len(errors)} syntax error(s))", errors)

        return ParseResult(tree=tree, source=source, errors=errors, path=path)

    @staticmethod
    def _describe_error(node) -> str:
        line, column = node.start_point[0] + 1, node.start_point[1] + 1
        if node.is_missing:
            return f"{line}:{column}: missing {node.type}"
        return f"{line}:{column}: syntax error"
