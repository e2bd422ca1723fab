"""
Java Reference Extractor using Tree-sitter
Walks one parsed file and collects its package, top-level types, type
parameters, imports and every type name the file refers to
"""

from pathlib import Path
from typing import Callable, Dict, Optional, Union

from loguru import logger
from tree_sitter import Node

from javapkg_tree_sitter import (
    ASTWalker,
    JavaParseError,
    JavaParser,
    JavaPatterns,
    NodeKind,
    ParseResult,
    classify,
)

from .context import ContextStack
from .models import Import, SourceUnit

# Child fields that hold declared or member names, never type names
NAME_FIELDS = frozenset({"name", "key", "field"})


class ReferenceExtractor:
    """Extract a SourceUnit (declarations + type references) from a Java file"""

    def __init__(self, parser: Optional[JavaParser] = None):
        self.parser = parser or JavaParser()

        # One handler per node kind; IGNORED is the explicit catch-all
        self._handlers: Dict[NodeKind, Callable[[Node], None]] = {
            NodeKind.PROGRAM: self._visit_children,
            NodeKind.PACKAGE: self._visit_package,
            NodeKind.IMPORT: self._visit_import,
            NodeKind.TYPE_DECLARATION: self._visit_type_declaration,
            NodeKind.TYPE_BODY: self._visit_children,
            NodeKind.TYPE_PARAMETER: self._visit_type_parameter,
            NodeKind.SUPERCLASS: self._visit_children,
            NodeKind.INTERFACES: self._visit_children,
            NodeKind.FIELD: self._visit_declaration,
            NodeKind.METHOD: self._visit_children,
            NodeKind.CONSTRUCTOR: self._visit_children,
            NodeKind.PARAMETER_LIST: self._visit_children,
            NodeKind.PARAMETER: self._visit_declaration,
            NodeKind.RECEIVER_PARAMETER: self._visit_declaration,
            NodeKind.THROWS: self._visit_children,
            NodeKind.MODIFIERS: self._visit_children,
            NodeKind.ANNOTATION: self._visit_annotation,
            NodeKind.VARIABLE: self._visit_declaration,
            NodeKind.BLOCK: self._visit_children,
            NodeKind.STATEMENT: self._visit_statement,
            NodeKind.RETURN: self._visit_children,
            NodeKind.ASSIGNMENT: self._visit_assignment,
            NodeKind.EXPRESSION: self._visit_expression,
            NodeKind.NEW: self._visit_children,
            NodeKind.METHOD_INVOCATION: self._visit_children,
            NodeKind.MEMBER_SELECT: self._visit_member_select,
            NodeKind.IDENTIFIER: self._visit_identifier,
            NodeKind.TYPE: self._visit_type,
            NodeKind.PARAMETERIZED_TYPE: self._visit_parameterized_type,
            NodeKind.LAMBDA: self._visit_lambda,
            NodeKind.IGNORED: self._ignore,
        }

        # Per-file state, reset by extract_tree
        self._unit: Optional[SourceUnit] = None
        self._source = b""
        self._context = ContextStack()
        self._primary_is_public = False

    def extract(self, file_path: Union[str, Path]) -> Optional[SourceUnit]:
        """
        Parse and extract one file

        Returns:
            The SourceUnit, or None when the file could not be parsed
        """
        try:
            result = self.parser.parse_file(file_path)
        except JavaParseError as e:
            logger.warning(f"Skipping {e}")
            return None

        try:
            return self.extract_tree(result, str(file_path))
        except RecursionError:
            logger.warning(f"Skipping {file_path}: syntax tree is nested too deeply")
            return None

    def extract_string(self, code: str, path: str = "<string>") -> SourceUnit:
        """Extract from source text; raises JavaParseError on malformed code"""
        return self.extract_tree(self.parser.parse_string(code), path)

    def extract_tree(self, result: ParseResult, path: str) -> SourceUnit:
        """Walk an already parsed file"""
        self._unit = SourceUnit(path=path)
        self._source = result.source
        self._context = ContextStack()
        self._primary_is_public = False

        try:
            self._visit(result.root)
            unit = self._unit
        finally:
            self._unit = None
            self._source = b""

        logger.debug(
            f"Extracted {path}: package={unit.package_name}, primary={unit.primary_type_name}, "
            f"{len(unit.imports)} imports, {len(unit.references)} references"
        )
        return unit

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _visit(self, node: Node):
        kind = classify(node)
        with self._context.enter(kind):
            self._handlers[kind](node)

    def _visit_children(self, node: Node):
        for child, field_name in ASTWalker.named_children_with_fields(node):
            if child.type == "identifier" and field_name in NAME_FIELDS:
                continue
            self._visit(child)

    def _ignore(self, node: Node):
        pass

    def _text(self, node: Node) -> str:
        return ASTWalker.get_text(node, self._source)

    def _accept(self, name: str):
        """Record a candidate type name (dropped if it names a type parameter)"""
        if self._unit.add_reference(name) is None:
            logger.debug(f"Not adding type parameter {name}")

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def _visit_package(self, node: Node):
        for child in node.named_children:
            if child.type in ("identifier", "scoped_identifier"):
                self._unit.package_name = self._text(child)
            else:
                self._visit(child)

    def _visit_import(self, node: Node):
        name_node = None
        for child in node.named_children:
            if child.type in ("identifier", "scoped_identifier"):
                name_node = child
                break
        if name_node is None:
            return

        text = self._text(name_node)
        if ASTWalker.has_child_of_type(node, "asterisk"):
            text += ".*"
        self._unit.add_import(Import.from_text(text, is_static=ASTWalker.has_child_of_type(node, "static")))

    def _visit_type_declaration(self, node: Node):
        name = JavaPatterns.get_declared_name(node, self._source)
        # Types declared inside another type, a method or an anonymous
        # class are walked but not recorded as file-level types
        if name and self._context.enclosing() is NodeKind.PROGRAM:
            self._record_top_level_type(name, JavaPatterns.is_public(node))
        self._visit_children(node)

    def _record_top_level_type(self, name: str, public: bool):
        unit = self._unit
        if unit.primary_type_name is None:
            unit.primary_type_name = name
            self._primary_is_public = public
        elif public and not self._primary_is_public:
            unit.secondary_type_names.add(unit.primary_type_name)
            unit.primary_type_name = name
            self._primary_is_public = True
        else:
            unit.secondary_type_names.add(name)

    def _visit_type_parameter(self, node: Node):
        if node.type == "type_parameters":
            self._visit_children(node)
            return

        named = False
        for child in node.named_children:
            if not named and child.type in ("type_identifier", "identifier"):
                self._unit.add_generic(self._text(child))
                named = True
            else:
                # annotations and bounds
                self._visit(child)

    def _visit_declaration(self, node: Node):
        """Fields, locals, parameters, resources, for-each variables"""
        for child, field_name in ASTWalker.named_children_with_fields(node):
            if child.type == "identifier":
                if field_name == "value":
                    self._visit(child)
                continue
            if child.type == "variable_declarator":
                value = child.child_by_field_name("value")
                if value is not None:
                    self._visit(value)
                continue
            self._visit(child)

    def _visit_annotation(self, node: Node):
        name_node = node.child_by_field_name("name")
        if name_node is not None:
            self._accept(self._text(name_node))

        arguments = node.child_by_field_name("arguments")
        if arguments is not None:
            self._visit(arguments)

    # ------------------------------------------------------------------
    # Statements and expressions
    # ------------------------------------------------------------------

    def _visit_statement(self, node: Node):
        if node.type == "labeled_statement":
            for child in node.named_children:
                if child.type != "identifier":
                    self._visit(child)
            return
        self._visit_children(node)

    def _visit_assignment(self, node: Node):
        left = node.child_by_field_name("left")
        right = node.child_by_field_name("right")

        if left is not None:
            if JavaPatterns.is_simple_assignment(node):
                self._visit(left)
            else:
                # 'x += y' reads x as well
                with self._context.enter(NodeKind.EXPRESSION):
                    self._visit(left)

        if right is not None:
            with self._context.enter(NodeKind.EXPRESSION):
                self._visit(right)

    def _visit_expression(self, node: Node):
        if node.type == "method_reference":
            # Only the qualifier of Foo::bar can name a type
            if node.named_children:
                self._visit(node.named_children[0])
            return
        self._visit_children(node)

    def _visit_member_select(self, node: Node):
        qualified = JavaPatterns.get_qualified_name(node, self._source)
        if qualified is None:
            obj = node.child_by_field_name("object") or node.child_by_field_name("scope")
            if obj is not None:
                self._visit(obj)
            return

        self._accept(qualified)
        self._visit(JavaPatterns.get_chain_root(node))

    def _visit_identifier(self, node: Node):
        # 'return x;' and 'x = ...' use x as a value
        if self._context.matches(NodeKind.IDENTIFIER, NodeKind.RETURN):
            return
        if self._context.matches(NodeKind.IDENTIFIER, NodeKind.ASSIGNMENT):
            return
        self._accept(self._text(node))

    def _visit_lambda(self, node: Node):
        parameters = node.child_by_field_name("parameters")
        if parameters is not None and parameters.type == "formal_parameters":
            self._visit(parameters)

        body = node.child_by_field_name("body")
        if body is not None:
            self._visit(body)

    # ------------------------------------------------------------------
    # Types
    # ------------------------------------------------------------------

    def _visit_type(self, node: Node):
        if node.type not in ("type_identifier", "scoped_type_identifier"):
            # arrays, annotated types, type argument/bound/catch lists, wildcards
            self._visit_children(node)
            return

        name = JavaPatterns.get_type_name(node, self._source)
        if name and not JavaPatterns.is_inferred_type(name):
            self._accept(name)

        # Outer<A>.Inner and java.util.@NonNull List
        for child in node.named_children:
            if child.type in ("annotation", "marker_annotation"):
                self._visit(child)
            elif child.type == "generic_type":
                arguments = ASTWalker.get_child_of_type(child, "type_arguments")
                if arguments is not None:
                    self._visit(arguments)
            elif child.type == "scoped_type_identifier":
                self._visit_nested_arguments(child)

    def _visit_nested_arguments(self, node: Node):
        for child in node.named_children:
            if child.type == "generic_type":
                arguments = ASTWalker.get_child_of_type(child, "type_arguments")
                if arguments is not None:
                    self._visit(arguments)
            elif child.type == "scoped_type_identifier":
                self._visit_nested_arguments(child)

    def _visit_parameterized_type(self, node: Node):
        # Raw type first, then its type arguments
        for child in node.named_children:
            self._visit(child)
