from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional
from tree_sitter import Tree, Node


class NodeKind(str, Enum):
    """Abstract node vocabulary the reference extractor dispatches on"""

    PROGRAM = "program"
    PACKAGE = "package"
    IMPORT = "import"
    TYPE_DECLARATION = "type_declaration"
    TYPE_BODY = "type_body"
    TYPE_PARAMETER = "type_parameter"
    SUPERCLASS = "superclass"
    INTERFACES = "interfaces"
    FIELD = "field"
    METHOD = "method"
    CONSTRUCTOR = "constructor"
    PARAMETER_LIST = "parameter_list"
    PARAMETER = "parameter"
    RECEIVER_PARAMETER = "receiver_parameter"
    THROWS = "throws"
    MODIFIERS = "modifiers"
    ANNOTATION = "annotation"
    VARIABLE = "variable"
    BLOCK = "block"
    STATEMENT = "statement"
    RETURN = "return"
    ASSIGNMENT = "assignment"
    EXPRESSION = "expression"
    NEW = "new"
    METHOD_INVOCATION = "method_invocation"
    MEMBER_SELECT = "member_select"
    IDENTIFIER = "identifier"
    TYPE = "type"
    PARAMETERIZED_TYPE = "parameterized_type"
    LAMBDA = "lambda"
    IGNORED = "ignored"


# tree-sitter-java node type -> NodeKind. Anything absent (primitive types,
# literals, comments, keywords) is IGNORED.
TREE_SITTER_KINDS: dict[str, NodeKind] = {
    "program": NodeKind.PROGRAM,
    "package_declaration": NodeKind.PACKAGE,
    "import_declaration": NodeKind.IMPORT,
    # Type declarations
    "class_declaration": NodeKind.TYPE_DECLARATION,
    "interface_declaration": NodeKind.TYPE_DECLARATION,
    "enum_declaration": NodeKind.TYPE_DECLARATION,
    "record_declaration": NodeKind.TYPE_DECLARATION,
    "annotation_type_declaration": NodeKind.TYPE_DECLARATION,
    "class_body": NodeKind.TYPE_BODY,
    "interface_body": NodeKind.TYPE_BODY,
    "enum_body": NodeKind.TYPE_BODY,
    "enum_body_declarations": NodeKind.TYPE_BODY,
    "annotation_type_body": NodeKind.TYPE_BODY,
    "type_parameters": NodeKind.TYPE_PARAMETER,
    "type_parameter": NodeKind.TYPE_PARAMETER,
    "superclass": NodeKind.SUPERCLASS,
    "super_interfaces": NodeKind.INTERFACES,
    "extends_interfaces": NodeKind.INTERFACES,
    "permits": NodeKind.INTERFACES,
    # Members
    "field_declaration": NodeKind.FIELD,
    "constant_declaration": NodeKind.FIELD,
    "enum_constant": NodeKind.FIELD,
    "annotation_type_element_declaration": NodeKind.FIELD,
    "method_declaration": NodeKind.METHOD,
    "constructor_declaration": NodeKind.CONSTRUCTOR,
    "compact_constructor_declaration": NodeKind.CONSTRUCTOR,
    "formal_parameters": NodeKind.PARAMETER_LIST,
    "formal_parameter": NodeKind.PARAMETER,
    "spread_parameter": NodeKind.PARAMETER,
    "catch_formal_parameter": NodeKind.PARAMETER,
    "type_pattern": NodeKind.PARAMETER,
    "receiver_parameter": NodeKind.RECEIVER_PARAMETER,
    "throws": NodeKind.THROWS,
    "modifiers": NodeKind.MODIFIERS,
    "annotation": NodeKind.ANNOTATION,
    "marker_annotation": NodeKind.ANNOTATION,
    # Statements
    "local_variable_declaration": NodeKind.VARIABLE,
    "resource": NodeKind.VARIABLE,
    "enhanced_for_statement": NodeKind.VARIABLE,
    "block": NodeKind.BLOCK,
    "constructor_body": NodeKind.BLOCK,
    "static_initializer": NodeKind.BLOCK,
    "switch_block": NodeKind.BLOCK,
    "expression_statement": NodeKind.STATEMENT,
    "if_statement": NodeKind.STATEMENT,
    "while_statement": NodeKind.STATEMENT,
    "for_statement": NodeKind.STATEMENT,
    "do_statement": NodeKind.STATEMENT,
    "try_statement": NodeKind.STATEMENT,
    "try_with_resources_statement": NodeKind.STATEMENT,
    "resource_specification": NodeKind.STATEMENT,
    "catch_clause": NodeKind.STATEMENT,
    "finally_clause": NodeKind.STATEMENT,
    "throw_statement": NodeKind.STATEMENT,
    "synchronized_statement": NodeKind.STATEMENT,
    "labeled_statement": NodeKind.STATEMENT,
    "yield_statement": NodeKind.STATEMENT,
    "assert_statement": NodeKind.STATEMENT,
    "switch_expression": NodeKind.STATEMENT,
    "switch_block_statement_group": NodeKind.STATEMENT,
    "switch_rule": NodeKind.STATEMENT,
    "switch_label": NodeKind.STATEMENT,
    "explicit_constructor_invocation": NodeKind.STATEMENT,
    "return_statement": NodeKind.RETURN,
    # Expressions
    "assignment_expression": NodeKind.ASSIGNMENT,
    "binary_expression": NodeKind.EXPRESSION,
    "unary_expression": NodeKind.EXPRESSION,
    "update_expression": NodeKind.EXPRESSION,
    "ternary_expression": NodeKind.EXPRESSION,
    "parenthesized_expression": NodeKind.EXPRESSION,
    "condition": NodeKind.EXPRESSION,
    "array_access": NodeKind.EXPRESSION,
    "argument_list": NodeKind.EXPRESSION,
    "cast_expression": NodeKind.EXPRESSION,
    "instanceof_expression": NodeKind.EXPRESSION,
    "array_creation_expression": NodeKind.EXPRESSION,
    "dimensions_expr": NodeKind.EXPRESSION,
    "array_initializer": NodeKind.EXPRESSION,
    "class_literal": NodeKind.EXPRESSION,
    "method_reference": NodeKind.EXPRESSION,
    "annotation_argument_list": NodeKind.EXPRESSION,
    "element_value_pair": NodeKind.EXPRESSION,
    "element_value_array_initializer": NodeKind.EXPRESSION,
    "pattern": NodeKind.EXPRESSION,
    "record_pattern": NodeKind.EXPRESSION,
    "record_pattern_body": NodeKind.EXPRESSION,
    "record_pattern_component": NodeKind.PARAMETER,
    "guard": NodeKind.EXPRESSION,
    "object_creation_expression": NodeKind.NEW,
    "method_invocation": NodeKind.METHOD_INVOCATION,
    "field_access": NodeKind.MEMBER_SELECT,
    "scoped_identifier": NodeKind.MEMBER_SELECT,
    "identifier": NodeKind.IDENTIFIER,
    "lambda_expression": NodeKind.LAMBDA,
    # Types
    "type_identifier": NodeKind.TYPE,
    "scoped_type_identifier": NodeKind.TYPE,
    "array_type": NodeKind.TYPE,
    "annotated_type": NodeKind.TYPE,
    "type_arguments": NodeKind.TYPE,
    "type_list": NodeKind.TYPE,
    "type_bound": NodeKind.TYPE,
    "catch_type": NodeKind.TYPE,
    "wildcard": NodeKind.TYPE,
    "generic_type": NodeKind.PARAMETERIZED_TYPE,
}


def classify(node: Node) -> NodeKind:
    """Map a tree-sitter node to the extractor's node vocabulary"""
    return TREE_SITTER_KINDS.get(node.type, NodeKind.IGNORED)


@dataclass
class ParseResult:
    """Result of a tree-sitter parse operation"""

    tree: Tree
    source: bytes
    errors: List[str] = field(default_factory=list)
    path: Optional[Path] = None

    @property
    def root(self) -> Node:
        return self.tree.root_node

    @property
    def ok(self) -> bool:
        return not self.errors
