"""Nodos del arbol de sintaxis del parser tolerante."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Optional

from ..tolerant.lexer import TolerantToken

Tok = TolerantToken
Expr = Any


class Node:
    """Base comun; cada nodo se serializa como ``{NombreClase: {campos}}``."""


# === NODOS BASICOS ===
@dataclass
class SourceFileNode(Node):
    statement_list: List[Any]
    end_of_file_token: Optional[Tok]

@dataclass
class InlineHtml(Node):
    script_section_end_tag: Optional[Tok]
    text: Optional[Tok]
    script_section_start_tag: Optional[Tok]

@dataclass
class SkippedTokens(Node):
    tokens: List[Tok]

@dataclass
class QualifiedName(Node):
    name_parts: List[Tok]  # nombres y separadores "\"

@dataclass
class NamespaceDefinition(Node):
    namespace_keyword: Tok
    name: QualifiedName
    semicolon: Tok

@dataclass
class NamespaceUseDeclaration(Node):
    use_keyword: Tok
    use_clauses: List[Any]  # QualifiedName y comas
    semicolon: Tok

@dataclass
class ClassDeclaration(Node):
    class_keyword: Tok
    name: Tok
    open_brace: Tok
    class_member_declarations: List[Any]
    close_brace: Tok

@dataclass
class MethodDeclaration(Node):
    modifiers: List[Tok]
    function_declaration: "FunctionDeclaration"

@dataclass
class PropertyDeclaration(Node):
    modifiers: List[Tok]
    variable_name: Tok
    equals_token: Optional[Tok]
    default: Optional[Expr]
    semicolon: Tok

@dataclass
class FunctionDeclaration(Node):
    function_keyword: Tok
    name: Tok
    open_paren: Tok
    parameters: List[Any]
    close_paren: Tok
    compound_statement: "CompoundStatementNode"

@dataclass
class Parameter(Node):
    type_declaration: Optional[Any]
    variable_name: Tok
    equals_token: Optional[Tok]
    default: Optional[Expr]

# === SENTENCIAS ===
@dataclass
class CompoundStatementNode(Node):
    open_brace: Tok
    statements: List[Any]
    close_brace: Tok

@dataclass
class EmptyStatement(Node):
    semicolon: Tok

@dataclass
class ExpressionStatement(Node):
    expression: Expr
    semicolon: Tok

@dataclass
class EchoStatement(Node):
    echo_keyword: Tok
    expressions: List[Any]
    semicolon: Tok

@dataclass
class ReturnStatement(Node):
    return_keyword: Tok
    expression: Optional[Expr]
    semicolon: Tok

@dataclass
class IfStatementNode(Node):
    if_keyword: Tok
    open_paren: Tok
    expression: Expr
    close_paren: Tok
    statements: Any
    else_if_clauses: List["ElseIfClauseNode"]
    else_clause: Optional["ElseClauseNode"]

@dataclass
class ElseIfClauseNode(Node):
    else_if_keyword: Tok
    open_paren: Tok
    expression: Expr
    close_paren: Tok
    statements: Any

@dataclass
class ElseClauseNode(Node):
    else_keyword: Tok
    statements: Any

@dataclass
class WhileStatement(Node):
    while_token: Tok
    open_paren: Tok
    expression: Expr
    close_paren: Tok
    statements: Any

@dataclass
class ForStatement(Node):
    for_keyword: Tok
    open_paren: Tok
    for_initializer: List[Any]
    for_initializer_semicolon: Tok
    for_control: Optional[Expr]
    for_control_semicolon: Tok
    for_end_of_loop: List[Any]
    close_paren: Tok
    statements: Any

@dataclass
class ForeachStatement(Node):
    foreach_keyword: Tok
    open_paren: Tok
    for_each_collection_name: Expr
    as_keyword: Tok
    for_each_key: Optional[Tok]
    arrow_token: Optional[Tok]
    for_each_value: Tok
    close_paren: Tok
    statements: Any

# === EXPRESIONES ===
@dataclass
class Variable(Node):
    name: Tok

@dataclass
class NumericLiteral(Node):
    children: Tok

@dataclass
class StringLiteral(Node):
    children: List[Tok]  # comillas, partes y variables interpoladas

@dataclass
class ReservedWord(Node):
    children: Tok

@dataclass
class ArrayElement(Node):
    element_key: Optional[Expr]
    arrow_token: Optional[Tok]
    element_value: Expr

@dataclass
class ArrayCreationExpression(Node):
    array_keyword: Optional[Tok]
    open_paren_or_bracket: Tok
    array_elements: List[Any]
    close_paren_or_bracket: Tok

@dataclass
class ParenthesizedExpression(Node):
    open_paren: Tok
    expression: Expr
    close_paren: Tok

@dataclass
class AssignmentExpression(Node):
    left_operand: Expr
    operator: Tok
    right_operand: Expr

@dataclass
class TernaryExpression(Node):
    condition: Expr
    question_token: Tok
    if_expression: Expr
    colon_token: Tok
    else_expression: Expr

@dataclass
class BinaryExpression(Node):
    left_operand: Expr
    operator: Tok
    right_operand: Expr

@dataclass
class UnaryOpExpression(Node):
    operator: Tok
    operand: Expr

@dataclass
class CastExpression(Node):
    cast_type: Tok
    operand: Expr

@dataclass
class PrefixUpdateExpression(Node):
    increment_or_decrement_operator: Tok
    operand: Expr

@dataclass
class PostfixUpdateExpression(Node):
    operand: Expr
    increment_or_decrement_operator: Tok

@dataclass
class PrintIntrinsicExpression(Node):
    print_keyword: Tok
    expression: Expr

@dataclass
class ScriptInclusionExpression(Node):
    require_or_include_keyword: Tok
    expression: Expr

@dataclass
class CallExpression(Node):
    callable_expression: Expr
    open_paren: Tok
    argument_expression_list: List[Any]
    close_paren: Tok

@dataclass
class SubscriptExpression(Node):
    postfix_expression: Expr
    open_bracket: Tok
    access_expression: Expr
    close_bracket: Tok

@dataclass
class MemberAccessExpression(Node):
    dereferencable_expression: Expr
    arrow_token: Tok
    member_name: Tok

@dataclass
class ScopedPropertyAccessExpression(Node):
    scope_resolution_qualifier: QualifiedName
    double_colon: Tok
    member_name: Tok

@dataclass
class ObjectCreationExpression(Node):
    new_keyword: Tok
    class_type_designator: QualifiedName
    open_paren: Tok
    argument_expression_list: List[Any]
    close_paren: Tok
