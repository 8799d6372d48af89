"""Puerta de entrada del paquete parser (parser tolerante)."""

from .core import SyntaxDiagnostic, TolerantParser, build_parser
from .nodes import (
    Node,
    SourceFileNode,
    InlineHtml,
    SkippedTokens,
    QualifiedName,
    NamespaceDefinition,
    NamespaceUseDeclaration,
    ClassDeclaration,
    MethodDeclaration,
    PropertyDeclaration,
    FunctionDeclaration,
    Parameter,
    CompoundStatementNode,
    EmptyStatement,
    ExpressionStatement,
    EchoStatement,
    ReturnStatement,
    IfStatementNode,
    ElseIfClauseNode,
    ElseClauseNode,
    WhileStatement,
    ForStatement,
    ForeachStatement,
    Variable,
    NumericLiteral,
    StringLiteral,
    ReservedWord,
    ArrayElement,
    ArrayCreationExpression,
    ParenthesizedExpression,
    AssignmentExpression,
    TernaryExpression,
    BinaryExpression,
    UnaryOpExpression,
    CastExpression,
    PrefixUpdateExpression,
    PostfixUpdateExpression,
    PrintIntrinsicExpression,
    ScriptInclusionExpression,
    CallExpression,
    SubscriptExpression,
    MemberAccessExpression,
    ScopedPropertyAccessExpression,
    ObjectCreationExpression,
)

