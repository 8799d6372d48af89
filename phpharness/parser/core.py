"""Parser tolerante para PHP sobre el arreglo de tokens del lexer tolerante."""
from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Iterator, List, Optional

import ply.lex as lex
import ply.yacc as yacc

from ..tolerant import TolerantLexer, TolerantToken, all_token_kinds
from .nodes import *

tokens = all_token_kinds()


@dataclass
class SyntaxDiagnostic:
    message: str
    token_kind: Optional[str]
    position: Optional[int]


@dataclass
class ParserState:
    tokens: List[TolerantToken]
    diagnostics: List[SyntaxDiagnostic] = field(default_factory=list)
    reporter: Callable[[str, str], None] | None = None


_CURRENT_STATE: ParserState | None = None


def _set_parser_state(state: ParserState | None) -> None:
    """Hace accesible el estado actual al manejador de errores del parser."""
    global _CURRENT_STATE
    _CURRENT_STATE = state


def _register_diagnostic(info: SyntaxDiagnostic) -> None:
    if _CURRENT_STATE is None:
        return
    _CURRENT_STATE.diagnostics.append(info)
    if _CURRENT_STATE.reporter is not None:
        _CURRENT_STATE.reporter("warning", info.message)


def _skipped(first: int, last: int) -> List[TolerantToken]:
    """Tokens descartados durante la recuperacion, del indice ``first`` a ``last``."""
    if _CURRENT_STATE is None:
        return []
    return _CURRENT_STATE.tokens[first:last + 1]


class _TokenFeed:
    """Adapta el arreglo tolerante a la interfaz ``token()`` que espera PLY."""

    def __init__(self, tolerant_tokens: List[TolerantToken]) -> None:
        self._tokens = tolerant_tokens
        self._index = 0

    def token(self) -> Optional[lex.LexToken]:
        if self._index >= len(self._tokens):
            return None
        tolerant = self._tokens[self._index]
        tok = lex.LexToken()
        tok.type = tolerant.kind
        tok.value = tolerant
        tok.lineno = 0
        # lexpos guarda el indice en el arreglo para recuperar tokens saltados
        tok.lexpos = self._index
        self._index += 1
        return tok


# === ARCHIVO Y SENTENCIAS ===
def p_source_file(p):
    """source_file : statement_list EndOfFileToken"""
    p[0] = SourceFileNode(p[1], p[2])

def p_statement_list(p):
    """statement_list : statement_list statement
                      | empty"""
    if len(p) == 2:
        p[0] = []
    else:
        p[1].append(p[2]); p[0] = p[1]

def p_statement(p):
    """statement : compound_statement
                 | expression_statement
                 | echo_statement
                 | return_statement
                 | if_statement
                 | while_statement
                 | for_statement
                 | foreach_statement
                 | function_declaration
                 | class_declaration
                 | namespace_definition
                 | namespace_use_declaration
                 | inline_html"""
    p[0] = p[1]

def p_statement_empty(p):
    """statement : SemicolonToken"""
    p[0] = EmptyStatement(p[1])

def p_statement_error(p):
    """statement : error SemicolonToken
                 | error ScriptSectionEndTag"""
    p[0] = SkippedTokens(_skipped(p.lexpos(1), p.lexpos(2)))

def p_statement_end(p):
    """statement_end : SemicolonToken
                     | ScriptSectionEndTag"""
    p[0] = p[1]

def p_inline_html_text(p):
    """inline_html : InlineHtml"""
    p[0] = InlineHtml(None, p[1], None)

def p_inline_html_start(p):
    """inline_html : ScriptSectionStartTag"""
    p[0] = InlineHtml(None, None, p[1])

def p_inline_html_end(p):
    """inline_html : ScriptSectionEndTag"""
    p[0] = InlineHtml(p[1], None, None)

def p_compound_statement(p):
    """compound_statement : OpenBraceToken statement_list CloseBraceToken"""
    p[0] = CompoundStatementNode(p[1], p[2], p[3])

def p_expression_statement(p):
    """expression_statement : expression statement_end"""
    p[0] = ExpressionStatement(p[1], p[2])

def p_echo_statement(p):
    """echo_statement : EchoKeyword expression_list statement_end"""
    p[0] = EchoStatement(p[1], p[2], p[3])

def p_return_statement(p):
    """return_statement : ReturnKeyword statement_end
                        | ReturnKeyword expression statement_end"""
    if len(p) == 3:
        p[0] = ReturnStatement(p[1], None, p[2])
    else:
        p[0] = ReturnStatement(p[1], p[2], p[3])

def p_if_statement(p):
    """if_statement : IfKeyword OpenParenToken expression CloseParenToken statement elseif_clauses else_clause_opt"""
    p[0] = IfStatementNode(p[1], p[2], p[3], p[4], p[5], p[6], p[7])

def p_elseif_clauses(p):
    """elseif_clauses : elseif_clauses ElseIfKeyword OpenParenToken expression CloseParenToken statement
                      | empty"""
    if len(p) == 2:
        p[0] = []
    else:
        p[1].append(ElseIfClauseNode(p[2], p[3], p[4], p[5], p[6])); p[0] = p[1]

def p_else_clause_opt(p):
    """else_clause_opt : ElseKeyword statement
                       | empty"""
    p[0] = ElseClauseNode(p[1], p[2]) if len(p) == 3 else None

def p_while_statement(p):
    """while_statement : WhileKeyword OpenParenToken expression CloseParenToken statement"""
    p[0] = WhileStatement(p[1], p[2], p[3], p[4], p[5])

def p_for_statement(p):
    """for_statement : ForKeyword OpenParenToken for_expressions SemicolonToken for_control SemicolonToken for_expressions CloseParenToken statement"""
    p[0] = ForStatement(p[1], p[2], p[3], p[4], p[5], p[6], p[7], p[8], p[9])

def p_for_expressions(p):
    """for_expressions : expression_list
                       | empty"""
    p[0] = p[1] if p[1] is not None else []

def p_for_control(p):
    """for_control : expression
                   | empty"""
    p[0] = p[1]

def p_foreach_statement(p):
    """foreach_statement : ForeachKeyword OpenParenToken expression AsKeyword foreach_target CloseParenToken statement"""
    key, arrow, value = p[5]
    p[0] = ForeachStatement(p[1], p[2], p[3], p[4], key, arrow, value, p[6], p[7])

def p_foreach_target(p):
    """foreach_target : VariableName
                      | VariableName DoubleArrowToken VariableName"""
    p[0] = (None, None, p[1]) if len(p) == 2 else (p[1], p[2], p[3])

# --- namespace / use ---
def p_namespace_definition(p):
    """namespace_definition : NamespaceKeyword qualified_name SemicolonToken"""
    p[0] = NamespaceDefinition(p[1], p[2], p[3])

def p_namespace_use_declaration(p):
    """namespace_use_declaration : UseKeyword use_clauses SemicolonToken"""
    p[0] = NamespaceUseDeclaration(p[1], p[2], p[3])

def p_use_clauses(p):
    """use_clauses : qualified_name
                   | use_clauses CommaToken qualified_name"""
    p[0] = [p[1]] if len(p) == 2 else p[1] + [p[2], p[3]]

def p_qualified_name(p):
    """qualified_name : Name
                      | BackslashToken Name
                      | qualified_name BackslashToken Name"""
    if len(p) == 2:
        p[0] = QualifiedName([p[1]])
    elif isinstance(p[1], QualifiedName):
        p[1].name_parts.extend([p[2], p[3]]); p[0] = p[1]
    else:
        p[0] = QualifiedName([p[1], p[2]])

# --- clases ---
def p_class_declaration(p):
    """class_declaration : ClassKeyword Name OpenBraceToken class_members CloseBraceToken"""
    p[0] = ClassDeclaration(p[1], p[2], p[3], p[4], p[5])

def p_class_members(p):
    """class_members : class_members class_member
                     | empty"""
    if len(p) == 2:
        p[0] = []
    else:
        p[1].append(p[2]); p[0] = p[1]

def p_class_member_method(p):
    """class_member : member_modifiers_opt function_declaration"""
    p[0] = MethodDeclaration(p[1], p[2])

def p_class_member_property(p):
    """class_member : member_modifiers VariableName SemicolonToken
                    | member_modifiers VariableName EqualsToken expression SemicolonToken"""
    if len(p) == 4:
        p[0] = PropertyDeclaration(p[1], p[2], None, None, p[3])
    else:
        p[0] = PropertyDeclaration(p[1], p[2], p[3], p[4], p[5])

def p_member_modifiers_opt(p):
    """member_modifiers_opt : member_modifiers
                            | empty"""
    p[0] = p[1] if p[1] is not None else []

def p_member_modifiers(p):
    """member_modifiers : member_modifier
                        | member_modifiers member_modifier"""
    p[0] = [p[1]] if len(p) == 2 else p[1] + [p[2]]

def p_member_modifier(p):
    """member_modifier : PublicKeyword
                       | PrivateKeyword
                       | ProtectedKeyword
                       | StaticKeyword
                       | AbstractKeyword
                       | FinalKeyword
                       | VarKeyword"""
    p[0] = p[1]

# --- funciones ---
def p_function_declaration(p):
    """function_declaration : FunctionKeyword Name OpenParenToken parameters_opt CloseParenToken compound_statement"""
    p[0] = FunctionDeclaration(p[1], p[2], p[3], p[4], p[5], p[6])

def p_parameters_opt(p):
    """parameters_opt : parameter_list
                      | empty"""
    p[0] = p[1] if p[1] is not None else []

def p_parameter_list(p):
    """parameter_list : parameter
                      | parameter_list CommaToken parameter"""
    p[0] = [p[1]] if len(p) == 2 else p[1] + [p[2], p[3]]

def p_parameter(p):
    """parameter : VariableName
                 | VariableName EqualsToken expression"""
    if len(p) == 2:
        p[0] = Parameter(None, p[1], None, None)
    else:
        p[0] = Parameter(None, p[1], p[2], p[3])

def p_parameter_typed(p):
    """parameter : type_declaration VariableName
                 | type_declaration VariableName EqualsToken expression"""
    if len(p) == 3:
        p[0] = Parameter(p[1], p[2], None, None)
    else:
        p[0] = Parameter(p[1], p[2], p[3], p[4])

def p_type_declaration(p):
    """type_declaration : qualified_name
                        | IntReservedWord
                        | FloatReservedWord
                        | BoolReservedWord
                        | StringReservedWord
                        | ObjectReservedWord
                        | ArrayKeyword
                        | CallableKeyword"""
    p[0] = p[1]

# --- listas de expresiones ---
def p_expression_list(p):
    """expression_list : expression
                       | expression_list CommaToken expression"""
    p[0] = [p[1]] if len(p) == 2 else p[1] + [p[2], p[3]]

def p_arguments_opt(p):
    """arguments_opt : expression_list
                     | empty"""
    p[0] = p[1] if p[1] is not None else []

# === EXPRESIONES ===
def p_expression(p):
    """expression : assignment"""
    p[0] = p[1]

def p_assignment(p):
    """assignment : ternary
                  | postfix assignment_operator assignment"""
    if len(p) == 2:
        p[0] = p[1]
    else:
        p[0] = AssignmentExpression(p[1], p[2], p[3])

def p_assignment_operator(p):
    """assignment_operator : EqualsToken
                           | PlusEqualsToken
                           | MinusEqualsToken
                           | AsteriskEqualsToken
                           | SlashEqualsToken
                           | DotEqualsToken
                           | PercentEqualsToken
                           | QuestionQuestionEqualsToken"""
    p[0] = p[1]

def p_ternary(p):
    """ternary : coalesce
               | coalesce QuestionToken expression ColonToken ternary"""
    if len(p) == 2:
        p[0] = p[1]
    else:
        p[0] = TernaryExpression(p[1], p[2], p[3], p[4], p[5])

def p_coalesce(p):
    """coalesce : logical_or
                | logical_or QuestionQuestionToken coalesce"""
    p[0] = p[1] if len(p) == 2 else BinaryExpression(p[1], p[2], p[3])

def p_logical_or(p):
    """logical_or : logical_or BarBarToken logical_and
                  | logical_and"""
    p[0] = BinaryExpression(p[1], p[2], p[3]) if len(p) == 4 else p[1]

def p_logical_and(p):
    """logical_and : logical_and AmpersandAmpersandToken equality
                   | equality"""
    p[0] = BinaryExpression(p[1], p[2], p[3]) if len(p) == 4 else p[1]

def p_equality(p):
    """equality : equality EqualsEqualsToken relational
                | equality ExclamationEqualsToken relational
                | equality EqualsEqualsEqualsToken relational
                | equality ExclamationEqualsEqualsToken relational
                | equality LessThanGreaterThanToken relational
                | relational"""
    p[0] = BinaryExpression(p[1], p[2], p[3]) if len(p) == 4 else p[1]

def p_relational(p):
    """relational : relational LessThanToken additive
                  | relational LessThanEqualsToken additive
                  | relational GreaterThanToken additive
                  | relational GreaterThanEqualsToken additive
                  | relational LessThanEqualsGreaterThanToken additive
                  | additive"""
    p[0] = BinaryExpression(p[1], p[2], p[3]) if len(p) == 4 else p[1]

def p_additive(p):
    """additive : additive PlusToken multiplicative
                | additive MinusToken multiplicative
                | additive DotToken multiplicative
                | multiplicative"""
    p[0] = BinaryExpression(p[1], p[2], p[3]) if len(p) == 4 else p[1]

def p_multiplicative(p):
    """multiplicative : multiplicative AsteriskToken unary
                      | multiplicative SlashToken unary
                      | multiplicative PercentToken unary
                      | unary"""
    p[0] = BinaryExpression(p[1], p[2], p[3]) if len(p) == 4 else p[1]

def p_unary(p):
    """unary : ExclamationToken unary
             | PlusToken unary
             | MinusToken unary
             | TildeToken unary
             | AtSymbolToken unary
             | postfix"""
    p[0] = UnaryOpExpression(p[1], p[2]) if len(p) == 3 else p[1]

def p_unary_prefix_update(p):
    """unary : PlusPlusToken unary
             | MinusMinusToken unary"""
    p[0] = PrefixUpdateExpression(p[1], p[2])

def p_unary_cast(p):
    """unary : cast_operator unary"""
    p[0] = CastExpression(p[1], p[2])

def p_cast_operator(p):
    """cast_operator : IntCastToken
                     | DoubleCastToken
                     | StringCastToken
                     | ArrayCastToken
                     | ObjectCastToken
                     | BoolCastToken
                     | UnsetCastToken"""
    p[0] = p[1]

def p_unary_print(p):
    """unary : PrintKeyword unary"""
    p[0] = PrintIntrinsicExpression(p[1], p[2])

def p_unary_inclusion(p):
    """unary : IncludeKeyword unary
             | IncludeOnceKeyword unary
             | RequireKeyword unary
             | RequireOnceKeyword unary"""
    p[0] = ScriptInclusionExpression(p[1], p[2])

def p_postfix(p):
    """postfix : primary
               | postfix PlusPlusToken
               | postfix MinusMinusToken"""
    p[0] = p[1] if len(p) == 2 else PostfixUpdateExpression(p[1], p[2])

def p_postfix_subscript(p):
    """postfix : postfix OpenBracketToken expression CloseBracketToken"""
    p[0] = SubscriptExpression(p[1], p[2], p[3], p[4])

def p_postfix_call(p):
    """postfix : postfix OpenParenToken arguments_opt CloseParenToken"""
    p[0] = CallExpression(p[1], p[2], p[3], p[4])

def p_postfix_member(p):
    """postfix : postfix ArrowToken Name"""
    p[0] = MemberAccessExpression(p[1], p[2], p[3])

def p_postfix_scoped(p):
    """postfix : qualified_name ColonColonToken Name
               | qualified_name ColonColonToken VariableName"""
    p[0] = ScopedPropertyAccessExpression(p[1], p[2], p[3])

def p_primary(p):
    """primary : literal
               | array_creation
               | string_template
               | qualified_name"""
    p[0] = p[1]

def p_primary_variable(p):
    """primary : VariableName"""
    p[0] = Variable(p[1])

def p_primary_parenthesized(p):
    """primary : OpenParenToken expression CloseParenToken"""
    p[0] = ParenthesizedExpression(p[1], p[2], p[3])

def p_primary_new(p):
    """primary : NewKeyword qualified_name OpenParenToken arguments_opt CloseParenToken"""
    p[0] = ObjectCreationExpression(p[1], p[2], p[3], p[4], p[5])

def p_literal_numeric(p):
    """literal : IntegerLiteralToken
               | FloatingLiteralToken"""
    p[0] = NumericLiteral(p[1])

def p_literal_string(p):
    """literal : StringLiteralToken"""
    p[0] = StringLiteral([p[1]])

def p_literal_reserved(p):
    """literal : TrueReservedWord
               | FalseReservedWord
               | NullReservedWord"""
    p[0] = ReservedWord(p[1])

def p_string_template(p):
    """string_template : DoubleQuoteToken encaps_list DoubleQuoteToken
                       | HeredocStart encaps_list HeredocEnd"""
    p[0] = StringLiteral([p[1]] + p[2] + [p[3]])

def p_string_template_empty_heredoc(p):
    """string_template : HeredocStart HeredocEnd"""
    p[0] = StringLiteral([p[1], p[2]])

def p_encaps_list(p):
    """encaps_list : encaps_part
                   | encaps_list encaps_part"""
    p[0] = [p[1]] if len(p) == 2 else p[1] + [p[2]]

def p_encaps_part(p):
    """encaps_part : EncapsedAndWhitespace
                   | VariableName"""
    p[0] = p[1]

# --- arrays ---
def p_array_creation(p):
    """array_creation : OpenBracketToken array_elements_opt CloseBracketToken"""
    p[0] = ArrayCreationExpression(None, p[1], p[2], p[3])

def p_array_creation_keyword(p):
    """array_creation : ArrayKeyword OpenParenToken array_elements_opt CloseParenToken"""
    p[0] = ArrayCreationExpression(p[1], p[2], p[3], p[4])

def p_array_elements_opt(p):
    """array_elements_opt : array_elements
                          | empty"""
    p[0] = p[1] if p[1] is not None else []

def p_array_elements(p):
    """array_elements : array_element
                      | array_elements CommaToken array_element
                      | array_elements CommaToken"""
    if len(p) == 2:
        p[0] = [p[1]]
    elif len(p) == 3:
        p[0] = p[1] + [p[2]]
    else:
        p[0] = p[1] + [p[2], p[3]]

def p_array_element(p):
    """array_element : expression
                     | expression DoubleArrowToken expression"""
    if len(p) == 2:
        p[0] = ArrayElement(None, None, p[1])
    else:
        p[0] = ArrayElement(p[1], p[2], p[3])

def p_empty(p):
    """empty :"""
    p[0] = None

def p_error(tok):
    if tok is None:
        _register_diagnostic(
            SyntaxDiagnostic("Fin de archivo inesperado", token_kind=None, position=None)
        )
        return
    tolerant: TolerantToken = tok.value
    _register_diagnostic(
        SyntaxDiagnostic(
            message=f"Token inesperado {tok.type} en la posicion {tolerant.start}",
            token_kind=tok.type,
            position=tolerant.start,
        )
    )


def _walk(node: Any) -> Iterator[Any]:
    """Recorre tokens y nodos ``SkippedTokens`` en orden de aparicion.

    Usa una pila explicita: las cadenas de operadores pueden tener miles de niveles.
    """
    pending = [node]
    while pending:
        current = pending.pop()
        if isinstance(current, (TolerantToken, SkippedTokens)):
            yield current
        elif isinstance(current, Node):
            pending.extend(getattr(current, f.name) for f in reversed(fields(current)))
        elif isinstance(current, list):
            pending.extend(reversed(current))


def _recover_gaps(tree: SourceFileNode, tolerant_tokens: List[TolerantToken]) -> SourceFileNode:
    """Devuelve a cada ``SkippedTokens`` los tokens que PLY descarto de la pila."""
    index_of = {id(tok): i for i, tok in enumerate(tolerant_tokens)}
    expected = 0
    for item in _walk(tree):
        if isinstance(item, SkippedTokens):
            if not item.tokens:
                continue
            first = index_of[id(item.tokens[0])]
            if first > expected:
                item.tokens[:0] = tolerant_tokens[expected:first]
            expected = index_of[id(item.tokens[-1])] + 1
        elif id(item) in index_of:
            expected = index_of[id(item)] + 1
    return tree


class TolerantParser:
    """Envoltura alrededor del parser PLY: siempre devuelve un ``SourceFileNode``."""

    def __init__(
        self,
        lexer: TolerantLexer | None = None,
        debug: bool = False,
        reporter: Callable[[str, str], None] | None = None,
    ) -> None:
        self.lexer = lexer or TolerantLexer()
        self._reporter = reporter
        self._parser = yacc.yacc(
            module=sys.modules[__name__],
            start="source_file",
            debug=debug,
            write_tables=False,
            errorlog=yacc.NullLogger(),
        )
        self.diagnostics: List[SyntaxDiagnostic] = []

    def parse_source_file(self, source: str) -> SourceFileNode:
        tolerant_tokens = self.lexer.get_tokens(source)
        state = ParserState(tokens=tolerant_tokens, reporter=self._reporter)
        _set_parser_state(state)
        try:
            result = self._parser.parse(lexer=_TokenFeed(tolerant_tokens))
        finally:
            _set_parser_state(None)

        self.diagnostics = state.diagnostics
        if result is None:
            # la recuperacion no alcanzo: todo el archivo queda como tokens saltados
            *body, end_of_file = tolerant_tokens
            statements = [SkippedTokens(body)] if body else []
            return SourceFileNode(statements, end_of_file)
        return _recover_gaps(result, tolerant_tokens)

    @property
    def error_count(self) -> int:
        return len(self.diagnostics)


# === CONSTRUCCION DEL PARSER ===
def build_parser(debug: bool = False, reporter: Callable[[str, str], None] | None = None) -> TolerantParser:
    return TolerantParser(debug=debug, reporter=reporter)
