"""Tablas de nombres del lexer tolerante."""
from __future__ import annotations

from typing import Dict, Tuple

from ..lexer.kinds import TokenKind

OPERATORS_AND_PUNCTUATORS: Dict[str, str] = {
    "[": "OpenBracketToken",
    "]": "CloseBracketToken",
    "(": "OpenParenToken",
    ")": "CloseParenToken",
    "{": "OpenBraceToken",
    "}": "CloseBraceToken",
    ".": "DotToken",
    "->": "ArrowToken",
    "?->": "QuestionArrowToken",
    "=>": "DoubleArrowToken",
    "++": "PlusPlusToken",
    "--": "MinusMinusToken",
    "**": "AsteriskAsteriskToken",
    "*": "AsteriskToken",
    "+": "PlusToken",
    "-": "MinusToken",
    "~": "TildeToken",
    "!": "ExclamationToken",
    "$": "DollarToken",
    "/": "SlashToken",
    "%": "PercentToken",
    "<<": "LessThanLessThanToken",
    ">>": "GreaterThanGreaterThanToken",
    "<": "LessThanToken",
    ">": "GreaterThanToken",
    "<=": "LessThanEqualsToken",
    "<=>": "LessThanEqualsGreaterThanToken",
    ">=": "GreaterThanEqualsToken",
    "==": "EqualsEqualsToken",
    "===": "EqualsEqualsEqualsToken",
    "!=": "ExclamationEqualsToken",
    "!==": "ExclamationEqualsEqualsToken",
    "^": "CaretToken",
    "|": "BarToken",
    "&": "AmpersandToken",
    "&&": "AmpersandAmpersandToken",
    "||": "BarBarToken",
    "?": "QuestionToken",
    ":": "ColonToken",
    "::": "ColonColonToken",
    ";": "SemicolonToken",
    "=": "EqualsToken",
    "**=": "AsteriskAsteriskEqualsToken",
    "*=": "AsteriskEqualsToken",
    "/=": "SlashEqualsToken",
    "%=": "PercentEqualsToken",
    "+=": "PlusEqualsToken",
    "-=": "MinusEqualsToken",
    ".=": "DotEqualsToken",
    "<<=": "LessThanLessThanEqualsToken",
    ">>=": "GreaterThanGreaterThanEqualsToken",
    "&=": "AmpersandEqualsToken",
    "^=": "CaretEqualsToken",
    "|=": "BarEqualsToken",
    ",": "CommaToken",
    "??": "QuestionQuestionToken",
    "??=": "QuestionQuestionEqualsToken",
    "<>": "LessThanGreaterThanToken",
    "...": "DotDotDotToken",
    "\\": "BackslashToken",
    "@": "AtSymbolToken",
    "`": "BacktickToken",
    '"': "DoubleQuoteToken",
}

RESERVED_WORDS: Dict[str, str] = {
    "true": "TrueReservedWord",
    "false": "FalseReservedWord",
    "null": "NullReservedWord",
    "int": "IntReservedWord",
    "float": "FloatReservedWord",
    "bool": "BoolReservedWord",
    "string": "StringReservedWord",
    "binary": "BinaryReservedWord",
    "boolean": "BooleanReservedWord",
    "double": "DoubleReservedWord",
    "integer": "IntegerReservedWord",
    "object": "ObjectReservedWord",
    "real": "RealReservedWord",
    "void": "VoidReservedWord",
}

KEYWORDS: Dict[str, str] = {
    "abstract": "AbstractKeyword",
    "and": "AndKeyword",
    "array": "ArrayKeyword",
    "as": "AsKeyword",
    "break": "BreakKeyword",
    "callable": "CallableKeyword",
    "case": "CaseKeyword",
    "catch": "CatchKeyword",
    "class": "ClassKeyword",
    "clone": "CloneKeyword",
    "const": "ConstKeyword",
    "continue": "ContinueKeyword",
    "declare": "DeclareKeyword",
    "default": "DefaultKeyword",
    "die": "DieKeyword",
    "do": "DoKeyword",
    "echo": "EchoKeyword",
    "else": "ElseKeyword",
    "elseif": "ElseIfKeyword",
    "empty": "EmptyKeyword",
    "enddeclare": "EndDeclareKeyword",
    "endfor": "EndForKeyword",
    "endforeach": "EndForEachKeyword",
    "endif": "EndIfKeyword",
    "endswitch": "EndSwitchKeyword",
    "endwhile": "EndWhileKeyword",
    "eval": "EvalKeyword",
    "exit": "ExitKeyword",
    "extends": "ExtendsKeyword",
    "final": "FinalKeyword",
    "finally": "FinallyKeyword",
    "fn": "FnKeyword",
    "for": "ForKeyword",
    "foreach": "ForeachKeyword",
    "function": "FunctionKeyword",
    "global": "GlobalKeyword",
    "goto": "GotoKeyword",
    "if": "IfKeyword",
    "implements": "ImplementsKeyword",
    "include": "IncludeKeyword",
    "include_once": "IncludeOnceKeyword",
    "instanceof": "InstanceOfKeyword",
    "insteadof": "InsteadOfKeyword",
    "interface": "InterfaceKeyword",
    "isset": "IsSetKeyword",
    "list": "ListKeyword",
    "match": "MatchKeyword",
    "namespace": "NamespaceKeyword",
    "new": "NewKeyword",
    "or": "OrKeyword",
    "print": "PrintKeyword",
    "private": "PrivateKeyword",
    "protected": "ProtectedKeyword",
    "public": "PublicKeyword",
    "require": "RequireKeyword",
    "require_once": "RequireOnceKeyword",
    "return": "ReturnKeyword",
    "static": "StaticKeyword",
    "switch": "SwitchKeyword",
    "throw": "ThrowKeyword",
    "trait": "TraitKeyword",
    "try": "TryKeyword",
    "unset": "UnsetKeyword",
    "use": "UseKeyword",
    "var": "VarKeyword",
    "while": "WhileKeyword",
    "xor": "XorKeyword",
    "yield": "YieldKeyword",
}

# tipos del tokenizador de referencia con nombre tolerante fijo
KIND_NAMES: Dict[TokenKind, str] = {
    TokenKind.T_INLINE_HTML: "InlineHtml",
    TokenKind.T_OPEN_TAG: "ScriptSectionStartTag",
    TokenKind.T_OPEN_TAG_WITH_ECHO: "ScriptSectionStartTag",
    TokenKind.T_CLOSE_TAG: "ScriptSectionEndTag",
    TokenKind.T_VARIABLE: "VariableName",
    TokenKind.T_LNUMBER: "IntegerLiteralToken",
    TokenKind.T_DNUMBER: "FloatingLiteralToken",
    TokenKind.T_CONSTANT_ENCAPSED_STRING: "StringLiteralToken",
    TokenKind.T_ENCAPSED_AND_WHITESPACE: "EncapsedAndWhitespace",
    TokenKind.T_START_HEREDOC: "HeredocStart",
    TokenKind.T_END_HEREDOC: "HeredocEnd",
    TokenKind.T_BAD_CHARACTER: "Unknown",
    TokenKind.T_INT_CAST: "IntCastToken",
    TokenKind.T_DOUBLE_CAST: "DoubleCastToken",
    TokenKind.T_STRING_CAST: "StringCastToken",
    TokenKind.T_ARRAY_CAST: "ArrayCastToken",
    TokenKind.T_OBJECT_CAST: "ObjectCastToken",
    TokenKind.T_BOOL_CAST: "BoolCastToken",
    TokenKind.T_UNSET_CAST: "UnsetCastToken",
}

TRIVIA_KINDS = frozenset(
    {TokenKind.T_WHITESPACE, TokenKind.T_COMMENT, TokenKind.T_DOC_COMMENT}
)

NAME = "Name"
UNKNOWN = "Unknown"
END_OF_FILE = "EndOfFileToken"


def all_token_kinds() -> Tuple[str, ...]:
    """Todos los nombres que el lexer tolerante puede emitir, sin repetir."""
    names = {NAME, UNKNOWN, END_OF_FILE}
    names.update(OPERATORS_AND_PUNCTUATORS.values())
    names.update(RESERVED_WORDS.values())
    names.update(KEYWORDS.values())
    names.update(KIND_NAMES.values())
    return tuple(sorted(names))
