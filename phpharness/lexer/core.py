# lexer/core.py
"""Tokenizador de referencia sin perdidas, al estilo de ``token_get_all``."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import ClassVar, Dict, Iterator, List, Tuple

import ply.lex as lex

from ..tokens import RawToken
from .kinds import CASTS, KEYWORDS, OPERATORS, TokenKind, token_name

_NAME = r"[a-zA-Z_\x80-\uffff][a-zA-Z0-9_\x80-\uffff]*"

_HEREDOC = (
    r"<<<[ \t]*(?P<heredoc_quote>[\"']?)(?P<heredoc_label>" + _NAME + r")(?P=heredoc_quote)"
    r"(?:\r\n|\n)(?:[\s\S]*?(?:\r\n|\n))??[ \t]*(?P=heredoc_label)(?![a-zA-Z0-9_\x80-\uffff])"
)
_CONSTANT_STRING = (
    r"'(?:[^'\\]|\\[\s\S])*'"
    r"|\"(?:[^\"\\$]|\\[\s\S]|\$(?![a-zA-Z_\x80-\uffff]))*\""
)
_CAST = r"\([ \t]*(?i:integer|int|boolean|bool|double|float|real|string|binary|array|object|unset)[ \t]*\)"
_OPERATOR = "|".join(re.escape(op) for op in sorted(OPERATORS, key=len, reverse=True))


@dataclass(frozen=True)
class LexerConfig:
    keywords: Dict[str, TokenKind] = field(default_factory=lambda: dict(KEYWORDS))
    operators: Dict[str, TokenKind] = field(default_factory=lambda: dict(OPERATORS))
    casts: Dict[str, TokenKind] = field(default_factory=lambda: dict(CASTS))

    # CHAR: puntuacion de un caracter (token sin tipo); HEREDOC se expande en tres tokens
    extra_tokens: ClassVar[Tuple[str, ...]] = ("CHAR", "HEREDOC")

    def full_token_list(self) -> Tuple[str, ...]:
        return tuple(kind.name[2:] for kind in TokenKind) + self.extra_tokens


def _split_heredoc(text: str) -> List[RawToken]:
    head_end = text.index("\n") + 1
    tail_start = text.rindex("\n") + 1
    raw: List[RawToken] = [(TokenKind.T_START_HEREDOC, text[:head_end])]
    if tail_start > head_end:
        raw.append((TokenKind.T_ENCAPSED_AND_WHITESPACE, text[head_end:tail_start]))
    raw.append((TokenKind.T_END_HEREDOC, text[tail_start:]))
    return raw


@dataclass
class PhpTokenizer:
    config: LexerConfig = field(default_factory=LexerConfig)
    tokens: Tuple[str, ...] = field(init=False)
    lexer: lex.Lexer = field(init=False)

    states: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ("php", "exclusive"),
        ("dquote", "exclusive"),
    )

    t_ignore: ClassVar[str] = ""
    t_php_ignore: ClassVar[str] = ""
    t_dquote_ignore: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self.tokens = self.config.full_token_list()
        self.lexer = lex.lex(module=self)

    # --- seccion HTML ---
    def t_OPEN_TAG_WITH_ECHO(self, t):
        r'<\?='
        t.lexer.begin("php")
        return t

    def t_OPEN_TAG(self, t):
        r'<\?(?i:php)(?:\r\n|[ \t\n])?'
        t.lexer.begin("php")
        return t

    def t_INLINE_HTML(self, t):
        r'(?:[^<]|<(?!\?(?:[pP][hH][pP]|=)))+'
        return t

    def t_error(self, t):
        t.type = "INLINE_HTML"
        t.value = t.value[0]
        t.lexer.skip(1)
        return t

    # --- seccion de script ---
    def t_php_CLOSE_TAG(self, t):
        r'\?>(?:\r\n|\n)?'
        t.lexer.begin("INITIAL")
        return t

    def t_php_DOC_COMMENT(self, t):
        r'/\*\*[ \t\r\n][\s\S]*?(?:\*/|\Z)'
        return t

    def t_php_COMMENT(self, t):
        r'/\*[\s\S]*?(?:\*/|\Z)|(?://|\#)(?:[^\r\n?]|\?(?!>))*'
        return t

    def t_php_WHITESPACE(self, t):
        r'[ \t\r\n]+'
        return t

    @lex.TOKEN(r"\$" + _NAME)
    def t_php_VARIABLE(self, t):
        return t

    @lex.TOKEN(_HEREDOC)
    def t_php_HEREDOC(self, t):
        return t

    @lex.TOKEN(_CAST)
    def t_php_CAST(self, t):
        word = t.value.strip("()").strip(" \t").lower()
        t.type = self.config.casts[word].name[2:]
        return t

    def t_php_DNUMBER(self, t):
        r'(?:[0-9]+\.[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[0-9]+[eE][+-]?[0-9]+'
        return t

    def t_php_LNUMBER(self, t):
        r'0[xX][0-9a-fA-F]+|0[bB][01]+|[0-9]+'
        return t

    @lex.TOKEN(_CONSTANT_STRING)
    def t_php_CONSTANT_ENCAPSED_STRING(self, t):
        return t

    def t_php_DQUOTE(self, t):
        r'"'
        t.type = "CHAR"
        t.lexer.begin("dquote")
        return t

    def t_php_NS_SEPARATOR(self, t):
        r'\\'
        return t

    @lex.TOKEN(_NAME)
    def t_php_STRING(self, t):
        keyword = self.config.keywords.get(t.value.lower())
        if keyword is not None:
            t.type = keyword.name[2:]
        return t

    @lex.TOKEN(_OPERATOR)
    def t_php_OPERATOR(self, t):
        t.type = self.config.operators[t.value].name[2:]
        return t

    def t_php_CHAR(self, t):
        r'[;:,.\[\]()|^&+\-/*=%!~$<>?@{}`]'
        return t

    def t_php_error(self, t):
        if t.value.startswith("'"):
            # string sin cerrar: PHP la entrega completa hasta el final del archivo
            t.type = "ENCAPSED_AND_WHITESPACE"
            t.lexer.skip(len(t.value))
        else:
            t.type = "BAD_CHARACTER"
            t.value = t.value[0]
            t.lexer.skip(1)
        return t

    # --- string con interpolacion ---
    def t_dquote_DQUOTE(self, t):
        r'"'
        t.type = "CHAR"
        t.lexer.begin("php")
        return t

    @lex.TOKEN(r"\$" + _NAME)
    def t_dquote_VARIABLE(self, t):
        return t

    def t_dquote_ENCAPSED_AND_WHITESPACE(self, t):
        r'(?:[^"\\$]|\\[\s\S]?|\$(?![a-zA-Z_\x80-\uffff]))+'
        return t

    def t_dquote_error(self, t):
        t.type = "BAD_CHARACTER"
        t.value = t.value[0]
        t.lexer.skip(1)
        return t

    def iter_tokens(self, source: str) -> Iterator[lex.LexToken]:
        self.lexer.begin("INITIAL")
        self.lexer.input(source)
        while True:
            token = self.lexer.token()
            if not token:
                break
            yield token

    def tokenize(self, source: str) -> List[RawToken]:
        """Devuelve ``(kind, texto)`` o el texto solo para la puntuacion simple."""
        raw: List[RawToken] = []
        for token in self.iter_tokens(source):
            if token.type == "CHAR":
                raw.append(token.value)
            elif token.type == "HEREDOC":
                raw.extend(_split_heredoc(token.value))
            else:
                raw.append((TokenKind["T_" + token.type], token.value))
        return raw

    def token_name(self, kind: int) -> str:
        return token_name(kind)
