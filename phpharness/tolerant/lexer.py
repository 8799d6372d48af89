"""Lexer tolerante: arreglo de tokens con trivia, nunca falla."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from ..lexer import PhpTokenizer, TokenKind
from ..tokens import Token, coerce_token
from .tokenmap import (
    END_OF_FILE,
    KEYWORDS,
    KIND_NAMES,
    NAME,
    OPERATORS_AND_PUNCTUATORS,
    RESERVED_WORDS,
    TRIVIA_KINDS,
    UNKNOWN,
)


class TokenForm(str, Enum):
    """Forma de serializar un token tolerante."""

    FULL = "full"
    SHORT = "short"


@dataclass(frozen=True)
class TolerantToken:
    kind: str
    full_start: int
    start: int
    length: int
    text: str = field(default="", repr=False, compare=False)

    @property
    def text_length(self) -> int:
        return self.length - (self.start - self.full_start)

    def serialize(self, form: TokenForm = TokenForm.FULL) -> Dict[str, Any]:
        if form is TokenForm.SHORT:
            return {"kind": self.kind, "textLength": self.text_length, "text": self.text}
        return {
            "kind": self.kind,
            "fullStart": self.full_start,
            "start": self.start,
            "length": self.length,
        }


def tolerant_kind(token: Token) -> str:
    """Traduce un token del tokenizador de referencia a su nombre tolerante."""
    if token.kind is None:
        return OPERATORS_AND_PUNCTUATORS.get(token.text, UNKNOWN)
    if token.kind in KIND_NAMES:
        return KIND_NAMES[token.kind]
    lowered = token.text.lower()
    if token.kind == TokenKind.T_STRING:
        return RESERVED_WORDS.get(lowered, NAME)
    if lowered in KEYWORDS:
        return KEYWORDS[lowered]
    return OPERATORS_AND_PUNCTUATORS.get(token.text, UNKNOWN)


@dataclass
class TolerantLexer:
    tokenizer: PhpTokenizer = field(default_factory=PhpTokenizer)

    def get_tokens(self, source: str) -> List[TolerantToken]:
        """Los espacios y comentarios quedan como trivia del token siguiente."""
        tokens: List[TolerantToken] = []
        full_start = position = 0
        for raw in self.tokenizer.tokenize(source):
            token = coerce_token(raw)
            end = position + len(token.text)
            if token.kind in TRIVIA_KINDS:
                position = end
                continue
            tokens.append(
                TolerantToken(tolerant_kind(token), full_start, position, end - full_start, token.text)
            )
            full_start = position = end

        tokens.append(TolerantToken(END_OF_FILE, full_start, position, position - full_start))
        return tokens
