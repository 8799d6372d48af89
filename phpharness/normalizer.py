"""Normalizador del flujo de tokens: cada salto de linea pasa a ser su propio token."""
from __future__ import annotations

import re
from typing import Iterable, List

from .lexer.kinds import TokenKind
from .tokens import BareToken, NewlineToken, RawToken, Token, TypedToken, coerce_token

LINE_TERMINATORS = ("\r\n", "\n")
BLOCK_COMMENT_OPENER = "/*"

_LINE_BREAK = re.compile(r"(\r\n|\n)")


def is_atomic(token: Token) -> bool:
    """Strings encapsuladas y comentarios de bloque no se parten nunca."""
    return (
        token.kind == TokenKind.T_CONSTANT_ENCAPSED_STRING
        or token.text.startswith(BLOCK_COMMENT_OPENER)
    )


def _with_text(token: Token, text: str) -> Token:
    match token:
        case TypedToken(kind=kind):
            return TypedToken(kind, text)
        case BareToken():
            return BareToken(text)
        case NewlineToken():
            return NewlineToken(text)


def normalize(raw_tokens: Iterable[RawToken | Token]) -> List[Token]:
    """Devuelve una secuencia nueva con los terminadores de linea aislados.

    El texto concatenado de la salida es identico al de la entrada, y aplicar
    la funcion sobre su propio resultado no cambia nada.
    """
    normalized: List[Token] = []
    for token in map(coerce_token, raw_tokens):
        if is_atomic(token):
            normalized.append(token)
            continue

        for fragment in _LINE_BREAK.split(token.text):
            if not fragment:
                continue
            if fragment in LINE_TERMINATORS:
                normalized.append(NewlineToken(fragment))
            else:
                normalized.append(_with_text(token, fragment))
    return normalized
