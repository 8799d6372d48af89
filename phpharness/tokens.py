"""Variantes de token producidas por el normalizador."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple, Union


class Sentinel(Enum):
    """Tipos introducidos por el harness; nunca colisionan con ids enteros."""

    NEWLINE = "NEWLINE"


@dataclass(frozen=True)
class TypedToken:
    kind: int
    text: str


@dataclass(frozen=True)
class BareToken:
    text: str
    kind: ClassVar[Optional[int]] = None


@dataclass(frozen=True)
class NewlineToken:
    text: str
    kind: ClassVar[Sentinel] = Sentinel.NEWLINE


Token = Union[TypedToken, BareToken, NewlineToken]
RawToken = Union[Tuple[int, str], str]


def coerce_token(raw: RawToken | Token) -> Token:
    """Convierte un token crudo del tokenizador (o uno ya normalizado) a su variante."""
    match raw:
        case TypedToken() | BareToken() | NewlineToken():
            return raw
        case (int() as kind, str() as text):
            return TypedToken(kind, text)
        case str():
            return BareToken(raw)
        case _:
            raise TypeError(f"token crudo no reconocido: {raw!r}")


def join_text(tokens) -> str:
    """Reconstruye el texto fuente concatenando el texto de cada token."""
    return "".join(coerce_token(token).text for token in tokens)
