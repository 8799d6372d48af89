"""Puerta de entrada del paquete del lexer tolerante."""

from .lexer import TokenForm, TolerantLexer, TolerantToken, tolerant_kind
from .tokenmap import all_token_kinds

__all__ = ["TokenForm", "TolerantLexer", "TolerantToken", "tolerant_kind", "all_token_kinds"]

