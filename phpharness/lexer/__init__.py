"""Puerta de entrada del paquete lexer (tokenizador de referencia)."""

from .core import LexerConfig, PhpTokenizer  # re-export principales
from .kinds import TokenKind, token_name

__all__ = ["LexerConfig", "PhpTokenizer", "TokenKind", "token_name"]

