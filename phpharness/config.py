from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .tolerant.lexer import TokenForm


class FixtureKind(str, Enum):
    TOKENS = "tokens"
    TREE = "tree"


@dataclass(frozen=True)
class HarnessConfig:
    source_extension: str = ".php"
    tokens_suffix: str = ".tokens"
    tree_suffix: str = ".tree"
    encoding: str = "utf-8"
    indent: int = 4
    pretty_tokens: bool = False
    token_form: TokenForm = TokenForm.FULL

    def suffix_for(self, kind: FixtureKind) -> str:
        if kind is FixtureKind.TOKENS:
            return self.tokens_suffix
        return self.tree_suffix
