"""Inspector de fuentes PHP: tokens de referencia, scan tolerante y arbol sintactico."""
from __future__ import annotations

import contextlib
import json
import sys
from dataclasses import dataclass, fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Iterator, List, Optional, Protocol, Sequence

from .config import HarnessConfig
from .errors import FileAccessError, RenderError
from .lexer import PhpTokenizer
from .normalizer import normalize
from .parser import TolerantParser as DefaultTolerantParser
from .tokens import BareToken, NewlineToken, RawToken, Sentinel, Token
from .tolerant import TokenForm
from .tolerant import TolerantLexer as DefaultTolerantLexer


class ReferenceTokenizer(Protocol):
    def tokenize(self, source: str) -> List[RawToken]: ...

    def token_name(self, kind: int) -> str: ...


class TolerantLexer(Protocol):
    def get_tokens(self, source: str) -> Sequence[Any]: ...


class TolerantParser(Protocol):
    def parse_source_file(self, source: str) -> Any: ...


Reporter = Callable[[str, str], None]

# el encoder JSON indentado recurre una vez por nivel del arbol
_JSON_RECURSION_LIMIT = 4000


def _default_toolchain_parts(reporter: Reporter | None = None) -> tuple:
    tokenizer = PhpTokenizer()
    lexer = DefaultTolerantLexer(tokenizer)
    return tokenizer, lexer, DefaultTolerantParser(lexer=lexer, reporter=reporter)


@dataclass
class Toolchain:
    """Colaboradores externos que el inspector consume por interfaz."""

    tokenizer: ReferenceTokenizer
    lexer: TolerantLexer
    parser: TolerantParser

    @classmethod
    def default(cls, reporter: Reporter | None = None) -> "Toolchain":
        return cls(*_default_toolchain_parts(reporter))


class InspectMode(str, Enum):
    TOKENS = "tokens"
    SCAN = "scan"
    PARSE = "parse"


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_serializable(obj: Any, form: TokenForm = TokenForm.FULL) -> Any:
    """Convierte tokens tolerantes y nodos a objetos JSON friendly.

    Los tokens se serializan a si mismos; cada nodo queda como
    ``{"NombreClase": {"campoCamelCase": valor}}``.
    """
    root: List[Any] = [None]
    # (valor, contenedor destino, clave): sin recursion, el arbol puede ser muy profundo
    pending: List[tuple] = [(obj, root, 0)]
    while pending:
        item, target, key = pending.pop()
        if hasattr(item, "serialize"):
            target[key] = item.serialize(form)
        elif is_dataclass(item) and not isinstance(item, type):
            names = [f.name for f in fields(item)]
            # las claves se crean en orden de campo antes de llenarse
            body = dict.fromkeys(_camel_case(name) for name in names)
            target[key] = {type(item).__name__: body}
            pending.extend((getattr(item, name), body, _camel_case(name)) for name in names)
        elif isinstance(item, (list, tuple)):
            values: List[Any] = [None] * len(item)
            target[key] = values
            pending.extend((value, values, index) for index, value in enumerate(item))
        else:
            target[key] = item
    return root[0]


@contextlib.contextmanager
def _recursion_headroom(limit: int = _JSON_RECURSION_LIMIT) -> Iterator[None]:
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(max(previous, limit))
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


def dump_json(obj: Any, *, indent: Optional[int] = None) -> str:
    """JSON compacto sin espacios, o indentado cuando se pide ``indent``."""
    if indent is None:
        return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(obj, indent=indent, ensure_ascii=False)


class SourceInspector:
    """Produce las tres representaciones de un archivo; nunca escribe en disco."""

    def __init__(
        self,
        toolchain: Toolchain | None = None,
        config: HarnessConfig | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self.config = config or HarnessConfig()
        self._reporter = reporter
        self._current: Path | None = None
        self.toolchain = toolchain or Toolchain.default(reporter=self._report_syntax)

    def _report_syntax(self, level: str, message: str) -> None:
        """Reenvia los avisos del parser anteponiendo el archivo en curso."""
        if self._reporter is None:
            return
        where = f"{self._current}: " if self._current is not None else ""
        self._reporter(level, where + message)

    def read_source(self, path: Path | str) -> str:
        path = Path(path)
        try:
            # bytes + decode: se conservan los \r\n del archivo
            return path.read_bytes().decode(self.config.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise FileAccessError("No se pudo leer el archivo fuente", path) from exc

    def normalized_tokens(self, source: str) -> List[Token]:
        return normalize(self.toolchain.tokenizer.tokenize(source))

    def _token_line(self, token: Token) -> str:
        if isinstance(token, BareToken):
            return f"`{token.text}`"
        if isinstance(token, NewlineToken):
            name = Sentinel.NEWLINE.value
        else:
            name = self.toolchain.tokenizer.token_name(token.kind)
        return f"{name}: `{token.text}`"

    def tokens(self, path: Path | str) -> str:
        source = self.read_source(path)
        lines = [source if source.endswith("\n") else source + "\n"]
        lines.extend(self._token_line(token) + "\n" for token in self.normalized_tokens(source))
        return "".join(lines)

    def scan(
        self,
        path: Path | str,
        *,
        pretty: Optional[bool] = None,
        token_form: Optional[TokenForm] = None,
    ) -> str:
        source = self.read_source(path)
        pretty = self.config.pretty_tokens if pretty is None else pretty
        form = token_form or self.config.token_form
        token_array = to_serializable(list(self.toolchain.lexer.get_tokens(source)), form)
        return dump_json(token_array, indent=self.config.indent if pretty else None)

    def parse(self, path: Path | str, *, token_form: Optional[TokenForm] = None) -> str:
        path = Path(path)
        source = self.read_source(path)
        form = token_form or self.config.token_form
        self._current = path
        try:
            tree = to_serializable(self.toolchain.parser.parse_source_file(source), form)
            with _recursion_headroom():
                text = dump_json(tree, indent=self.config.indent)
        except RecursionError as exc:
            raise RenderError("Arbol sintactico demasiado profundo para serializarlo", path) from exc
        finally:
            self._current = None
        return text.replace("\r\n", "\n")

    def inspect(self, path: Path | str, mode: InspectMode | str) -> str:
        mode = InspectMode(mode)
        if mode is InspectMode.TOKENS:
            return self.tokens(path)
        if mode is InspectMode.SCAN:
            return self.scan(path)
        return self.parse(path)
