"""Generacion y verificacion de fixtures ``.tokens`` / ``.tree`` para un arbol de fuentes."""
from __future__ import annotations

import contextlib
import difflib
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Iterator, List

from .config import FixtureKind, HarnessConfig
from .errors import FileAccessError, FixtureWriteError
from .inspector import SourceInspector

Reporter = Callable[[str, str], None]


def _matches_extension(name: str, extension: str) -> bool:
    return len(name) > len(extension) and name.lower().endswith(extension.lower())


def discover_source_files(root: Path | str, extension: str = ".php") -> Iterator[Path]:
    """Recorrido en profundidad, en orden de nombre; no sigue directorios enlazados.

    Si ``root`` es un archivo se entrega tal cual, sin mirar su extension.
    """
    root = Path(root)
    if not root.is_dir():
        yield root
        return
    for entry in sorted(root.iterdir(), key=lambda item: item.name):
        if entry.is_dir():
            if not entry.is_symlink():
                yield from discover_source_files(entry, extension)
        elif entry.is_file() and _matches_extension(entry.name, extension):
            yield entry


def fixture_path(source: Path | str, kind: FixtureKind, config: HarnessConfig | None = None) -> Path:
    suffix = (config or HarnessConfig()).suffix_for(kind)
    return Path(str(source) + suffix)


def _write_atomic(target: Path, body: str, encoding: str) -> None:
    """Escribe en un ``.tmp`` hermano y lo renombra sobre el destino.

    El temporal se crea con ``open`` normal, asi el fixture respeta la umask.
    """
    tmp = target.with_name(target.name + ".tmp")
    try:
        with open(tmp, "w", encoding=encoding, newline="") as handle:
            handle.write(body)
        os.replace(tmp, target)
    except OSError:
        with contextlib.suppress(FileNotFoundError, IsADirectoryError):
            tmp.unlink()
        raise


class CheckStatus(str, Enum):
    OK = "ok"
    CHANGED = "changed"
    MISSING = "missing"


@dataclass
class FixtureCheck:
    source: Path
    fixture: Path
    status: CheckStatus
    diff: str = ""

    @property
    def stale(self) -> bool:
        return self.status is not CheckStatus.OK


class FixtureHarness:
    """Recorre las fuentes y persiste (o compara) su salida serializada."""

    def __init__(
        self,
        inspector: SourceInspector | None = None,
        config: HarnessConfig | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self.config = config or (inspector.config if inspector else HarnessConfig())
        self.inspector = inspector or SourceInspector(config=self.config)
        self._reporter = reporter

    def _emit(self, level: str, message: str) -> None:
        if self._reporter is not None:
            self._reporter(level, message)

    def source_files(self, path: Path | str) -> Iterator[Path]:
        return discover_source_files(path, self.config.source_extension)

    def fixture_path(self, source: Path, kind: FixtureKind) -> Path:
        return fixture_path(source, kind, self.config)

    def render(self, source: Path, kind: FixtureKind) -> str:
        if kind is FixtureKind.TOKENS:
            return self.inspector.scan(source)
        return self.inspector.parse(source)

    def generate(self, kind: FixtureKind | str, path: Path | str) -> List[Path]:
        """Escribe un fixture por archivo; el primer fallo de escritura corta el lote."""
        kind = FixtureKind(kind)
        written: List[Path] = []
        for source in self.source_files(path):
            body = self.render(source, kind)
            target = self.fixture_path(source, kind)
            try:
                _write_atomic(target, body, self.config.encoding)
            except OSError as exc:
                raise FixtureWriteError("No se pudo escribir el fixture", target) from exc
            written.append(target)
            self._emit("info", f"Fixture escrito: {target}")
        return written

    def check(self, kind: FixtureKind | str, path: Path | str) -> List[FixtureCheck]:
        """Compara la salida actual con los fixtures en disco sin escribir nada."""
        kind = FixtureKind(kind)
        results: List[FixtureCheck] = []
        for source in self.source_files(path):
            body = self.render(source, kind)
            target = self.fixture_path(source, kind)
            if not target.is_file():
                results.append(FixtureCheck(source, target, CheckStatus.MISSING))
                continue
            try:
                current = target.read_bytes().decode(self.config.encoding)
            except (OSError, UnicodeDecodeError) as exc:
                raise FileAccessError("No se pudo leer el fixture", target) from exc
            if current == body:
                results.append(FixtureCheck(source, target, CheckStatus.OK))
                continue
            diff = "\n".join(
                difflib.unified_diff(
                    current.splitlines(),
                    body.splitlines(),
                    fromfile=str(target),
                    tofile=f"{target} (actual)",
                    lineterm="",
                )
            )
            results.append(FixtureCheck(source, target, CheckStatus.CHANGED, diff))
            self._emit("warning", f"Fixture desactualizado: {target}")
        return results
