"""Traduce ``comando + ruta`` al flujo correspondiente del inspector o del harness."""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Callable, Dict

from .config import FixtureKind
from .errors import UsageError
from .harness import FixtureHarness
from .inspector import SourceInspector
from .output_formatter import RichHarnessConsole


class Command(str, Enum):
    SCAN = "scan"
    PARSE = "parse"
    TOKENS = "tokens"
    GENCASE_PARSER = "gencase-parser"
    GENCASE_TOKENS = "gencase-tokens"

    @classmethod
    def from_name(cls, name: "Command | str") -> "Command":
        try:
            return cls(name)
        except ValueError as exc:
            raise UsageError(f"Comando desconocido '{name}'") from exc


# comandos que solo aceptan un archivo
_FILE_ONLY = frozenset({Command.SCAN, Command.TOKENS})


class CommandDispatcher:
    """Valida la invocacion completa antes de ejecutar cualquier flujo."""

    def __init__(
        self,
        inspector: SourceInspector,
        harness: FixtureHarness,
        console: RichHarnessConsole,
    ) -> None:
        self.inspector = inspector
        self.harness = harness
        self.console = console
        self._handlers: Dict[Command, Callable[[Path, bool], int]] = {
            Command.SCAN: self._scan,
            Command.PARSE: self._parse,
            Command.TOKENS: self._tokens,
            Command.GENCASE_PARSER: lambda path, check: self._gencase(FixtureKind.TREE, path, check),
            Command.GENCASE_TOKENS: lambda path, check: self._gencase(FixtureKind.TOKENS, path, check),
        }

    def dispatch(self, command: Command | str, path: Path | str, *, check: bool = False) -> int:
        """Devuelve el codigo de salida del proceso."""
        command = Command.from_name(command)
        path = Path(path)
        if not path.exists():
            raise UsageError("La ruta no existe", path)
        if command in _FILE_ONLY and path.is_dir():
            raise UsageError(f"'{command.value}' requiere un archivo, no un directorio", path)
        return self._handlers[command](path, check)

    def _scan(self, path: Path, check: bool) -> int:
        self.console.write_payload(self.inspector.scan(path))
        return 0

    def _tokens(self, path: Path, check: bool) -> int:
        self.console.write_payload(self.inspector.tokens(path))
        return 0

    def _parse(self, path: Path, check: bool) -> int:
        if not path.is_dir():
            self.console.write_payload(self.inspector.parse(path))
            return 0
        for source in self.harness.source_files(path):
            self.console.write_payload(str(source))
            self.console.write_payload(self.inspector.parse(source))
        return 0

    def _gencase(self, kind: FixtureKind, path: Path, check: bool) -> int:
        if check:
            results = self.harness.check(kind, path)
            self.console.show_check_report(results)
            for result in results:
                self.console.show_diff(result)
            self.console.show_summary(results)
            return 1 if any(result.stale for result in results) else 0

        written = self.harness.generate(kind, path)
        self.console.message(f"Fixtures generados: {len(written)}", level="success")
        return 0
