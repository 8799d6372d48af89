"""Herramientas para formatear las salidas del harness usando Rich."""
from __future__ import annotations

import argparse
import sys
from typing import Any, Callable, Sequence

from rich import box
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text
from rich_argparse import RichHelpFormatter

from .errors import UsageError
from .harness import CheckStatus, FixtureCheck


class _BoundHelpFormatter(RichHelpFormatter):
    def __init__(self, prog: str, console: Console) -> None:
        super().__init__(prog, console=console)


class _RichArgumentParser(argparse.ArgumentParser):
    """ArgumentParser que imprime ayuda con Rich y convierte errores en ``UsageError``."""

    def __init__(
        self,
        output: "RichHarnessConsole",
        *args: Any,
        **kwargs: Any,
    ) -> None:
        formatter_cls = kwargs.pop("formatter_class", None)
        if formatter_cls is None:
            formatter_cls = lambda prog: _BoundHelpFormatter(prog, console=output.console)  # type: ignore
        kwargs["formatter_class"] = formatter_cls
        super().__init__(*args, **kwargs)
        self._output = output

    def _print_message(self, message: Any, file: Any | None = None) -> None:
        if not message:
            return
        target = self._output.console if file in (None, sys.stdout) else self._output.err_console
        target.file.write(str(message))
        target.file.flush()

    def error(self, message: str) -> None:
        raise UsageError(message)


class RichHarnessConsole:
    """Punto central para producir salidas del CLI con Rich.

    Los mensajes de estado pasan por Rich; el contenido de datos (JSON, volcado
    de tokens) se escribe tal cual en ``out`` para no alterar ni un byte.
    """

    _LEVEL_STYLES = {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red",
    }

    _LEVEL_LABELS = {
        "info": "[INFO]",
        "success": "[OK]",
        "warning": "[WARN]",
        "error": "[ERROR]",
    }

    _STATUS_STYLES = {
        CheckStatus.OK: "green",
        CheckStatus.CHANGED: "yellow",
        CheckStatus.MISSING: "red",
    }

    def __init__(
        self,
        console: Console | None = None,
        err_console: Console | None = None,
        default_prefix: str = "[Harness]",
        out: Any | None = None,
    ) -> None:
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self.default_prefix = default_prefix
        self._out = out

    @property
    def out(self):
        return self._out if self._out is not None else sys.stdout

    def message(
        self,
        text: str,
        *,
        level: str = "info",
        prefix: str | None = None,
        stderr: bool = False,
    ) -> None:
        """Imprime un mensaje corto con estilo estandarizado."""
        style = self._LEVEL_STYLES.get(level, "white")
        label = self._LEVEL_LABELS.get(level, "[INFO]")
        target = self.err_console if stderr else self.console

        composed = Text()
        composed.append(label, style=f"bold {style}")
        composed.append(" ")
        composed.append(prefix or self.default_prefix, style=f"bold {style}")
        composed.append(" ")
        composed.append(text)

        target.print(composed)

    def write_payload(self, payload: str) -> None:
        """Escribe datos sin pasar por Rich; siempre termina en salto de linea."""
        self.out.write(payload if payload.endswith("\n") else payload + "\n")
        self.out.flush()

    def show_usage(self, parser: argparse.ArgumentParser, error: UsageError) -> None:
        usage = parser.format_usage()
        if usage:
            self.err_console.file.write(usage)
        self.message(f"{parser.prog}: {error}", level="error", stderr=True)

    def show_check_report(self, results: Sequence[FixtureCheck]) -> None:
        """Tabla con el estado de cada fixture comparado."""
        table = Table(
            title="Fixtures",
            header_style="bold cyan",
            box=box.SIMPLE_HEAD,
            show_lines=False,
        )
        table.add_column("Estado", style="bold", width=8)
        table.add_column("Fixture", overflow="fold")

        for result in results:
            style = self._STATUS_STYLES.get(result.status, "white")
            table.add_row(Text(result.status.value.upper(), style=style), str(result.fixture))

        self.console.print(table)

    def show_diff(self, result: FixtureCheck) -> None:
        if not result.diff:
            return
        self.console.print(Syntax(result.diff, "diff", theme="monokai", word_wrap=False))

    def show_summary(self, results: Sequence[FixtureCheck]) -> None:
        """Imprime el resumen final de fixtures desactualizados."""
        stale = sum(1 for result in results if result.stale)
        level = "success" if stale == 0 else "error"
        plural = "fixture" if stale == 1 else "fixtures"
        text = f"Total de fixtures desactualizados: {stale} {plural} de {len(results)}"
        self.message(text, level=level, stderr=stale > 0)

    def create_argument_parser(self, **kwargs: Any) -> argparse.ArgumentParser:
        """Construye un ArgumentParser que renderiza ayuda con Rich."""
        return _RichArgumentParser(self, **kwargs)

    def make_reporter(self, verbose: bool = True) -> Callable[[str, str], None]:
        """Devuelve el callback ``(nivel, mensaje)`` que usa el harness."""
        def reporter(level: str, message: str) -> None:
            if level == "info" and not verbose:
                return
            self.message(message, level=level, stderr=(level in ("warning", "error")))

        return reporter
