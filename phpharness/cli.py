"""Interfaz de linea de comandos: ``php-harness <comando> <ruta>``."""
from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Sequence

from .config import HarnessConfig
from .dispatcher import Command, CommandDispatcher
from .errors import HarnessError, UsageError
from .harness import FixtureHarness
from .inspector import SourceInspector
from .output_formatter import RichHarnessConsole
from .tolerant import TokenForm

PROG = "php-harness"


def build_parser(console: RichHarnessConsole) -> argparse.ArgumentParser:
    parser = console.create_argument_parser(
        prog=PROG,
        description="Inspecciona fuentes PHP y genera fixtures para las pruebas del lexer y el parser.",
    )
    parser.add_argument("--pretty", action="store_true", help="Indenta el JSON de scan y gencase-tokens")
    parser.add_argument(
        "--short-tokens",
        action="store_true",
        help="Serializa los tokens tolerantes como {kind, textLength, text}",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Con gencase-*: compara con los fixtures existentes en lugar de escribirlos",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Reporta cada fixture escrito")
    parser.add_argument(
        "command",
        metavar="<command>",
        help="Uno de: " + ", ".join(command.value for command in Command),
    )
    parser.add_argument("path", metavar="<path>", help="Archivo o directorio de fuentes PHP")
    return parser


def build_config(args: argparse.Namespace) -> HarnessConfig:
    return replace(
        HarnessConfig(),
        pretty_tokens=args.pretty,
        token_form=TokenForm.SHORT if args.short_tokens else TokenForm.FULL,
    )


def main(argv: Sequence[str] | None = None, console: RichHarnessConsole | None = None) -> int:
    console = console or RichHarnessConsole()
    parser = build_parser(console)
    try:
        args = parser.parse_args(argv)
        config = build_config(args)
        reporter = console.make_reporter(verbose=args.verbose)
        inspector = SourceInspector(config=config, reporter=reporter)
        harness = FixtureHarness(inspector, config, reporter=reporter)
        dispatcher = CommandDispatcher(inspector, harness, console)
        return dispatcher.dispatch(args.command, args.path, check=args.check)
    except UsageError as exc:
        console.show_usage(parser, exc)
        return 1
    except HarnessError as exc:
        console.message(str(exc), level="error", stderr=True)
        return 1


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
