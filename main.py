"""Punto de entrada del harness desde una copia del repositorio."""
from __future__ import annotations

from phpharness.cli import run


if __name__ == "__main__":
    run()
