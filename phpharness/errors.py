from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(eq=False)
class HarnessError(Exception):
    message: str
    path: Optional[Path] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        suffix = f": {self.path}" if self.path is not None else ""
        return f"{self.message}{suffix}"


class UsageError(HarnessError):
    """Invocacion invalida: no se ejecuta ningun flujo."""


class FileAccessError(HarnessError):
    """El archivo fuente no se pudo leer o decodificar."""


class FixtureWriteError(HarnessError):
    """El fixture no se pudo escribir; el lote completo se aborta."""


class RenderError(HarnessError):
    """La salida de un archivo no se pudo serializar."""
