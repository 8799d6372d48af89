"""Harness de fixtures para un tokenizador y un parser tolerante de PHP."""

from .config import FixtureKind, HarnessConfig
from .errors import FileAccessError, FixtureWriteError, HarnessError, RenderError, UsageError
from .harness import CheckStatus, FixtureCheck, FixtureHarness, discover_source_files, fixture_path
from .inspector import InspectMode, SourceInspector, Toolchain
from .normalizer import normalize

__all__ = [
    "CheckStatus",
    "FileAccessError",
    "FixtureCheck",
    "FixtureHarness",
    "FixtureKind",
    "FixtureWriteError",
    "HarnessConfig",
    "HarnessError",
    "InspectMode",
    "RenderError",
    "SourceInspector",
    "Toolchain",
    "UsageError",
    "discover_source_files",
    "fixture_path",
    "normalize",
]
