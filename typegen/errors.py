"""Error kinds raised by the batch generator.

ConfigError and FilesystemError abort a run. SchemaError subclasses are
scoped to a single schema file and are recorded without stopping the run.
"""

from __future__ import annotations

from pathlib import Path


class TypegenError(Exception):
    """Base class for all typegen errors."""


class ConfigError(TypegenError, ValueError):
    """Raised when the run configuration is invalid."""


class FilesystemError(TypegenError):
    """Raised when the schema tree or output directory cannot be accessed."""

    def __init__(self, path: Path, reason: object) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class SchemaError(TypegenError):
    """A failure confined to one schema file."""

    def __init__(self, path: Path, reason: object) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class ReadError(SchemaError):
    """The schema file could not be read."""


class GenerationError(SchemaError):
    """The type-generation engine rejected the schema."""


class WriteError(SchemaError):
    """The generated output could not be written."""
