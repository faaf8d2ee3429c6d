"""Batch generation of type definitions from a tree of JSON Schema files."""

from .config import GeneratorConfig, RendererOptions
from .engine import QuicktypeGenerator, TypeGenerator
from .errors import (
    ConfigError,
    FilesystemError,
    GenerationError,
    ReadError,
    SchemaError,
    TypegenError,
    WriteError,
)
from .pipeline import BatchRun, SchemaFailure, generate_types

__all__ = [
    "BatchRun",
    "ConfigError",
    "FilesystemError",
    "GenerationError",
    "GeneratorConfig",
    "QuicktypeGenerator",
    "ReadError",
    "RendererOptions",
    "SchemaError",
    "SchemaFailure",
    "TypeGenerator",
    "TypegenError",
    "WriteError",
    "generate_types",
]
