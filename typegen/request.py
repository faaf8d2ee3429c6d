"""Build per-schema generation requests."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .config import GeneratorConfig
from .errors import ReadError
from .languages import TargetLanguage
from .naming import is_excluded, logical_name


@dataclass(frozen=True)
class GenerationRequest:
    """One schema bound to the shared corpus and the run's renderer options."""

    name: str
    path: Path
    source: str
    corpus: tuple[Path, ...]
    language: TargetLanguage
    renderer_options: Mapping[str, bool]


def eligible_schemas(corpus: tuple[Path, ...], config: GeneratorConfig) -> list[Path]:
    """Return the corpus entries that should be generated, sorted by path."""
    return sorted(
        path
        for path in corpus
        if not is_excluded(path, config.exclude_marker, config.schema_path)
    )


async def build_request(
    path: Path,
    corpus: tuple[Path, ...],
    config: GeneratorConfig,
) -> GenerationRequest:
    """Read a schema file and wrap it in a GenerationRequest."""
    try:
        source = await asyncio.to_thread(Path(path).read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(path, exc) from exc

    return GenerationRequest(
        name=logical_name(path),
        path=Path(path),
        source=source,
        corpus=corpus,
        language=config.target,
        renderer_options=config.renderer.as_dict(),
    )
