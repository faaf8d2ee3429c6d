"""Run a full batch: scan, build requests, generate, write, aggregate.

Schemas are processed one at a time. A failure is recorded against its
schema and the run moves on; only configuration and filesystem errors
stop a run early.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

from .codegen import OutputWriter
from .config import GeneratorConfig
from .engine import QuicktypeGenerator, TypeGenerator
from .errors import GenerationError, SchemaError
from .log import get_logger
from .naming import logical_name
from .request import GenerationRequest, build_request, eligible_schemas
from .scanner import build_corpus

logger = get_logger("pipeline")


@dataclass(frozen=True)
class SchemaFailure:
    """A schema that could not be generated."""

    path: Path
    name: str
    error: SchemaError


@dataclass
class BatchRun:
    """Outcome of one generate_types call."""

    attempted: int = 0
    outputs: list[Path] = field(default_factory=list)
    failures: list[SchemaFailure] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.outputs)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def ok(self) -> bool:
        return not self.failures


async def _invoke(
    generator: TypeGenerator,
    request: GenerationRequest,
    store_lock: asyncio.Lock,
) -> list[str]:
    # The engine's schema store is shared by every request in the run
    async with store_lock:
        try:
            return list(await generator.generate(request))
        except SchemaError:
            raise
        except Exception as exc:
            raise GenerationError(request.path, exc) from exc


async def generate_types(
    config: GeneratorConfig,
    generator: TypeGenerator | None = None,
) -> BatchRun:
    """Generate one output file per eligible schema under config.schema_path.

    Raises ConfigError or FilesystemError before any schema is processed;
    per-schema failures are returned in the BatchRun instead.
    """
    target = config.target
    if generator is None:
        generator = QuicktypeGenerator.from_config(config)

    corpus = await build_corpus(config.schema_path)
    worklist = eligible_schemas(corpus, config)
    logger.debug(
        "Generating %d of %d schemas as %s", len(worklist), len(corpus), target.selector
    )

    writer = OutputWriter(config)
    writer.prepare()

    store_lock = asyncio.Lock()
    run = BatchRun()
    for path in worklist:
        run.attempted += 1
        try:
            request = await build_request(path, corpus, config)
            lines = await _invoke(generator, request, store_lock)
            output_path = await writer.write(request, lines)
        except SchemaError as exc:
            logger.error("Could not generate types for %s: %s", path, exc)
            run.failures.append(SchemaFailure(path=path, name=logical_name(path), error=exc))
            continue

        run.outputs.append(output_path)
        logger.info("Generated types for %s and wrote them to %s", request.name, output_path)

    if run.failures:
        logger.error("Failed to generate %d types.", run.failed)
        for failure in run.failures:
            logger.error("  %s: %s", failure.name, failure.error)
    return run
