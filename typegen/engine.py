"""Hand generation requests to the quicktype engine.

quicktype owns schema parsing, $ref resolution (including fetching and
caching remote schemas) and rendering. This module only builds its command
line and collects the output lines.
"""

from __future__ import annotations

import asyncio
import shutil
from typing import Protocol

from .config import GeneratorConfig
from .errors import ConfigError, GenerationError
from .request import GenerationRequest


class TypeGenerator(Protocol):
    async def generate(self, request: GenerationRequest) -> list[str]:
        """Return generated source lines for one request."""
        ...


class QuicktypeGenerator:
    """Run the quicktype CLI once per request."""

    def __init__(self, executable: str = "quicktype") -> None:
        self.executable = executable

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> QuicktypeGenerator:
        """Resolve the configured executable, failing if it is not installed."""
        resolved = shutil.which(config.quicktype)
        if resolved is None:
            raise ConfigError(f"quicktype executable not found: {config.quicktype!r}")
        return cls(resolved)

    def command(self, request: GenerationRequest) -> list[str]:
        """Build the quicktype argument list for a request."""
        args = [
            self.executable,
            "--lang", request.language.engine_name,
            "--src-lang", "schema",
            "--top-level", request.name,
        ]
        for path in request.corpus:
            args += ["--additional-schema", str(path)]
        for option, enabled in request.renderer_options.items():
            if enabled and option in request.language.renderer_options:
                args.append(f"--{option}")
        args.append(str(request.path))
        return args

    async def generate(self, request: GenerationRequest) -> list[str]:
        # The schema file is the source address, so relative $refs resolve from it
        proc = await asyncio.create_subprocess_exec(
            *self.command(request),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await proc.communicate()
        if proc.returncode != 0:
            message = stderr.decode("utf-8", errors="replace").strip()
            raise GenerationError(
                request.path, message or f"quicktype exited with status {proc.returncode}"
            )
        return stdout.decode("utf-8").splitlines()
