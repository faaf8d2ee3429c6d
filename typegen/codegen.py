"""Render generated lines and write them to the output directory.

Takes the lines produced by the engine and writes <output>/<name>.<ext>.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import jinja2

from .config import GeneratorConfig
from .errors import FilesystemError, WriteError
from .naming import output_filename
from .request import GenerationRequest

TEMPLATE_DIR = Path(__file__).parent / "templates"


class OutputWriter:
    """Write one output file per generated schema."""

    def __init__(self, config: GeneratorConfig) -> None:
        self.config = config
        self.directory = config.output_path
        self.env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("output.j2")
        self._prepared = False

    def prepare(self) -> None:
        """Create the output directory if it does not exist yet."""
        if self._prepared:
            return
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(self.directory, exc.strerror or exc) from exc
        self._prepared = True

    def path_for(self, request: GenerationRequest) -> Path:
        return self.directory / output_filename(request.name, request.language.extension)

    def render(self, request: GenerationRequest, lines: list[str]) -> str:
        """Render the output file body for a request."""
        try:
            source = request.path.relative_to(self.config.root).as_posix()
        except ValueError:
            source = request.path.name
        return self.template.render(
            banner=self.config.banner,
            comment=request.language.comment_prefix,
            source=source,
            body="\n".join(lines),
        )

    async def write(self, request: GenerationRequest, lines: list[str]) -> Path:
        """Write the rendered output, replacing any existing file."""
        self.prepare()
        output_path = self.path_for(request)
        try:
            await asyncio.to_thread(
                output_path.write_text, self.render(request, lines), encoding="utf-8"
            )
        except OSError as exc:
            raise WriteError(output_path, exc) from exc
        return output_path
