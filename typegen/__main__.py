"""Entry point: python -m typegen

Reads <root>/schemas/**, generates <root>/result/<name>.<ext>.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from .config import GeneratorConfig
from .errors import ConfigError, FilesystemError
from .languages import supported_languages
from .log import configure_logging
from .pipeline import generate_types


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typegen",
        description="Generate type definitions for every JSON Schema under a folder.",
    )
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Folder containing the schemas directory (defaults to current directory).",
    )
    parser.add_argument("-o", "--output", default="result", help="Output directory name under root.")
    parser.add_argument(
        "-l", "--lang",
        default="ts",
        help=f"Target language ({', '.join(supported_languages())}).",
    )
    parser.add_argument("--schemas", default="schemas", help="Schema directory name under root.")
    parser.add_argument(
        "--exclude",
        default="ignore",
        help="Skip generating schemas whose path contains this text.",
    )
    parser.add_argument("--quicktype", default="quicktype", help="quicktype executable to run.")
    parser.add_argument(
        "--banner",
        action="store_true",
        help="Prefix generated files with a 'generated from' comment.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logger = configure_logging(verbose=args.verbose)

    try:
        config = GeneratorConfig(
            root=Path(args.root),
            output_dir=args.output,
            language=args.lang,
            schema_dir=args.schemas,
            exclude_marker=args.exclude,
            quicktype=args.quicktype,
            banner=args.banner,
        )
        run = asyncio.run(generate_types(config))
    except (ConfigError, FilesystemError) as exc:
        logger.error("%s", exc)
        return 2

    logger.info(
        "Processed %d schemas: %d generated, %d failed",
        run.attempted, run.succeeded, run.failed,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
