"""Discover schema files beneath a root directory.

Directory entries at one level are classified concurrently; deeper levels
are scanned as each subdirectory is found.
"""

from __future__ import annotations

import asyncio
import os
import stat
from pathlib import Path

from .errors import FilesystemError
from .log import get_logger

logger = get_logger("scanner")


async def _stat(path: Path) -> os.stat_result:
    try:
        return await asyncio.to_thread(os.stat, path)
    except OSError as exc:
        raise FilesystemError(path, exc.strerror or exc) from exc


async def _listdir(path: Path) -> list[str]:
    try:
        return await asyncio.to_thread(os.listdir, path)
    except OSError as exc:
        raise FilesystemError(path, exc.strerror or exc) from exc


async def scan_files(path: Path) -> list[Path]:
    """Return every regular file under ``path`` as absolute paths.

    A regular file comes back as a one-element list; FIFOs, sockets and
    devices are skipped. Order follows the directory listing, depth-first.
    """
    path = Path(path).absolute()
    info = await _stat(path)
    if stat.S_ISREG(info.st_mode):
        return [path]
    if not stat.S_ISDIR(info.st_mode):
        logger.debug("Skipping %s: not a regular file", path)
        return []

    children = await _listdir(path)
    nested = await asyncio.gather(*(scan_files(path / child) for child in children))
    return [file for group in nested for file in group]


async def build_corpus(root: Path) -> tuple[Path, ...]:
    """Collect every schema under ``root`` for $ref resolution.

    Nothing is filtered here; excluded schemas stay resolvable.
    """
    corpus = tuple(sorted(await scan_files(root)))
    logger.debug("Found %d schema files under %s", len(corpus), root)
    return corpus
