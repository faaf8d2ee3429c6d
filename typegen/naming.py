"""Derive logical names and output file names from schema paths.

A schema's logical name is its file name without the extension:
  schemas/Foo.json            -> Foo
  schemas/nested/Bar.schema   -> Bar
  schemas/ignoreMe.json       -> ignoreMe (excluded, "ignore" marker)

Logical names are not deduplicated; when two schemas share one, the later
file in the worklist overwrites the earlier output.
"""

from __future__ import annotations

from pathlib import Path


def logical_name(path: Path) -> str:
    """Return the file name of a schema with its extension stripped."""
    return Path(path).stem


def is_excluded(path: Path, marker: str, base: Path | None = None) -> bool:
    """Check whether a schema is skipped for generation.

    The marker is matched as a substring of the path relative to ``base``
    (the whole path when ``base`` is not given or does not contain it).
    """
    candidate = Path(path)
    if base is not None:
        try:
            candidate = candidate.relative_to(base)
        except ValueError:
            pass
    return marker in candidate.as_posix()


def output_filename(name: str, extension: str) -> str:
    """Build the output file name for a logical name."""
    return f"{name}.{extension}"
