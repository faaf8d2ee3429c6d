"""Shared fixtures for typegen tests.

FakeGenerator stands in for quicktype so the pipeline can be exercised
without Node: it parses the schema, follows file-name $refs through the
corpus and emits a tiny interface per request.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Callable

import pytest

from typegen.errors import GenerationError
from typegen.request import GenerationRequest


def _refs(node: Any) -> list[str]:
    """Collect every $ref value in a parsed schema."""
    if isinstance(node, dict):
        found = [node["$ref"]] if isinstance(node.get("$ref"), str) else []
        for value in node.values():
            found.extend(_refs(value))
        return found
    if isinstance(node, list):
        return [ref for item in node for ref in _refs(item)]
    return []


class FakeGenerator:
    """Deterministic engine double that records every request."""

    def __init__(self, fail: set[str] | None = None) -> None:
        self.fail = fail or set()
        self.requests: list[GenerationRequest] = []
        self.active = 0
        self.max_active = 0

    async def generate(self, request: GenerationRequest) -> list[str]:
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            self.requests.append(request)
            await asyncio.sleep(0)
            if request.name in self.fail:
                raise GenerationError(request.path, "forced failure")

            schema = json.loads(request.source)
            for ref in _refs(schema):
                file_name = ref.split("#")[0].rsplit("/", 1)[-1]
                if not file_name:
                    continue
                target = next((p for p in request.corpus if p.name == file_name), None)
                if target is None:
                    raise GenerationError(request.path, f"unresolved reference {ref}")
                json.loads(target.read_text(encoding="utf-8"))

            fields = sorted(schema.get("properties", {}))
            return (
                [f"export interface {request.name} {{"]
                + [f"    {name}: any;" for name in fields]
                + ["}"]
            )
        finally:
            self.active -= 1


@pytest.fixture
def fake_generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Return a factory that writes files under tmp_path/schemas.

    Values that are not strings are dumped as JSON.
    """
    def _make(files: dict[str, Any]) -> Path:
        schemas = tmp_path / "schemas"
        schemas.mkdir(exist_ok=True)
        for rel, content in files.items():
            path = schemas / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            elif isinstance(content, str):
                path.write_text(content, encoding="utf-8")
            else:
                path.write_text(json.dumps(content), encoding="utf-8")
        return tmp_path
    return _make


@pytest.fixture(autouse=True)
def _reset_typegen_logger():
    """Undo configure_logging so caplog sees typegen records in every test."""
    yield
    logger = logging.getLogger("typegen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def make_generator() -> type[FakeGenerator]:
    return FakeGenerator
