"""Shared pytest fixtures for quiz trees on disk."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

TreeBuilder = Callable[[dict[str, str | bytes]], Path]


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeBuilder:
    """Return a helper that writes ``{relative_path: content}`` under ``tmp_path``."""

    def _build(files: dict[str, str | bytes]) -> Path:
        for relative, content in files.items():
            target = tmp_path / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                _ = target.write_bytes(content)
            else:
                _ = target.write_text(content, encoding="utf-8")
        return tmp_path

    return _build
