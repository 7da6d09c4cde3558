"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from spell_tokenizer.tokenization.tokenizer import Tokenizer


@pytest.fixture
def tokenizer():
    return Tokenizer()


@pytest.fixture
def write_file(tmp_path):
    """Write text (or raw bytes) under tmp_path and return the path."""

    def _write(name: str, content: str | bytes, encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            content = content.encode(encoding)
        path.write_bytes(content)
        return path

    return _write
