"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
import xgfixtures


@pytest.fixture
def sample_records() -> bytes:
    """Game-records segment holding one finished single-game match."""
    return xgfixtures.sample_records()


@pytest.fixture
def sample_file_bytes(sample_records: bytes) -> bytes:
    return xgfixtures.build_match_file(sample_records, thumbnail=b"\xff\xd8jpeg\xff\xd9")


@pytest.fixture
def sample_stream(sample_file_bytes: bytes) -> io.BytesIO:
    return io.BytesIO(sample_file_bytes)


@pytest.fixture
def sample_path(tmp_path: Path, sample_file_bytes: bytes) -> Path:
    path = tmp_path / "sample.xg"
    path.write_bytes(sample_file_bytes)
    return path
