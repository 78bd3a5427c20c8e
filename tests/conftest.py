"""Shared pytest fixtures for once-only tests."""

from __future__ import annotations

import stat
from collections.abc import Callable
from pathlib import Path

import pytest

from fakes import FakeHasher


@pytest.fixture()
def fake_hasher() -> FakeHasher:
    return FakeHasher()


@pytest.fixture()
def make_tool(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write an executable shell script standing in for an external hash tool."""

    def _make_tool(name: str, body: str) -> Path:
        tool = tmp_path / "bin" / name
        tool.parent.mkdir(parents=True, exist_ok=True)
        tool.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
        tool.chmod(tool.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return tool

    return _make_tool
