from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from fileorganizer.api import create_app
from fileorganizer.config import Settings


@pytest.fixture
def make_files(tmp_path: Path) -> Callable[..., Path]:
    """Create files (name -> content) inside ``tmp_path`` or a subfolder of it."""

    def _make(*names: str, folder: str | None = None, content: str = "x") -> Path:
        root = tmp_path / folder if folder else tmp_path
        root.mkdir(parents=True, exist_ok=True)
        for name in names:
            (root / name).write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def api_client() -> Iterator[TestClient]:
    with TestClient(create_app(Settings())) as client:
        yield client
