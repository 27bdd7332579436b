from pathlib import Path
from types import SimpleNamespace

import pytest

from sanic_render import ViewConfig, ViewEngine


class Views:
    """Writes view files into a temporary view root."""

    def __init__(self, root: Path):
        self.root = root

    def write(self, name: str, content: str) -> Path:
        path = self.root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def remove(self, name: str):
        (self.root / name).unlink()


@pytest.fixture
def views(tmp_path):
    root = tmp_path / "views"
    root.mkdir()
    return Views(root)


@pytest.fixture
def make_engine(views):
    def _make(**options) -> ViewEngine:
        options.setdefault("root", views.root)
        return ViewEngine(ViewConfig(**options))

    return _make


@pytest.fixture
def request_stub():
    return SimpleNamespace(path="/articles", method="GET", ctx=SimpleNamespace())
