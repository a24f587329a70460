"""Shared fixtures. The settings DB and thumbnail cache go to a temp dir."""
import os
import tempfile
from pathlib import Path

import pytest
from PIL import Image as PILImage

_STATE_DIR = Path(tempfile.mkdtemp(prefix="lora-tagger-tests-"))
os.environ["TAGGER_DB_PATH"] = str(_STATE_DIR / "test.db")
os.environ["TAGGER_THUMB_DIR"] = str(_STATE_DIR / "thumbs")
os.environ.pop("USER_HOME", None)


def write_png(path: Path, size=(64, 32), color="red") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    PILImage.new("RGB", size, color).save(path, format="PNG")
    return path


@pytest.fixture
def make_png():
    return write_png


@pytest.fixture
def dataset(tmp_path):
    """A small dataset directory:

    set1/a.png        tags "cat, grey"
    set1/.hidden.png
    set1/notes.md
    set1/sub/b.png    no sidecar yet
    set1/.cache/c.png
    """
    root = tmp_path / "set1"
    write_png(root / "a.png")
    (root / "a.txt").write_text("cat, grey", encoding="utf-8")
    write_png(root / ".hidden.png")
    (root / "notes.md").write_text("not an image", encoding="utf-8")
    write_png(root / "sub" / "b.png", size=(10, 20))
    write_png(root / ".cache" / "c.png")
    return root


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from app import app

    with TestClient(app) as c:
        yield c
