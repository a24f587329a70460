"""Sidecar tag files: ``image.png`` keeps its tags in ``image.txt``.

On disk a tag list is one line of text, tags joined with ``", "``. An empty
file means no tags.
"""
import os
from pathlib import Path
from typing import Iterable

SIDECAR_EXT = ".txt"
SEPARATOR = ", "


def sidecar_path(image_path: str) -> str:
    """Path of the tag file for ``image_path``: same directory and base name, ``.txt``."""
    base, _ext = os.path.splitext(image_path)
    return base + SIDECAR_EXT


def parse_tags(text: str) -> list[str]:
    """Split sidecar text into tags, trimming and dropping empty pieces."""
    return [piece.strip() for piece in text.split(",") if piece.strip()]


def format_tags(tags: Iterable[str]) -> str:
    return SEPARATOR.join(tags)


def clean_tags(tags: Iterable[str]) -> list[str]:
    """Trim tags coming from an edit and drop the empty ones."""
    return [t.strip() for t in tags if t and t.strip()]


def read_tags(path: str) -> list[str]:
    """Read the tag list at ``path``, creating an empty file first if missing."""
    p = Path(path)
    if not p.exists():
        p.write_text("", encoding="utf-8")
    # undecodable bytes become U+FFFD rather than failing the read
    return parse_tags(p.read_text(encoding="utf-8", errors="replace"))


def write_tags(path: str, tags: Iterable[str]) -> None:
    """Overwrite the tag file at ``path``. Raises ``OSError`` on failure."""
    Path(path).write_text(format_tags(tags), encoding="utf-8")
