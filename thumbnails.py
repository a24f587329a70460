"""Cached JPEG thumbnails for the gallery grid."""
import hashlib
from pathlib import Path

from PIL import Image as PILImage, ImageOps

import config

MIN_WIDTH = 32
MAX_WIDTH = 2048


def thumb_path_for(source: Path, width: int, thumb_dir: Path = None) -> Path:
    """Cache file for ``source`` at ``width``; keyed on the source path."""
    thumb_dir = thumb_dir or config.THUMB_DIR
    key = hashlib.sha1(str(source).encode("utf-8")).hexdigest()
    return thumb_dir / f"{key}_{width}.jpg"


def ensure_thumbnail(source: Path, width: int, thumb_dir: Path = None) -> Path:
    """Return a thumbnail of ``source`` scaled to ``width``, rebuilding it when stale.

    Raises whatever Pillow raises for files it can't decode.
    """
    thumb_path = thumb_path_for(source, width, thumb_dir)
    if thumb_path.exists() and thumb_path.stat().st_mtime >= source.stat().st_mtime:
        return thumb_path

    thumb_path.parent.mkdir(parents=True, exist_ok=True)
    with PILImage.open(source) as im:
        im = ImageOps.exif_transpose(im)
        im.thumbnail((width, width * 10_000))
        rgb = im.convert("RGB")
        rgb.save(thumb_path, format="JPEG", quality=88)
    return thumb_path
