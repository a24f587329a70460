"""Image discovery and directory listing."""
import locale
import os
from typing import Optional

from loguru import logger
from PIL import Image as PILImage

from errors import NotDirectoryError, NotFoundError
from schemas import DirectoryEntry, ImageRecord
from tagfiles import read_tags, sidecar_path

# Configuration
IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp"}


def is_hidden(name: str) -> bool:
    return name.startswith(".")


def is_image_name(name: str) -> bool:
    return os.path.splitext(name)[1].lower() in IMAGE_EXTENSIONS


def check_directory(service_path: str) -> None:
    """Raise unless ``service_path`` is an existing directory."""
    if not os.path.exists(service_path):
        raise NotFoundError("Directory not found")
    if not os.path.isdir(service_path):
        raise NotDirectoryError("Path is not a directory")


def probe_dimensions(path: str) -> Optional[tuple[int, int]]:
    """Read image width/height from the file header, or None if it can't be parsed."""
    try:
        # open() is lazy: only the header is read here
        with PILImage.open(path) as im:
            width, height = im.size
    except Exception as e:
        logger.debug("No dimensions for {}: {}", path, e)
        return None
    if width <= 0 or height <= 0:
        return None
    return width, height


def build_record(service_path: str, user_path: str) -> ImageRecord:
    """Join an image's identity, tags and dimensions into one record."""
    tags = read_tags(sidecar_path(service_path))
    dims = probe_dimensions(service_path)
    width, height = dims if dims else (None, None)
    return ImageRecord(
        id=user_path,
        name=os.path.basename(user_path),
        path=user_path,
        relative_path=user_path,
        tags=tags,
        text_file_path=sidecar_path(user_path),
        width=width,
        height=height,
        directory=os.path.dirname(user_path),
    )


def scan_images(root_service: str, root_user: str, recursive: bool) -> list[ImageRecord]:
    """Collect an ImageRecord for every image under the root directory.

    Creates an empty sidecar file for any image that lacks one. Entries whose
    name starts with a dot are skipped, subdirectories are only entered when
    ``recursive`` is true, and results keep the filesystem's own order.

    An entry that fails (permission denied, vanished file, unreadable nested
    directory) is logged and skipped. Failing to read the root itself raises.
    """
    check_directory(root_service)
    images: list[ImageRecord] = []
    _scan_dir(root_service, root_user, recursive, images, ancestors=frozenset(), depth=0)
    logger.info("Found {} images under {} (recursive={})", len(images), root_user, recursive)
    return images


def _scan_dir(service_dir: str, user_dir: str, recursive: bool,
              images: list[ImageRecord], ancestors: frozenset, depth: int) -> None:
    st = os.stat(service_dir)
    key = (st.st_dev, st.st_ino)
    # only a link back to an ancestor is a loop
    if key in ancestors:
        logger.warning("Skipping {}: symlink loop", service_dir)
        return
    ancestors = ancestors | {key}

    logger.debug("{}Scanning {}", "  " * depth, user_dir)
    found = 0

    with os.scandir(service_dir) as entries:
        for entry in entries:
            if is_hidden(entry.name):
                continue
            item_service = os.path.join(service_dir, entry.name)
            item_user = os.path.join(user_dir, entry.name)
            try:
                if entry.is_dir():
                    if recursive:
                        _scan_dir(item_service, item_user, recursive, images, ancestors, depth + 1)
                elif entry.is_file() and is_image_name(entry.name):
                    images.append(build_record(item_service, item_user))
                    found += 1
            except OSError as e:
                logger.warning("Skipping {}: {}", item_service, e)

    if found:
        logger.debug("{}  {} images in {}", "  " * depth, found, user_dir)


def parent_of(path: str) -> Optional[str]:
    """Parent directory of ``path``, or None at the filesystem root."""
    parent = os.path.dirname(path.rstrip("/")) or "/"
    if parent == path:
        return None
    return parent


def list_directories(service_path: str, user_path: str) -> list[DirectoryEntry]:
    """Direct child directories of ``service_path``, reported with user paths.

    Hidden entries are left out; an entry that can't be stat'ed is skipped.
    """
    check_directory(service_path)
    directories = []
    for name in os.listdir(service_path):
        if is_hidden(name):
            continue
        # isdir() is False for anything stat() fails on
        if os.path.isdir(os.path.join(service_path, name)):
            directories.append(DirectoryEntry(name=name, path=os.path.join(user_path, name)))

    directories.sort(key=lambda d: (locale.strxfrm(d.name.casefold()), d.name))
    return directories
