"""Tag edits across a multi-image selection.

A tag on every selected image is *common*, a tag on only some of them is
*partial*. Clicking a common tag removes it everywhere; clicking a partial
tag adds it to the images that lack it.
"""
from __future__ import annotations

import locale
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from loguru import logger

from errors import ValidationError
from paths import PathTranslator
from tagfiles import write_tags


@dataclass
class TagInfo:
    tag: str
    count: int
    is_common: bool


@dataclass
class TagAnalysis:
    tags: list[TagInfo]
    total_images: int

    @property
    def common(self) -> list[TagInfo]:
        return [t for t in self.tags if t.is_common]

    @property
    def partial(self) -> list[TagInfo]:
        return [t for t in self.tags if not t.is_common]

    def get(self, tag: str) -> TagInfo | None:
        for info in self.tags:
            if info.tag == tag:
                return info
        return None


def analyze_tags(tag_lists: Sequence[Sequence[str]]) -> TagAnalysis:
    """Count how many of the selected images carry each tag.

    Sorted common first, then by count (highest first), then alphabetically.
    """
    counts: dict[str, int] = {}
    for tags in tag_lists:
        for tag in dict.fromkeys(tags):
            counts[tag] = counts.get(tag, 0) + 1

    total = len(tag_lists)
    infos = [TagInfo(tag=t, count=c, is_common=c == total) for t, c in counts.items()]
    infos.sort(key=lambda i: (not i.is_common, -i.count, locale.strxfrm(i.tag.casefold()), i.tag))
    return TagAnalysis(tags=infos, total_images=total)


def remove_tag(tags: Sequence[str], tag: str) -> list[str]:
    return [t for t in tags if t != tag]


def add_tag(tags: Sequence[str], tag: str) -> list[str]:
    if tag in tags:
        return list(tags)
    return [*tags, tag]


def _changed(selection: Mapping[str, Sequence[str]], new_tags: Mapping[str, list[str]]) -> dict[str, list[str]]:
    return {image_id: tags for image_id, tags in new_tags.items() if tags != list(selection[image_id])}


def toggle_tag(selection: Mapping[str, Sequence[str]], tag: str) -> dict[str, list[str]]:
    """Remove ``tag`` from all images if it is common, else add it where missing.

    ``selection`` maps image id to its current tags. Only images whose list
    actually changes are returned.
    """
    info = analyze_tags(list(selection.values())).get(tag)
    if info is not None and info.is_common:
        new_tags = {image_id: remove_tag(tags, tag) for image_id, tags in selection.items()}
    else:
        new_tags = {image_id: add_tag(tags, tag) for image_id, tags in selection.items()}
    return _changed(selection, new_tags)


def add_new_tag(selection: Mapping[str, Sequence[str]], tag: str | None) -> dict[str, list[str]]:
    """Append ``tag`` to every selected image that doesn't have it yet."""
    tag = (tag or "").strip()
    if not tag:
        raise ValidationError("Tag is required")
    new_tags = {image_id: add_tag(tags, tag) for image_id, tags in selection.items()}
    return _changed(selection, new_tags)


@dataclass
class BatchResult:
    updated: dict[str, list[str]] = field(default_factory=dict)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return not self.failed


def commit_changes(changes: Mapping[str, list[str]], text_files: Mapping[str, str],
                   translator: PathTranslator) -> BatchResult:
    """Write each changed tag list to its sidecar file, independently.

    ``text_files`` maps image id to the user-visible sidecar path. A failed
    write is recorded against its image and does not stop the others.
    """
    result = BatchResult()
    for image_id, tags in changes.items():
        text_file = text_files.get(image_id)
        if not text_file:
            result.failed[image_id] = "Text file path is required"
            continue
        try:
            write_tags(translator.to_service_path(text_file), tags)
        except OSError as e:
            logger.error("Failed to write tags for {}: {}", text_file, e)
            result.failed[image_id] = str(e)
            continue
        result.updated[image_id] = tags

    if result.failed:
        logger.warning("{} of {} tag writes failed", len(result.failed), len(changes))
    return result
