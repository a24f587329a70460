"""Mapping between the paths a user types and the paths this process opens.

When the service runs in a container, the user's home directory is usually
mounted somewhere else (``/Users/me`` on the host is ``/host-home`` inside).
The UI only ever shows user paths; every filesystem call goes through
:meth:`PathTranslator.to_service_path` first.
"""
from __future__ import annotations

import os
from typing import Optional

import config

SEP = "/"


def _normalize_root(root: Optional[str]) -> str:
    if not root:
        return ""
    stripped = root.rstrip(SEP)
    # "/" normalizes to "" and still matches every absolute path below
    return stripped


def _swap_prefix(path: str, old: str, new: str) -> Optional[str]:
    """Replace a leading ``old`` directory with ``new``, on segment boundaries only."""
    if path == old:
        return new or SEP
    if path.startswith(old + SEP):
        return new + path[len(old):]
    return None


class PathTranslator:
    """Two-way textual mapping between a user root and a service root.

    Matching is segment aware: a user root of ``/home/al`` maps
    ``/home/al/pics`` but leaves ``/home/alice`` alone.
    """

    def __init__(self, user_root: Optional[str] = None, service_root: Optional[str] = None):
        self.user_root = _normalize_root(user_root)
        self.service_root = _normalize_root(service_root)
        self.enabled = bool(user_root) and bool(service_root)

    @classmethod
    def from_config(cls) -> "PathTranslator":
        return cls(config.USER_HOME, config.HOST_HOME)

    def to_service_path(self, user_path: str) -> str:
        if not self.enabled:
            return user_path
        swapped = _swap_prefix(user_path, self.user_root, self.service_root)
        return user_path if swapped is None else swapped

    def to_user_path(self, service_path: str) -> str:
        if not self.enabled:
            return service_path
        swapped = _swap_prefix(service_path, self.service_root, self.user_root)
        return service_path if swapped is None else swapped

    def expand_user(self, path: str) -> str:
        """Expand a leading ``~`` to the user-visible home directory."""
        if path != "~" and not path.startswith("~" + SEP):
            return path
        home = self.user_root or os.path.expanduser("~")
        return home + path[1:]

    def __repr__(self) -> str:
        if not self.enabled:
            return "PathTranslator(disabled)"
        return f"PathTranslator({self.user_root!r} -> {self.service_root!r})"


translator = PathTranslator.from_config()
