from __future__ import annotations

import threading
from pathlib import Path


class PathLockRegistry:
    """
    Hands out one lock per table file so that concurrent handles on the same
    disk table serialize their load/modify/replace cycles, while different
    tables proceed independently.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[Path, threading.Lock] = {}

    def lock_for(self, path: Path) -> threading.Lock:
        key = path.resolve()
        with self._guard:
            return self._locks.setdefault(key, threading.Lock())


GLOBAL_PATH_LOCKS = PathLockRegistry()
