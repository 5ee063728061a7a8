from __future__ import annotations

import itertools
import threading

from .column_family import Get, HandleClosedError, Put, Result, Rows, apply_put, read_row


class InMemoryColumnFamilyStore:
    """
    In-process column-family table. Rows live for the lifetime of the object.

    Acts as its own handle provider: every acquire() returns a new handle.
    """

    def __init__(self, *, retained_versions: int = 3) -> None:
        if retained_versions < 1:
            raise ValueError("retained_versions must be >= 1")
        self._retained_versions = retained_versions
        self._lock = threading.Lock()
        self._rows: Rows = {}
        self._sequence = itertools.count(1)
        self._open_handles = 0

    @property
    def open_handles(self) -> int:
        with self._lock:
            return self._open_handles

    def acquire(self) -> "InMemoryTableHandle":
        with self._lock:
            self._open_handles += 1
        return InMemoryTableHandle(self)

    def _release(self) -> None:
        with self._lock:
            self._open_handles -= 1

    def _write(self, puts: list[Put]) -> None:
        with self._lock:
            for put in puts:
                apply_put(self._rows, put, next(self._sequence), self._retained_versions)

    def _read(self, gets: list[Get]) -> list[Result]:
        with self._lock:
            return [read_row(self._rows, g) for g in gets]


class InMemoryTableHandle:
    def __init__(self, store: InMemoryColumnFamilyStore) -> None:
        self._store = store
        self._closed = False

    def _check_open(self) -> None:
        if self._closed:
            raise HandleClosedError("table handle is closed")

    def put(self, put: Put) -> None:
        self._check_open()
        self._store._write([put])

    def put_many(self, puts: list[Put]) -> None:
        self._check_open()
        self._store._write(list(puts))

    def get(self, get: Get) -> Result:
        self._check_open()
        return self._store._read([get])[0]

    def get_many(self, gets: list[Get]) -> list[Result]:
        self._check_open()
        return self._store._read(list(gets))

    def close(self) -> None:
        self._check_open()
        self._closed = True
        self._store._release()
