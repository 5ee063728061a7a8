from __future__ import annotations

import base64
from pathlib import Path
from typing import Any

from json_store import atomic_write_json, read_json

from .column_family import Column, Get, HandleClosedError, Put, Result, Rows, apply_put, read_row
from .locks import GLOBAL_PATH_LOCKS


def _b64(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


def _unb64(text: str) -> bytes:
    return base64.b64decode(text.encode("ascii"), validate=True)


def _column_key(column: Column) -> str:
    # ':' never appears in base64 output
    family, qualifier = column
    return f"{_b64(family)}:{_b64(qualifier)}"


def _parse_column_key(key: str) -> Column:
    family, qualifier = key.split(":", 1)
    return _unb64(family), _unb64(qualifier)


class DiskColumnFamilyStore:
    """
    Column-family table persisted as a single JSON document on disk.

    On-disk schema:
      {
        "sequence": 42,
        "rows": { "<b64 row>": { "<b64 family>:<b64 qualifier>": [[seq, "<b64 value>"], ...] } }
      }

    - Versions are stored newest first.
    - Every write reloads, applies and atomically replaces the file under a per-path lock.
    """

    def __init__(self, path: Path, *, retained_versions: int = 3):
        if retained_versions < 1:
            raise ValueError("retained_versions must be >= 1")
        self._path = path
        self._retained_versions = retained_versions

    @property
    def path(self) -> Path:
        return self._path

    def acquire(self) -> "DiskTableHandle":
        return DiskTableHandle(self)

    def _load(self) -> tuple[int, Rows]:
        doc = read_json(self._path, default={})
        if not isinstance(doc, dict):
            raise ValueError(f"unexpected table document in {self._path}")
        rows: Rows = {}
        for row_key, columns in (doc.get("rows") or {}).items():
            rows[_unb64(row_key)] = {
                _parse_column_key(col): [(int(seq), _unb64(val)) for seq, val in versions]
                for col, versions in columns.items()
            }
        return int(doc.get("sequence", 0)), rows

    def _dump(self, sequence: int, rows: Rows) -> dict[str, Any]:
        return {
            "sequence": sequence,
            "rows": {
                _b64(row_key): {
                    _column_key(col): [[seq, _b64(val)] for seq, val in versions]
                    for col, versions in columns.items()
                }
                for row_key, columns in rows.items()
            },
        }

    def _write(self, puts: list[Put]) -> None:
        lock = GLOBAL_PATH_LOCKS.lock_for(self._path)
        with lock:
            sequence, rows = self._load()
            for put in puts:
                sequence += 1
                apply_put(rows, put, sequence, self._retained_versions)
            atomic_write_json(self._path, self._dump(sequence, rows), indent=None)

    def _read(self, gets: list[Get]) -> list[Result]:
        lock = GLOBAL_PATH_LOCKS.lock_for(self._path)
        with lock:
            _, rows = self._load()
        return [read_row(rows, g) for g in gets]


class DiskTableHandle:
    def __init__(self, store: DiskColumnFamilyStore) -> None:
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
