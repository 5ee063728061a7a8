from __future__ import annotations

from dataclasses import dataclass, field

# (family, qualifier)
Column = tuple[bytes, bytes]

# row key -> column -> versions, newest first: [(sequence, value), ...]
Rows = dict[bytes, dict[Column, list[tuple[int, bytes]]]]


class HandleClosedError(RuntimeError):
    """Raised when a table handle is used or closed after it was already closed."""


@dataclass
class Put:
    """A write of one or more cells to a single row."""

    row: bytes
    cells: dict[Column, bytes] = field(default_factory=dict)

    def add(self, family: bytes, qualifier: bytes, value: bytes) -> "Put":
        self.cells[(family, qualifier)] = value
        return self


@dataclass
class Get:
    """A read of selected columns of a single row."""

    row: bytes
    columns: list[Column] = field(default_factory=list)
    max_versions: int = 1

    def add_column(self, family: bytes, qualifier: bytes) -> "Get":
        self.columns.append((family, qualifier))
        return self

    def set_max_versions(self, max_versions: int) -> "Get":
        if max_versions < 1:
            raise ValueError("max_versions must be >= 1")
        self.max_versions = max_versions
        return self


@dataclass
class Result:
    """
    Outcome of a Get. An empty result (row is None, no cells) means the row does not exist.
    Each column maps to its versions, newest first.
    """

    row: bytes | None = None
    cells: dict[Column, list[bytes]] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.cells

    def value(self, family: bytes, qualifier: bytes) -> bytes | None:
        versions = self.cells.get((family, qualifier))
        return versions[0] if versions else None


def apply_put(rows: Rows, put: Put, sequence: int, retained_versions: int) -> None:
    if not put.cells:
        raise ValueError("put has no cells")
    row = rows.setdefault(put.row, {})
    for column, value in put.cells.items():
        versions = row.setdefault(column, [])
        versions.insert(0, (sequence, value))
        del versions[retained_versions:]


def read_row(rows: Rows, get: Get) -> Result:
    row = rows.get(get.row)
    if not row:
        return Result()
    columns = get.columns or list(row.keys())
    cells: dict[Column, list[bytes]] = {}
    for column in columns:
        versions = row.get(column)
        if versions:
            cells[column] = [value for _, value in versions[: get.max_versions]]
    if not cells:
        return Result()
    return Result(row=get.row, cells=cells)
