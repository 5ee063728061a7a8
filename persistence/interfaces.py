from __future__ import annotations

from typing import Any, Protocol

from .column_family import Get, Put, Result
from .document import Document


class TableHandle(Protocol):
    """
    A live session against a column-family table. Obtained per call from a
    HandleProvider and closed exactly once by the caller.
    """

    def put(self, put: Put) -> None:
        ...

    def put_many(self, puts: list[Put]) -> None:
        """Submit all puts in one call. Not atomic across rows."""
        ...

    def get(self, get: Get) -> Result:
        ...

    def get_many(self, gets: list[Get]) -> list[Result]:
        """Return one Result per Get, in the same order."""
        ...

    def close(self) -> None:
        ...


class HandleProvider(Protocol):
    def acquire(self) -> TableHandle:
        ...


class PayloadCodec(Protocol):
    def encode(self, value: Any) -> bytes:
        ...

    def decode(self, raw: bytes) -> Any:
        ...


class DocumentStore(Protocol):
    def save(self, table: str, document: Document) -> None:
        ...

    def save_many(self, table: str, documents: list[Document]) -> None:
        ...

    def get(self, table: str, doc_id: str) -> Document:
        ...

    def get_many(self, table: str, ids: list[str]) -> list[Document]:
        ...
