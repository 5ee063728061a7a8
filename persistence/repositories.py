from __future__ import annotations

import asyncio
from typing import Protocol

from .document import Document
from .interfaces import DocumentStore


class AsyncDocumentRepository(Protocol):
    async def save(self, table: str, document: Document) -> None: ...
    async def save_many(self, table: str, documents: list[Document]) -> None: ...

    async def get(self, table: str, doc_id: str) -> Document: ...
    async def get_many(self, table: str, ids: list[str]) -> list[Document]: ...


class ThreadedDocumentRepository(AsyncDocumentRepository):
    """
    Async wrapper around a synchronous DocumentStore.
    Uses asyncio.to_thread so blocking store calls never run on the event loop.
    Errors from the store propagate unchanged.
    """

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    @property
    def store(self) -> DocumentStore:
        return self._store

    async def save(self, table: str, document: Document) -> None:
        await asyncio.to_thread(self._store.save, table, document)

    async def save_many(self, table: str, documents: list[Document]) -> None:
        await asyncio.to_thread(self._store.save_many, table, documents)

    async def get(self, table: str, doc_id: str) -> Document:
        return await asyncio.to_thread(self._store.get, table, doc_id)

    async def get_many(self, table: str, ids: list[str]) -> list[Document]:
        return await asyncio.to_thread(self._store.get_many, table, ids)
