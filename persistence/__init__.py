from __future__ import annotations

from .codec import JsonPayloadCodec
from .connection import create_document_store, open_connection
from .disk_store import DiskColumnFamilyStore
from .document import Document, decode_id, encode_key
from .document_store import ColumnFamilyDocumentStore
from .errors import (
    DataStoreError,
    DocumentNotFoundError,
    DocumentsNotFoundError,
    ErrorCode,
    InvalidDocumentError,
    InvalidRequestError,
    MultiGetError,
    MultiSaveError,
    SingleGetError,
    SingleSaveError,
)
from .memory_store import InMemoryColumnFamilyStore
from .repositories import AsyncDocumentRepository, ThreadedDocumentRepository

__all__ = [
    "Document",
    "encode_key",
    "decode_id",
    "ColumnFamilyDocumentStore",
    "JsonPayloadCodec",
    "InMemoryColumnFamilyStore",
    "DiskColumnFamilyStore",
    "open_connection",
    "create_document_store",
    "AsyncDocumentRepository",
    "ThreadedDocumentRepository",
    "DataStoreError",
    "ErrorCode",
    "InvalidDocumentError",
    "InvalidRequestError",
    "DocumentNotFoundError",
    "DocumentsNotFoundError",
    "SingleSaveError",
    "MultiSaveError",
    "SingleGetError",
    "MultiGetError",
]
