"""Typed failures raised by the document store."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    STORE_ERROR = "STORE_ERROR"
    STORE_INVALID_DOCUMENT = "STORE_INVALID_DOCUMENT"
    STORE_INVALID_REQUEST = "STORE_INVALID_REQUEST"
    STORE_NO_DATA_FOUND_FOR_ID = "STORE_NO_DATA_FOUND_FOR_ID"
    STORE_NO_DATA_FOUND_FOR_IDS = "STORE_NO_DATA_FOUND_FOR_IDS"
    STORE_SINGLE_SAVE = "STORE_SINGLE_SAVE"
    STORE_MULTI_SAVE = "STORE_MULTI_SAVE"
    STORE_SINGLE_GET = "STORE_SINGLE_GET"
    STORE_MULTI_GET = "STORE_MULTI_GET"


class DataStoreError(Exception):
    """Base class for document store failures. The underlying cause, if any, is __cause__."""

    code: ErrorCode = ErrorCode.STORE_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidDocumentError(DataStoreError):
    """A document handed in for writing is missing required fields."""

    code = ErrorCode.STORE_INVALID_DOCUMENT


class InvalidRequestError(DataStoreError):
    """A collection or key argument is missing or malformed."""

    code = ErrorCode.STORE_INVALID_REQUEST


class DocumentNotFoundError(DataStoreError):
    code = ErrorCode.STORE_NO_DATA_FOUND_FOR_ID

    def __init__(self, doc_id: str) -> None:
        super().__init__(f"No data found for ID: {doc_id}")
        self.id = doc_id


class DocumentsNotFoundError(DataStoreError):
    code = ErrorCode.STORE_NO_DATA_FOUND_FOR_IDS

    def __init__(self, ids: list[str]) -> None:
        super().__init__(f"No data found for IDs: {', '.join(ids)}")
        self.ids = list(ids)


class SingleSaveError(DataStoreError):
    code = ErrorCode.STORE_SINGLE_SAVE


class MultiSaveError(DataStoreError):
    code = ErrorCode.STORE_MULTI_SAVE


class SingleGetError(DataStoreError):
    code = ErrorCode.STORE_SINGLE_GET


class MultiGetError(DataStoreError):
    code = ErrorCode.STORE_MULTI_GET
