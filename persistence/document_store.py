from __future__ import annotations

import contextlib
import logging
from typing import Iterator

from .column_family import Get, Put, Result
from .document import (
    COLUMN_FAMILY,
    DATA_COLUMN,
    KEY_SEPARATOR,
    TIMESTAMP_COLUMN,
    Document,
    decode_id,
    decode_timestamp,
    encode_key,
    encode_timestamp,
)
from .errors import (
    DataStoreError,
    DocumentNotFoundError,
    DocumentsNotFoundError,
    InvalidDocumentError,
    InvalidRequestError,
    MultiGetError,
    MultiSaveError,
    SingleGetError,
    SingleSaveError,
)
from .interfaces import DocumentStore, HandleProvider, PayloadCodec, TableHandle

logger = logging.getLogger(__name__)


class ColumnFamilyDocumentStore(DocumentStore):
    """
    Maps documents onto rows of a column-family table.

    Row key:  "<id>:<table>"
    Columns:  d:data (encoded payload), d:timestamp (8 byte big-endian)

    Every call acquires one handle from the provider and closes it before
    returning or raising. Validation failures are raised before a handle is
    acquired; any other failure is wrapped into the operation's error type.
    """

    def __init__(self, provider: HandleProvider, codec: PayloadCodec) -> None:
        self._provider = provider
        self._codec = codec

    # -------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------

    def save(self, table: str, document: Document) -> None:
        _check_table(table)
        _check_document(document)
        try:
            put = self._put_for(table, document)
            with self._table() as handle:
                handle.put(put)
        except DataStoreError:
            raise
        except Exception as e:
            logger.error("SAVE %s/%s failed: %r", table, document.id, e)
            raise SingleSaveError(f"Saving document error: {e}") from e

    def save_many(self, table: str, documents: list[Document]) -> None:
        _check_table(table)
        if not isinstance(documents, (list, tuple)):
            raise InvalidRequestError("Invalid documents list")
        for document in documents:
            _check_document(document)
        try:
            puts = [self._put_for(table, d) for d in documents]
            logger.debug("SAVE %s: %d documents", table, len(puts))
            with self._table() as handle:
                handle.put_many(puts)
        except DataStoreError:
            raise
        except Exception as e:
            logger.error("SAVE %s: batch of %d failed: %r", table, len(documents), e)
            raise MultiSaveError(f"Saving documents error: {e}") from e

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------

    def get(self, table: str, doc_id: str) -> Document:
        _check_table(table)
        _check_request_id(doc_id)
        try:
            with self._table() as handle:
                result = handle.get(_get_for(table, doc_id))
            if result.is_empty():
                raise DocumentNotFoundError(doc_id)
            return self._to_document(doc_id, result)
        except DataStoreError:
            raise
        except Exception as e:
            logger.error("GET %s/%s failed: %r", table, doc_id, e)
            raise SingleGetError(f"Reading document error: {e}") from e

    def get_many(self, table: str, ids: list[str]) -> list[Document]:
        """
        Fetch documents in the order of `ids`.

        Fails with DocumentsNotFoundError if any id is missing; no partial list is returned.
        """
        _check_table(table)
        if not isinstance(ids, (list, tuple)):
            raise InvalidRequestError("Invalid request IDs")
        for doc_id in ids:
            _check_request_id(doc_id)
        try:
            gets = [_get_for(table, doc_id) for doc_id in ids]
            logger.debug("GET %s: %d ids", table, len(gets))
            with self._table() as handle:
                results = handle.get_many(gets)
            if len(results) != len(ids):
                raise ValueError(f"expected {len(ids)} results, got {len(results)}")
            missing = [doc_id for doc_id, r in zip(ids, results) if r.is_empty()]
            if missing:
                raise DocumentsNotFoundError(missing)
            # The id is recovered from the returned row key, not the request.
            return [self._to_document(decode_id(r.row), r) for r in results]
        except DataStoreError:
            raise
        except Exception as e:
            logger.error("GET %s: batch of %d failed: %r", table, len(ids), e)
            raise MultiGetError(f"Reading documents error: {e}") from e

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------

    @contextlib.contextmanager
    def _table(self) -> Iterator[TableHandle]:
        handle = self._provider.acquire()
        try:
            yield handle
        finally:
            try:
                handle.close()
            except Exception as e:
                logger.warning("Error closing table handle: %r", e)

    def _put_for(self, table: str, document: Document) -> Put:
        return (
            Put(encode_key(table, document.id))
            .add(COLUMN_FAMILY, DATA_COLUMN, self._codec.encode(document.data))
            .add(COLUMN_FAMILY, TIMESTAMP_COLUMN, encode_timestamp(document.timestamp))
        )

    def _to_document(self, doc_id: str, result: Result) -> Document:
        data = result.value(COLUMN_FAMILY, DATA_COLUMN)
        if data is None:
            raise ValueError(f"row for {doc_id!r} has no data cell")
        timestamp = decode_timestamp(result.value(COLUMN_FAMILY, TIMESTAMP_COLUMN))
        return Document(id=doc_id, timestamp=timestamp, data=self._codec.decode(data))


def _get_for(table: str, doc_id: str) -> Get:
    return (
        Get(encode_key(table, doc_id))
        .add_column(COLUMN_FAMILY, DATA_COLUMN)
        .add_column(COLUMN_FAMILY, TIMESTAMP_COLUMN)
        .set_max_versions(1)
    )


def _check_table(table: str) -> None:
    if not isinstance(table, str) or not table:
        raise InvalidRequestError("table must be a non-empty string")


def _check_document(document: Document | None) -> None:
    if document is None or not isinstance(document, Document):
        raise InvalidDocumentError("Saving document error: document is missing")
    if not document.id:
        raise InvalidDocumentError("Saving document error: id is missing")
    if KEY_SEPARATOR in document.id:
        raise InvalidDocumentError(f"Saving document error: id must not contain {KEY_SEPARATOR!r}")
    if document.data is None:
        raise InvalidDocumentError(f"Saving document error: data is missing for {document.id}")


def _check_request_id(doc_id: str) -> None:
    if not isinstance(doc_id, str) or not doc_id:
        raise InvalidRequestError("document id must be a non-empty string")
    if KEY_SEPARATOR in doc_id:
        raise InvalidRequestError(f"document id must not contain {KEY_SEPARATOR!r}: {doc_id}")
