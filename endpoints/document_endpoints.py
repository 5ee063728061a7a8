from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Query

from persistence import connection
from persistence.document import Document
from persistence.errors import (
    DataStoreError,
    DocumentNotFoundError,
    DocumentsNotFoundError,
    InvalidDocumentError,
    InvalidRequestError,
)
from persistence.repositories import ThreadedDocumentRepository
from settings import get_settings

router = APIRouter(prefix="/v1/document", tags=["document"])
logger = logging.getLogger(__name__)

SETTINGS = get_settings()
DEBUG_LOG_REQUESTS = SETTINGS.debug_log_requests

DOCUMENT_REPO = ThreadedDocumentRepository(connection.create_document_store(SETTINGS))


def _http_error(e: DataStoreError) -> HTTPException:
    if isinstance(e, (InvalidDocumentError, InvalidRequestError)):
        status = 400
    elif isinstance(e, (DocumentNotFoundError, DocumentsNotFoundError)):
        status = 404
    else:
        status = 500
        logger.error("DOCUMENT: store failure: %s", e, exc_info=e.__cause__)
    return HTTPException(status_code=status, detail={"code": e.code.value, "message": e.message})


def _to_json(document: Document) -> dict[str, Any]:
    return document.model_dump(mode="json")


@router.post("/{table}")
async def save_document(table: str, document: Document) -> dict[str, Any]:
    if DEBUG_LOG_REQUESTS:
        logger.debug("DOCUMENT SAVE: table=%s id=%s", table, document.id)
    try:
        await DOCUMENT_REPO.save(table, document)
    except DataStoreError as e:
        raise _http_error(e) from e
    return {"saved": 1}


@router.post("/{table}/bulk")
async def save_documents(table: str, documents: list[Document]) -> dict[str, Any]:
    if DEBUG_LOG_REQUESTS:
        logger.debug("DOCUMENT SAVE: table=%s count=%d", table, len(documents))
    try:
        await DOCUMENT_REPO.save_many(table, documents)
    except DataStoreError as e:
        raise _http_error(e) from e
    return {"saved": len(documents)}


@router.get("/{table}/{doc_id}")
async def get_document(table: str, doc_id: str) -> dict[str, Any]:
    if DEBUG_LOG_REQUESTS:
        logger.debug("DOCUMENT GET: table=%s id=%s", table, doc_id)
    try:
        document = await DOCUMENT_REPO.get(table, doc_id)
    except DataStoreError as e:
        raise _http_error(e) from e
    return _to_json(document)


@router.get("/{table}")
async def get_documents(table: str, id: list[str] = Query(default=[])) -> list[dict[str, Any]]:
    if DEBUG_LOG_REQUESTS:
        logger.debug("DOCUMENT GET: table=%s ids=%s", table, id)
    try:
        documents = await DOCUMENT_REPO.get_many(table, id)
    except DataStoreError as e:
        raise _http_error(e) from e
    return [_to_json(d) for d in documents]
