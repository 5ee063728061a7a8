from __future__ import annotations

import logging

from settings import Settings

from . import paths
from .codec import JsonPayloadCodec
from .disk_store import DiskColumnFamilyStore
from .document_store import ColumnFamilyDocumentStore
from .interfaces import HandleProvider
from .memory_store import InMemoryColumnFamilyStore

logger = logging.getLogger(__name__)


def open_connection(settings: Settings) -> HandleProvider:
    if not settings.persist_to_disk:
        logger.info("STORE: using in-memory table %s", settings.backing_table)
        return InMemoryColumnFamilyStore(retained_versions=settings.retained_versions)

    base = paths.ensure_dir(settings.data_dir) if settings.data_dir else paths.data_dir()
    path = paths.table_path(base, settings.backing_table)
    logger.info("STORE: using disk table %s", path)
    return DiskColumnFamilyStore(path, retained_versions=settings.retained_versions)


def create_document_store(settings: Settings) -> ColumnFamilyDocumentStore:
    return ColumnFamilyDocumentStore(open_connection(settings), JsonPayloadCodec())
