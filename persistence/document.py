from __future__ import annotations

import struct
import time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

KEY_SEPARATOR = ":"

COLUMN_FAMILY = b"d"
DATA_COLUMN = b"data"
TIMESTAMP_COLUMN = b"timestamp"

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_TIMESTAMP = struct.Struct(">q")


def current_millis() -> int:
    return int(time.time() * 1000)


def check_id(doc_id: str) -> str:
    """
    Reject identifiers that cannot be mapped to a row key.

    Row keys are "<id>:<table>" and ids are recovered by splitting on the first
    separator, so an id containing the separator would decode to a prefix of itself.
    """
    if not isinstance(doc_id, str) or not doc_id:
        raise ValueError("document id must be a non-empty string")
    if KEY_SEPARATOR in doc_id:
        raise ValueError(f"document id must not contain {KEY_SEPARATOR!r}: {doc_id!r}")
    return doc_id


class Document(BaseModel):
    """
    A stored unit: identifier, timestamp and an opaque JSON-like payload.

    Persisted as a single row in COLUMN_FAMILY with two cells:
      data      -> encoded payload
      timestamp -> 8 byte big-endian signed integer
    """

    model_config = ConfigDict(frozen=True)

    id: str
    timestamp: int = Field(default_factory=current_millis, ge=INT64_MIN, le=INT64_MAX, strict=True)
    data: Any = None

    @field_validator("id")
    @classmethod
    def _no_separator(cls, v: str) -> str:
        # Empty ids are representable; the store rejects them on write.
        if KEY_SEPARATOR in v:
            raise ValueError(f"id must not contain {KEY_SEPARATOR!r}")
        return v


def encode_key(table: str, doc_id: str) -> bytes:
    return f"{check_id(doc_id)}{KEY_SEPARATOR}{table}".encode("utf-8")


def decode_id(key: bytes) -> str:
    doc_id, _, _ = key.decode("utf-8").partition(KEY_SEPARATOR)
    return doc_id


def encode_timestamp(timestamp: int) -> bytes:
    return _TIMESTAMP.pack(timestamp)


def decode_timestamp(raw: bytes | None) -> int:
    if raw is None or len(raw) != _TIMESTAMP.size:
        raise ValueError(f"timestamp cell must be {_TIMESTAMP.size} bytes, got {raw!r}")
    return _TIMESTAMP.unpack(raw)[0]
