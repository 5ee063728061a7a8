from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


@dataclass(frozen=True)
class Settings:
    # Backend (in-memory unless explicitly enabled)
    persist_to_disk: bool
    data_dir: Path | None
    backing_table: str
    retained_versions: int

    # Logging
    log_level: str
    debug_log_requests: bool


def get_settings() -> Settings:
    raw_dir = os.getenv("DOCSTORE_DATA_DIR", "").strip()
    data_dir = Path(raw_dir).expanduser() if raw_dir else None

    retained_versions = _env_int("DOCSTORE_RETAINED_VERSIONS", 3)
    if retained_versions < 1:
        raise ValueError("DOCSTORE_RETAINED_VERSIONS must be >= 1")

    return Settings(
        persist_to_disk=_env_bool("DOCSTORE_PERSIST_TO_DISK", False),
        data_dir=data_dir,
        backing_table=os.getenv("DOCSTORE_BACKING_TABLE", "documents").strip() or "documents",
        retained_versions=retained_versions,
        log_level=os.getenv("DOCSTORE_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        debug_log_requests=_env_bool("DOCSTORE_DEBUG_LOG_REQUESTS", False),
    )
