from __future__ import annotations

import importlib
from pathlib import Path
import sys
import threading


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import persistence...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


class CountingProvider:
    """
    Wraps a handle provider and records every acquire/close so tests can assert
    that each call releases its handle exactly once.
    """

    def __init__(self, inner, *, handle_factory=None, fail_acquire: Exception | None = None):
        self.inner = inner
        self.acquired = 0
        self.closed = 0
        self.lock = threading.Lock()
        self._handle_factory = handle_factory
        self._fail_acquire = fail_acquire

    def acquire(self):
        if self._fail_acquire is not None:
            raise self._fail_acquire
        with self.lock:
            self.acquired += 1
        handle = self.inner.acquire()
        if self._handle_factory is not None:
            handle = self._handle_factory(handle)
        return _CountingHandle(self, handle)


class _CountingHandle:
    def __init__(self, provider: CountingProvider, inner):
        self._provider = provider
        self._inner = inner

    def __getattr__(self, name):
        return getattr(self._inner, name)

    def close(self) -> None:
        with self._provider.lock:
            self._provider.closed += 1
        self._inner.close()


@pytest.fixture
def sandbox_project(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Redirect persistence paths to a temp project directory so tests never touch real ./data.
    """
    import persistence.paths as paths

    def _project_root() -> Path:
        return tmp_path

    def _data_dir() -> Path:
        p = tmp_path / "data"
        p.mkdir(parents=True, exist_ok=True)
        return p

    monkeypatch.setattr(paths, "project_root", _project_root)
    monkeypatch.setattr(paths, "data_dir", _data_dir)
    return tmp_path


@pytest.fixture
def memory_table():
    from persistence.memory_store import InMemoryColumnFamilyStore

    return InMemoryColumnFamilyStore()


@pytest.fixture
def provider(memory_table) -> CountingProvider:
    return CountingProvider(memory_table)


@pytest.fixture
def store(provider):
    from persistence.codec import JsonPayloadCodec
    from persistence.document_store import ColumnFamilyDocumentStore

    return ColumnFamilyDocumentStore(provider, JsonPayloadCodec())


@pytest.fixture
def reload_endpoints(sandbox_project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Endpoints create the store singleton at import time; reload so each test gets a fresh one.
    """
    monkeypatch.delenv("DOCSTORE_PERSIST_TO_DISK", raising=False)
    monkeypatch.delenv("DOCSTORE_DATA_DIR", raising=False)

    import endpoints.document_endpoints as document_endpoints

    importlib.reload(document_endpoints)
