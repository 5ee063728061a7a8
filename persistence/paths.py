from __future__ import annotations

from pathlib import Path


def project_root() -> Path:
    # persistence/paths.py -> persistence -> project root
    return Path(__file__).resolve().parents[1]


def data_dir() -> Path:
    return ensure_dir(project_root() / "data")


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def tables_dir(data_dir: Path) -> Path:
    return ensure_dir(data_dir / "tables")


def table_path(data_dir: Path, table_name: str) -> Path:
    safe = (table_name.strip() or "documents").replace("/", "_")
    return tables_dir(data_dir) / f"{safe}.json"
