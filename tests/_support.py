"""Shared test helpers.

Temporary directories are created inside the repo and synthetic lookup tables
keep resolver tests independent of the bundled data.
"""

from __future__ import annotations

import shutil
import uuid
from pathlib import Path

from colorls.core.tables import LookupTables


class RepoTemporaryDirectory:
    """Minimal TemporaryDirectory-like helper that stays inside the repo."""

    def __init__(self, path: Path):
        self._path = path
        self.name = str(path)

    def cleanup(self) -> None:
        shutil.rmtree(self._path, ignore_errors=True)

    def __enter__(self) -> str:
        return self.name

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.cleanup()
        return False


def make_repo_tmpdir(prefix: str = "_tmp_") -> RepoTemporaryDirectory:
    """Create a temp directory under tests/ (ignored by git)."""

    tests_dir = Path(__file__).resolve().parent
    for _ in range(100):
        path = tests_dir / f"{prefix}{uuid.uuid4().hex[:12]}"
        try:
            path.mkdir()
        except FileExistsError:
            continue
        return RepoTemporaryDirectory(path)

    raise RuntimeError("failed to create a repo temp directory")


def populate(root, dirs=(), files=()):
    """Create empty sub-directories and files under *root*."""
    base = Path(root)
    for name in dirs:
        (base / name).mkdir()
    for name in files:
        (base / name).write_text("", encoding="utf-8")


def make_tables(**overrides) -> LookupTables:
    """Return small synthetic tables; keyword arguments replace whole tables."""
    tables = {
        "files": {"file": "F", "md": "M", "rs": "R", "py": "P", "zip": "Z"},
        "file_aliases": {"markdown": "md", "tgz": "zip", "gz": "zip"},
        "folders": {"folder": "D", "src": "S", ".git": "G"},
        "folder_aliases": {"source": "src"},
    }
    tables.update(overrides)
    return LookupTables(**tables)
