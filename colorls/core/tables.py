"""Icon lookup tables: primary name/extension maps plus their alias maps."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import yaml

from .errors import DataLoadError

LOGGER = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"

TABLE_FILES = {
    "files": "files.yaml",
    "file_aliases": "file_aliases.yaml",
    "folders": "folders.yaml",
    "folder_aliases": "folder_aliases.yaml",
}


def _freeze(mapping):
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class LookupTables:
    """Read-only lookup data shared by every resolver in a run."""

    files: Mapping[str, str] = field(default_factory=dict)
    file_aliases: Mapping[str, str] = field(default_factory=dict)
    folders: Mapping[str, str] = field(default_factory=dict)
    folder_aliases: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        for name in TABLE_FILES:
            object.__setattr__(self, name, _freeze(getattr(self, name)))

    def validate(self):
        """Return ``(table, alias, target)`` for every alias with no primary key."""
        problems = []
        for alias_table, primary in (("file_aliases", self.files), ("folder_aliases", self.folders)):
            for alias, target in getattr(self, alias_table).items():
                if target not in primary:
                    problems.append((alias_table, alias, target))
        return problems


def _load_mapping(path: Path) -> dict:
    """Load one YAML document and check it is a flat string mapping."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DataLoadError(f"cannot read lookup table {path}: {exc}") from exc
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DataLoadError(f"malformed lookup table {path}: {exc}") from exc

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise DataLoadError(f"lookup table {path} must be a mapping, got {type(loaded).__name__}")

    table = {}
    for key, value in loaded.items():
        # YAML turns keys like `1` or `yes` into non-strings unless quoted.
        if not isinstance(key, str):
            raise DataLoadError(f"lookup table {path} has non-string key {key!r}; quote it")
        if not isinstance(value, str):
            raise DataLoadError(f"lookup table {path} has a non-string entry for {key!r}")
        table[key] = value
    return table


def load_tables(directory: str | Path | None = None) -> LookupTables:
    """Load the four lookup tables from *directory* (bundled data by default)."""
    base = Path(directory) if directory else DATA_DIR
    loaded = {name: _load_mapping(base / filename) for name, filename in TABLE_FILES.items()}
    LOGGER.debug(
        "loaded lookup tables from %s (%s)",
        base,
        ", ".join(f"{name}={len(table)}" for name, table in loaded.items()),
    )
    return LookupTables(**loaded)
