"""Category resolution: entry name -> display key, color tag and counter."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..theme import ColorTag
from .errors import LookupIntegrityError
from .tables import LookupTables

LOGGER = logging.getLogger(__name__)

GENERIC_FOLDER_KEY = "folder"
GENERIC_FILE_KEY = "file"

FOLDERS = "folders"
RECOGNIZED_FILES = "recognized_files"
UNRECOGNIZED_FILES = "unrecognized_files"


@dataclass(frozen=True)
class Category:
    """Classification result for one entry."""

    display_key: str
    color: ColorTag
    counter: str


@dataclass
class Counters:
    """Running totals collected while a listing is rendered."""

    folders: int = 0
    recognized_files: int = 0
    unrecognized_files: int = 0

    @property
    def total(self) -> int:
        return self.folders + self.recognized_files + self.unrecognized_files

    def increment(self, counter: str):
        if counter not in (FOLDERS, RECOGNIZED_FILES, UNRECOGNIZED_FILES):
            raise ValueError(f"unknown counter: {counter!r}")
        setattr(self, counter, getattr(self, counter) + 1)


def file_key(name: str) -> str:
    """Return the lookup key for a file: its lowercased last extension."""
    return name.rsplit(".", 1)[-1].lower()


class CategoryResolver:
    """Classifies entries against a set of lookup tables and counts them."""

    def __init__(self, tables: LookupTables, counters: Counters | None = None):
        self.tables = tables
        self.counters = counters if counters is not None else Counters()

    def classify(self, name: str, is_directory: bool) -> Category:
        """Classify one entry and bump the matching counter."""
        if is_directory:
            category = self._classify_folder(name)
        else:
            category = self._classify_file(name)
        self.counters.increment(category.counter)
        return category

    def _classify_folder(self, name):
        folders = self.tables.folders
        aliases = self.tables.folder_aliases
        if name in folders:
            return Category(name, ColorTag.BLUE, FOLDERS)
        if name not in aliases:
            return Category(GENERIC_FOLDER_KEY, ColorTag.BLUE, FOLDERS)
        target = aliases[name]
        if target not in folders:
            raise LookupIntegrityError("folders", target, alias=name)
        return Category(target, ColorTag.BLUE, FOLDERS)

    def _classify_file(self, name):
        key = file_key(name)
        files = self.tables.files
        aliases = self.tables.file_aliases
        if key in files:
            return Category(key, ColorTag.GREEN, RECOGNIZED_FILES)
        if key not in aliases:
            return Category(GENERIC_FILE_KEY, ColorTag.YELLOW, UNRECOGNIZED_FILES)
        target = aliases[key]
        if target not in files:
            raise LookupIntegrityError("files", target, alias=key)
        return Category(target, ColorTag.GREEN, RECOGNIZED_FILES)

    def icon(self, category: Category) -> str:
        """Return the glyph the primary table stores for *category*."""
        if category.counter == FOLDERS:
            table_name, table = "folders", self.tables.folders
        else:
            table_name, table = "files", self.tables.files
        try:
            return table[category.display_key]
        except KeyError:
            raise LookupIntegrityError(table_name, category.display_key) from None
