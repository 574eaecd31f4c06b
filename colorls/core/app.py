"""
Listing pipeline: read -> layout -> classify -> render, once per path.
"""
from __future__ import annotations

import logging
import os
import sys

from ..theme import Theme
from .errors import FilesystemError, LookupIntegrityError
from .layout import layout
from .listing import read_entries
from .render import render, render_report
from .resolver import CategoryResolver, Counters
from .tables import LookupTables

LOGGER = logging.getLogger(__name__)


class ColorLS:
    """Lists directories with shared tables, theme and width settings."""

    def __init__(self, tables: LookupTables, theme: Theme, width: int, report=False, out=None, err=None):
        self.tables = tables
        self.theme = theme
        self.width = width
        self.report = report
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr

    def list_path(self, path=None) -> Counters:
        """Run the whole pipeline for one directory and return its counters."""
        path = path or os.getcwd()
        entries = read_entries(path)
        grid = layout([entry.name for entry in entries], self.width)
        resolver = CategoryResolver(self.tables)
        render(grid, {entry.name: entry for entry in entries}, resolver, self.out, self.theme)
        if self.report:
            render_report(path, resolver.counters, self.out, self.theme)
        return resolver.counters

    def run(self, paths) -> int:
        """List every path in order; a failing path does not stop the others."""
        failures = 0
        for path in paths or [None]:
            try:
                self.list_path(path)
            except (FilesystemError, LookupIntegrityError) as exc:
                failures += 1
                LOGGER.debug("listing %s failed", path, exc_info=True)
                self.out.flush()
                self.err.write(f"colorls: {exc}\n")
        return 1 if failures else 0
