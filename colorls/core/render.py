"""Render driver: writes a laid-out grid and the optional summary report."""

from __future__ import annotations

from typing import Mapping, TextIO

from ..theme import ColorTag, Theme
from ..utils import display_width, printable
from .layout import PADDING, Grid
from .listing import Entry
from .resolver import CategoryResolver, Counters

DIRECTORY_MARKER = "/ "
FILE_MARKER = "  "
ICON_SEPARATOR = "  "


def render_cell(entry: Entry, width: int, resolver: CategoryResolver, theme: Theme) -> str:
    """Format one grid cell, padded to its column."""
    category = resolver.classify(entry.name, entry.is_directory)
    label = f"{resolver.icon(category)}{ICON_SEPARATOR}{printable(entry.name)}"
    marker = theme.paint(ColorTag.BLUE, DIRECTORY_MARKER) if entry.is_directory else FILE_MARKER
    padding = " " * (width - display_width(entry.name) + 1)
    return theme.paint(category.color, label) + marker + padding


def render(grid: Grid, entries: Mapping[str, Entry], resolver: CategoryResolver, sink: TextIO, theme: Theme):
    """Write every row of *grid*, classifying each entry exactly once."""
    for row in grid.rows:
        sink.write("\n")
        for column, name in enumerate(row):
            if name == PADDING:
                break
            sink.write(render_cell(entries[name], grid.column_widths[column], resolver, theme))
    sink.write("\n")


def render_report(path, counters: Counters, sink: TextIO, theme: Theme):
    """Write the folder/file summary for one listing."""
    white = ColorTag.WHITE
    sink.write(theme.paint(white, f"\n Found {counters.total} contents in directory "))
    sink.write(theme.paint(ColorTag.BLUE, printable(str(path))))
    sink.write(theme.paint(white, f"\n\n\tFolders\t\t\t: {counters.folders}"))
    sink.write(theme.paint(white, f"\n\tRecognized files\t: {counters.recognized_files}"))
    sink.write(theme.paint(white, f"\n\tUnrecognized files\t: {counters.unrecognized_files}"))
    sink.write("\n\n")
