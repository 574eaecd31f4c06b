"""
Column layout engine.

Entries fill down each column before moving right (``ls -C`` order). The
engine tries the widest packing first and drops one column at a time until
the row fits the terminal, settling on a single column when nothing does.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from ..utils import display_width

LOGGER = logging.getLogger(__name__)

# Cells each column adds on top of its widest name: glyph, two spaces,
# the directory marker or two spaces, and one separating space.
GUTTER = 6
PADDING = ""


@dataclass(frozen=True)
class Grid:
    """Rows of equal length; unused slots hold the ``PADDING`` sentinel."""

    rows: tuple[tuple[str, ...], ...] = ()
    column_widths: tuple[int, ...] = ()

    @property
    def column_count(self) -> int:
        return len(self.column_widths)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def required_width(self) -> int:
        return sum(self.column_widths) + GUTTER * self.column_count

    def fits(self, terminal_width: int) -> bool:
        return self.required_width() <= terminal_width

    def names(self):
        """Yield every real entry in row order."""
        for row in self.rows:
            for cell in row:
                if cell == PADDING:
                    break
                yield cell


def arrange(names: Sequence[str], column_count: int) -> Grid:
    """Place *names* into *column_count* columns, filling column by column."""
    if not names:
        return Grid()
    if column_count < 1:
        raise ValueError("column_count must be at least 1")

    total = len(names)
    row_count = math.ceil(total / column_count)
    rows = []
    for r in range(row_count):
        row = []
        for c in range(column_count):
            index = c * row_count + r
            row.append(names[index] if index < total else PADDING)
        rows.append(tuple(row))

    widths = tuple(
        max(display_width(row[c]) for row in rows)
        for c in range(column_count)
    )
    return Grid(rows=tuple(rows), column_widths=widths)


def layout(names: Sequence[str], terminal_width: int) -> Grid:
    """Return the packing with the most columns that fits *terminal_width*."""
    names = list(names)
    if not names:
        return Grid()

    # Candidates whose gutters alone overflow can never fit.
    columns = max(1, min(len(names), terminal_width // GUTTER))
    while True:
        grid = arrange(names, columns)
        if columns <= 1 or grid.fits(terminal_width):
            break
        columns -= 1

    LOGGER.debug(
        "layout: %d entries -> %d columns x %d rows (needs %d of %d cells)",
        len(names), grid.column_count, grid.row_count, grid.required_width(), terminal_width,
    )
    return grid
