import io
import unittest

from _support import make_tables

from colorls.core.errors import LookupIntegrityError
from colorls.core.layout import arrange, layout
from colorls.core.listing import Entry
from colorls.core.render import render, render_cell, render_report
from colorls.core.resolver import CategoryResolver, Counters
from colorls.theme import get_theme

MONO = get_theme("mono")
COLOR = get_theme("default")


def _entries(*items):
    return {name: Entry(name, is_dir) for name, is_dir in items}


class RenderCellTests(unittest.TestCase):
    def test_file_cell_pads_to_column(self):
        resolver = CategoryResolver(make_tables())
        cell = render_cell(Entry("a.md", False), 6, resolver, MONO)
        self.assertEqual(cell, "M  a.md" + "  " + " " * 3)

    def test_directory_cell_has_marker(self):
        resolver = CategoryResolver(make_tables())
        cell = render_cell(Entry("src", True), 3, resolver, MONO)
        self.assertEqual(cell, "S  src/  ")

    def test_colored_cell(self):
        resolver = CategoryResolver(make_tables())
        cell = render_cell(Entry("src", True), 3, resolver, COLOR)
        self.assertEqual(cell, "\x1b[34mS  src\x1b[0m\x1b[34m/ \x1b[0m ")
        cell = render_cell(Entry("Makefile", False), 8, resolver, COLOR)
        self.assertEqual(cell, "\x1b[33mF  Makefile\x1b[0m   ")

    def test_cell_width_matches_gutter(self):
        resolver = CategoryResolver(make_tables())
        for entry in (Entry("x.py", False), Entry("src", True)):
            cell = render_cell(entry, 10, resolver, MONO)
            self.assertEqual(len(cell), 10 + 6)


class RenderTests(unittest.TestCase):
    def test_rows_and_trailing_newline(self):
        entries = _entries(("src", True), ("a.md", False), ("Makefile", False))
        resolver = CategoryResolver(make_tables())
        sink = io.StringIO()
        render(arrange(list(entries), 2), entries, resolver, sink, MONO)
        self.assertEqual(
            sink.getvalue(),
            "\nS  src/   F  Makefile   "
            "\nM  a.md   "
            "\n",
        )
        self.assertEqual(resolver.counters, Counters(folders=1, recognized_files=1, unrecognized_files=1))

    def test_padding_cells_are_not_classified(self):
        entries = _entries(*[(f"f{i}.rs", False) for i in range(5)])
        resolver = CategoryResolver(make_tables())
        render(arrange(list(entries), 4), entries, resolver, io.StringIO(), MONO)
        self.assertEqual(resolver.counters.total, 5)

    def test_empty_grid_writes_only_newline(self):
        resolver = CategoryResolver(make_tables())
        sink = io.StringIO()
        render(layout([], 80), {}, resolver, sink, MONO)
        self.assertEqual(sink.getvalue(), "\n")
        self.assertEqual(resolver.counters.total, 0)

    def test_concrete_narrow_listing(self):
        entries = _entries(("src", True), ("README.md", False), ("main.rs", False), ("Makefile", False))
        resolver = CategoryResolver(make_tables())
        sink = io.StringIO()
        grid = layout(list(entries), 20)
        render(grid, entries, resolver, sink, MONO)
        self.assertEqual(grid.column_count, 1)
        self.assertEqual(sink.getvalue().count("\n"), 5)
        counters = resolver.counters
        self.assertEqual(counters.folders, 1)
        self.assertEqual(counters.recognized_files, 2)
        self.assertEqual(counters.unrecognized_files, 1)
        self.assertEqual(counters.total, 4)

    def test_integrity_error_propagates(self):
        entries = _entries(("a.rar", False))
        resolver = CategoryResolver(make_tables(file_aliases={"rar": "archive"}))
        with self.assertRaises(LookupIntegrityError):
            render(layout(list(entries), 80), entries, resolver, io.StringIO(), MONO)


class RenderReportTests(unittest.TestCase):
    def test_report_text(self):
        sink = io.StringIO()
        render_report("/tmp/x", Counters(folders=1, recognized_files=2, unrecognized_files=3), sink, MONO)
        self.assertEqual(
            sink.getvalue(),
            "\n Found 6 contents in directory /tmp/x"
            "\n\n\tFolders\t\t\t: 1"
            "\n\tRecognized files\t: 2"
            "\n\tUnrecognized files\t: 3"
            "\n\n",
        )

    def test_empty_report(self):
        sink = io.StringIO()
        render_report(".", Counters(), sink, MONO)
        self.assertIn("Found 0 contents", sink.getvalue())
        self.assertIn("Unrecognized files\t: 0", sink.getvalue())

    def test_report_colors_path_blue(self):
        sink = io.StringIO()
        render_report("/p", Counters(), sink, COLOR)
        self.assertIn("\x1b[34m/p\x1b[0m", sink.getvalue())


if __name__ == "__main__":
    unittest.main()
