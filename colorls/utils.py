"""
Text measurement helpers for colorls.
"""
import shutil
import unicodedata

DEFAULT_TERMINAL_SIZE = (80, 24)


def cell_width(ch):
    """Return terminal cell width for a single character."""
    if not ch:
        return 0
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in ('W', 'F'):
        return 2
    return 1


def printable(text):
    """Return *text* safe to write as UTF-8; undecodable bytes become \\xNN escapes."""
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", "backslashreplace").decode("utf-8")
    return raw.decode("utf-8", "backslashreplace")


def display_width(text):
    """Return how many terminal cells *text* occupies once made printable."""
    return sum(cell_width(ch) for ch in printable(text))


def terminal_width():
    """Return the current terminal width in columns."""
    return shutil.get_terminal_size(DEFAULT_TERMINAL_SIZE).columns
