"""Exception types raised by the colorls pipeline."""


class ColorLSError(Exception):
    """Base class for every error colorls reports to the user."""


class LookupIntegrityError(ColorLSError, LookupError):
    """An alias or display key does not resolve inside its primary table."""

    def __init__(self, table, key, alias=None):
        self.table = table
        self.key = key
        self.alias = alias
        if alias is not None:
            message = f"alias {alias!r} in {table} points to missing key {key!r}"
        else:
            message = f"key {key!r} is missing from {table}"
        super().__init__(message)


class FilesystemError(ColorLSError):
    """A path could not be listed as a directory."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot list {path}: {reason}")


class DataLoadError(ColorLSError):
    """A lookup table resource is missing or malformed."""
