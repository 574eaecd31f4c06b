"""colorls: colorized, icon-tagged directory listings laid out in columns."""

__version__ = "0.3.0"
