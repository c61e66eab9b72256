"""Scratchpad - notes and folders persisted as plain files."""

__version__ = "0.1.0"
