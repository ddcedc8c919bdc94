"""Folio: portfolio site and markdown blog backend."""

__version__ = "0.1.0"
