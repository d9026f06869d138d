"""Localized copy for the migration status messages."""

from .loader import load_catalog, parse_catalog, DEFAULT_CONTENT_PATH

__all__ = ['load_catalog', 'parse_catalog', 'DEFAULT_CONTENT_PATH']
