"""Export — generated module rendering and change-detection cache."""

from prowl.export.cache import FileCache, fingerprint_pages, load_cache, save_cache
from prowl.export.typescript import render_routes_module, value_to_literal_type

__all__ = [
    "FileCache",
    "fingerprint_pages",
    "load_cache",
    "render_routes_module",
    "save_cache",
    "value_to_literal_type",
]
