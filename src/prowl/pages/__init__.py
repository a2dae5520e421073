"""Page layer — the filesystem side of route generation.

Scans the pages directory, extracts route declarations from page files,
and watches the tree for changes.
"""

from prowl.pages.descriptors import extract_descriptor, parse_block, parse_descriptor
from prowl.pages.scanner import scan_pages
from prowl.pages.watcher import ChangeEvent, PagesWatcher, categorize_change

__all__ = [
    "ChangeEvent",
    "PagesWatcher",
    "categorize_change",
    "extract_descriptor",
    "parse_block",
    "parse_descriptor",
    "scan_pages",
]
