"""Tests for prowl.export.cache — fingerprint cache."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

import pytest

from prowl.export.cache import (
    EMPTY_FINGERPRINT,
    FileCache,
    file_hash,
    fingerprint_pages,
    load_cache,
    save_cache,
)
from prowl.pages.scanner import scan_pages


class TestFingerprint:

    def test_file_hash_includes_size(self, tmp_path: Path) -> None:
        path = tmp_path / "a.vue"
        path.write_text("12345")
        assert file_hash(path).endswith("-5")

    def test_relative_posix_keys(self, pages_dir: Path) -> None:
        fingerprint = json.loads(fingerprint_pages(pages_dir, scan_pages(pages_dir)))
        assert "users/$id.vue" in fingerprint
        assert "index.vue" in fingerprint

    def test_stable(self, pages_dir: Path) -> None:
        files = scan_pages(pages_dir)
        assert fingerprint_pages(pages_dir, files) == fingerprint_pages(pages_dir, files)

    def test_changes_with_content(self, pages_dir: Path) -> None:
        files = scan_pages(pages_dir)
        before = fingerprint_pages(pages_dir, files)
        page = pages_dir / "about.vue"
        page.write_text(page.read_text() + "<!-- edited -->\n")
        os.utime(page, ns=(0, 1_000_000_000))
        assert fingerprint_pages(pages_dir, files) != before

    def test_empty(self, tmp_path: Path) -> None:
        assert fingerprint_pages(tmp_path, ()) == EMPTY_FINGERPRINT


class TestLoadSave:

    def test_missing_is_empty(self, tmp_path: Path) -> None:
        assert load_cache(tmp_path / "none.json") == FileCache()

    def test_round_trip_format(self, tmp_path: Path) -> None:
        path = tmp_path / "node_modules" / ".cache" / "route-gen.json"
        save_cache(path, FileCache(files='{"a.vue": "1-2"}', last_routes_hash="h"))
        raw = json.loads(path.read_text())
        assert raw == {"files": '{"a.vue": "1-2"}', "lastRoutesHash": "h"}
        assert load_cache(path) == FileCache(files='{"a.vue": "1-2"}', last_routes_hash="h")

    def test_corrupt_is_empty(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = tmp_path / "cache.json"
        path.write_text("{not json")
        with caplog.at_level(logging.WARNING, logger="prowl.cache"):
            assert load_cache(path) == FileCache()
        assert "unreadable cache" in caplog.text

    def test_malformed_is_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "cache.json"
        path.write_text('{"files": 3}')
        assert load_cache(path) == FileCache()
