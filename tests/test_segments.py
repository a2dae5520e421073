"""Tests for prowl.routes.segments — segment translation."""

from __future__ import annotations

import pytest

from prowl.routes.segments import (
    classify_segment,
    extract_param_name,
    is_layout,
    join_paths,
    layout_marker_index,
    route_name,
    segment_name,
    segment_params,
    segment_to_path,
    segments_to_path,
)


class TestClassifySegment:
    """classify_segment — priority: composite, index, dynamic, literal."""

    @pytest.mark.parametrize(
        ("segment", "kind"),
        [
            ("users", "literal"),
            ("index", "index"),
            ("$id", "dynamic"),
            ("[id]", "dynamic"),
            ("blog.archive", "composite"),
            ("$a.b", "composite"),
            ("$", "literal"),
            ("[]", "literal"),
        ],
    )
    def test_kinds(self, segment: str, kind: str) -> None:
        assert classify_segment(segment) == kind


class TestExtractParamName:

    def test_dollar(self) -> None:
        assert extract_param_name("$slug") == "slug"

    def test_brackets(self) -> None:
        assert extract_param_name("[slug]") == "slug"

    def test_empty_marker_binds_nothing(self) -> None:
        assert extract_param_name("$") is None
        assert extract_param_name("[]") is None

    def test_literal(self) -> None:
        assert extract_param_name("about") is None


class TestSegmentToPath:

    def test_literal_unchanged(self) -> None:
        assert segment_to_path("about") == "about"

    def test_index_collapses(self) -> None:
        assert segment_to_path("index") == ""

    def test_dynamic(self) -> None:
        assert segment_to_path("$id") == ":id"
        assert segment_to_path("[id]") == ":id"

    def test_composite_splits_on_dots(self) -> None:
        assert segment_to_path("blog.archive") == "blog/archive"

    def test_composite_wins_over_dynamic(self) -> None:
        assert segment_to_path("$a.b") == "$a/b"


# ---------------------------------------------------------------------------
# segments_to_path / join_paths
# ---------------------------------------------------------------------------


class TestSegmentsToPath:

    def test_root_index(self) -> None:
        assert segments_to_path(("index",), leading_slash=True) == "/"

    def test_nested_index(self) -> None:
        assert segments_to_path(("users", "index"), leading_slash=True) == "/users"

    def test_dynamic_nested(self) -> None:
        assert segments_to_path(("users", "$id"), leading_slash=True) == "/users/:id"

    def test_composite(self) -> None:
        assert segments_to_path(("blog.archive",), leading_slash=True) == "/blog/archive"

    def test_empty_with_leading_slash(self) -> None:
        assert segments_to_path((), leading_slash=True) == "/"

    def test_relative_empty(self) -> None:
        assert segments_to_path(("index",), leading_slash=False) == ""

    def test_relative_dynamic(self) -> None:
        assert segments_to_path(("$id",), leading_slash=False) == ":id"

    def test_no_repeated_or_trailing_separator(self) -> None:
        path = segments_to_path(("a", "index", "b", "index"), leading_slash=True)
        assert path == "/a/b"
        assert "//" not in path

    def test_pure(self) -> None:
        segments = ("users", "$id")
        assert segments_to_path(segments, True) == segments_to_path(segments, True)


class TestJoinPaths:

    def test_empty_child(self) -> None:
        assert join_paths("/users", "") == "/users"

    def test_root_parent(self) -> None:
        assert join_paths("/", ":id") == "/:id"

    def test_nested(self) -> None:
        assert join_paths("/users", ":id") == "/users/:id"

    def test_root_parent_empty_child(self) -> None:
        assert join_paths("/", "") == "/"


class TestSegmentParams:

    def test_collects_in_order(self) -> None:
        assert segment_params(("org", "$org", "[repo]")) == ("org", "repo")

    def test_none(self) -> None:
        assert segment_params(("about",)) == ()

    def test_composite_binds_nothing(self) -> None:
        assert segment_params(("$a.b",)) == ()


# ---------------------------------------------------------------------------
# Layout markers
# ---------------------------------------------------------------------------


class TestLayoutMarker:

    def test_layout_file(self) -> None:
        assert layout_marker_index(("users", "layout")) == 1

    def test_layout_index_file(self) -> None:
        assert layout_marker_index(("admin", "layout", "index")) == 1

    def test_root_layout(self) -> None:
        assert layout_marker_index(("layout",)) == 0

    def test_not_layout(self) -> None:
        assert layout_marker_index(("users", "index")) is None
        assert not is_layout(("layouts",))
        assert not is_layout(())

    def test_layout_directory_page_is_not_layout(self) -> None:
        assert not is_layout(("layout", "settings"))


class TestRouteName:

    def test_dynamic_marker_stripped(self) -> None:
        assert segment_name("$id") == "id"
        assert segment_name("[id]") == "id"

    def test_literal_and_composite_kept(self) -> None:
        assert segment_name("about") == "about"
        assert segment_name("blog.archive") == "blog.archive"

    def test_joined_with_dashes(self) -> None:
        assert route_name(("users", "$id")) == "users-id"
        assert route_name(("users", "index")) == "users-index"
        assert route_name(("index",)) == "index"
