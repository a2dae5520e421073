"""Tests for prowl._cli — argument parsing and command dispatch."""

from __future__ import annotations

from pathlib import Path

import pytest

from prowl._cli import _build_parser, main


class TestBuildParser:
    """_build_parser — CLI argument parsing."""

    def test_generate_default_args(self) -> None:
        args = _build_parser().parse_args(["generate"])
        assert args.command == "generate"
        assert args.root == "."
        assert args.pages_dir is None
        assert args.out_file is None
        assert args.extension is None
        assert args.force is False

    def test_generate_all_flags(self) -> None:
        args = _build_parser().parse_args([
            "generate", "my-app/",
            "--pages-dir", "app/pages",
            "--out-file", "gen/routes.ts",
            "--extension", ".tsx",
            "--force",
        ])
        assert args.root == "my-app/"
        assert args.pages_dir == "app/pages"
        assert args.out_file == "gen/routes.ts"
        assert args.extension == ".tsx"
        assert args.force is True

    def test_watch_default_args(self) -> None:
        args = _build_parser().parse_args(["watch"])
        assert args.command == "watch"
        assert args.root == "."

    def test_routes_default_args(self) -> None:
        args = _build_parser().parse_args(["routes", "my-app/"])
        assert args.command == "routes"
        assert args.root == "my-app/"

    def test_no_command_returns_none(self) -> None:
        assert _build_parser().parse_args([]).command is None


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------


class TestMain:

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "usage: prowl" in capsys.readouterr().out

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "prowl 0.1.0" in capsys.readouterr().out

    def test_generate(self, tmp_project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["generate", str(tmp_project)])
        assert (tmp_project / "src" / "router" / "route.gen.ts").is_file()
        assert "Wrote src/router/route.gen.ts (5 routes)" in capsys.readouterr().err

    def test_generate_up_to_date(
        self, tmp_project: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        main(["generate", str(tmp_project)])
        main(["generate", str(tmp_project)])
        assert "is up to date" in capsys.readouterr().err

    def test_generate_out_file_override(self, tmp_project: Path) -> None:
        main(["generate", str(tmp_project), "--out-file", "gen/routes.ts"])
        assert (tmp_project / "gen" / "routes.ts").is_file()

    def test_missing_pages_exits_1(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", str(tmp_path)])
        assert exc_info.value.code == 1
        assert "Error: Pages directory not found" in capsys.readouterr().err

    def test_routes_table(self, tmp_project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", str(tmp_project)])
        out = capsys.readouterr().out
        lines = out.splitlines()
        assert lines[0].split() == ["NAME", "PATH", "PARAMS"]
        assert any(line.split() == ["users-id", "/users/:id", "id"] for line in lines)
        assert any(line.split() == ["index", "/"] for line in lines)
        assert not (tmp_project / "src" / "router" / "route.gen.ts").exists()

    def test_routes_empty(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "src" / "pages").mkdir(parents=True)
        main(["routes", str(tmp_path)])
        assert "No routes found." in capsys.readouterr().out
