"""Prowl CLI — prowl generate / prowl watch / prowl routes.

Entry point for the ``prowl`` command-line interface.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prowl.config import ProwlConfig
    from prowl.routes.types import RouteData


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("root", nargs="?", default=".", help="Project root directory")
    parser.add_argument("--pages-dir", default=None, help="Pages directory (relative to root)")
    parser.add_argument("--out-file", default=None, help="Generated module (relative to root)")
    parser.add_argument("--extension", default=None, help="Page file extension")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the prowl CLI."""
    parser = argparse.ArgumentParser(
        prog="prowl",
        description="Typed route tables from a directory of page components.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # prowl generate
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate the route module once",
    )
    _add_common_arguments(generate_parser)
    generate_parser.add_argument(
        "--force", action="store_true", help="Regenerate even if no page changed",
    )

    # prowl watch
    watch_parser = subparsers.add_parser(
        "watch",
        help="Regenerate the route module on every page change",
    )
    _add_common_arguments(watch_parser)

    # prowl routes
    routes_parser = subparsers.add_parser(
        "routes",
        help="Print the resolved route table",
    )
    _add_common_arguments(routes_parser)

    return parser


def _get_version() -> str:
    """Get the package version."""
    from prowl import __version__

    return __version__


def _overrides(args: argparse.Namespace) -> dict[str, object]:
    return {
        "pages_dir": args.pages_dir,
        "out_file": args.out_file,
        "extension": args.extension,
    }


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from prowl._errors import ProwlError
    from prowl.config_loader import load_config
    from prowl.generator import generate, watch

    overrides = _overrides(args)
    try:
        config = load_config(Path(args.root), **overrides)
        if args.command == "generate":
            result = generate(config, force=args.force)
            _print_generate_summary(config, result.written, result.skipped, result.data)
        elif args.command == "watch":
            watch(config, overrides=overrides)
        elif args.command == "routes":
            from prowl.routes.builder import build_routes

            data = build_routes(
                config.pages_path,
                config.out_path,
                excluded_dirs=config.excluded_dirs,
                extension=config.extension,
            )
            _print_routes(data)
    except ProwlError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


def _print_generate_summary(
    config: ProwlConfig,
    written: bool,
    skipped: str | None,
    data: RouteData | None,
) -> None:
    if skipped is not None or data is None:
        print(f"Pages unchanged, {config.out_file} is up to date.", file=sys.stderr)
        return
    count = len(data.route_name_list)
    noun = "route" if count == 1 else "routes"
    status = "Wrote" if written else "Unchanged"
    print(f"{status} {config.out_file} ({count} {noun})", file=sys.stderr)


def _print_routes(data: RouteData) -> None:
    """Print a NAME / PATH / PARAMS table of the canonical entries."""
    if not data.route_name_list:
        print("No routes found.")
        return

    params_by_name = dict(data.route_params_by_name)
    rows = [
        (name, path, ", ".join(params_by_name.get(name, ())))
        for name, path in data.route_path_by_name
    ]

    max_name = max(max(len(r[0]) for r in rows), 4)  # "NAME" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_name}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("NAME", "PATH", "PARAMS"))
    sep_len = max_name + max_path + 4 + max((len(r[2]) for r in rows), default=0)
    print("-" * min(sep_len, 80))
    for name, path, params in rows:
        print(fmt.format(name, path, params).rstrip())


if __name__ == "__main__":
    main()
