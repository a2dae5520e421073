"""Prowl — typed route tables from a directory of page components.

Scans a pages directory, resolves nested layouts, reads per-page route
declarations, and writes a TypeScript module with the route table and
name/path/parameter types.

Quick start::

    import prowl

    prowl.generate(prowl.load_config("my-app/"))

Two modes::

    prowl.generate(config)    # One run, skipped when nothing changed
    prowl.watch(config)       # Regenerate on every page or config change

Inspect the table without writing anything::

    from prowl import build_routes

    data = build_routes(Path("src/pages"), Path("src/router/route.gen.ts"))
    data.path_for("users-id")

"""

__version__ = "0.1.0"
__all__ = [
    "ProwlConfig",
    "ProwlError",
    "__version__",
    "build_routes",
    "generate",
    "load_config",
    "watch",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import prowl`` fast while providing a clean top-level API.
    """
    if name == "ProwlConfig":
        from prowl.config import ProwlConfig

        return ProwlConfig

    if name == "ProwlError":
        from prowl._errors import ProwlError

        return ProwlError

    if name == "load_config":
        from prowl.config_loader import load_config

        return load_config

    if name == "build_routes":
        from prowl.routes.builder import build_routes

        return build_routes

    if name == "generate":
        from prowl.generator import generate

        return generate

    if name == "watch":
        from prowl.generator import watch

        return watch

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
