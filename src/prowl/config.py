"""Prowl configuration.

ProwlConfig is the central configuration object, frozen after creation.
"""

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_EXCLUDED_DIRS: frozenset[str] = frozenset({
    "components",
    "constants",
    "hooks",
    "services",
    "types",
    "utils",
})


@dataclass(frozen=True, slots=True)
class ProwlConfig:
    """Configuration for a route generation run.

    Attributes:
        root: Project root directory. Always resolved to an absolute path on
              construction.
        pages_dir: Directory containing page files, relative to *root*.
        out_file: Generated module path, relative to *root*.
        extension: File extension recognised as a page file.
        excluded_dirs: Directory names skipped at any depth while scanning.
        cache_file: Fingerprint cache location, relative to *root*.

    """

    root: Path = field(default_factory=Path.cwd)
    pages_dir: str = "src/pages"
    out_file: str = "src/router/route.gen.ts"
    extension: str = ".vue"
    excluded_dirs: frozenset[str] = DEFAULT_EXCLUDED_DIRS
    cache_file: str = "node_modules/.cache/route-gen.json"

    def __post_init__(self) -> None:
        # Resolve root to absolute so that watchfiles (which returns
        # absolute paths) can be compared via Path.relative_to().
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())
        if not isinstance(self.excluded_dirs, frozenset):
            object.__setattr__(self, "excluded_dirs", frozenset(self.excluded_dirs))
        if self.extension and not self.extension.startswith("."):
            object.__setattr__(self, "extension", "." + self.extension)

    @property
    def pages_path(self) -> Path:
        """Absolute path to the pages directory."""
        return self.root / self.pages_dir

    @property
    def out_path(self) -> Path:
        """Absolute path to the generated module."""
        return self.root / self.out_file

    @property
    def cache_path(self) -> Path:
        """Absolute path to the fingerprint cache file."""
        return self.root / self.cache_file
