"""Load ProwlConfig from prowl.yaml or prowl.toml if present.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from prowl._errors import ConfigError
from prowl.config import ProwlConfig

CONFIG_FILE_NAMES: tuple[str, ...] = ("prowl.yaml", "prowl.yml", "prowl.toml")

_KNOWN_KEYS: frozenset[str] = frozenset({
    "pages_dir",
    "out_file",
    "extension",
    "excluded_dirs",
    "cache_file",
})


def load_config(root: Path, **overrides: object) -> ProwlConfig:
    """Load ProwlConfig from root, optionally merging prowl.yaml.

    Looks for prowl.yaml, prowl.yml, or prowl.toml in root. If found, loads
    and merges with overrides. Overrides take precedence; ``None`` values
    mean "not given" and never shadow the file.

    Raises:
        ConfigError: If the config file cannot be parsed or names unknown keys.

    """
    file_config = _read_prowl_config(root)
    given = {k: v for k, v in overrides.items() if v is not None}
    merged = {**file_config, **given}
    unknown = sorted(set(merged) - _KNOWN_KEYS)
    if unknown:
        msg = f"Unknown prowl config keys: {', '.join(unknown)}"
        raise ConfigError(msg)
    if "excluded_dirs" in merged:
        merged["excluded_dirs"] = _normalize_excluded(merged["excluded_dirs"])
    return ProwlConfig(root=Path(root), **merged)  # type: ignore[arg-type]


def _read_prowl_config(root: Path) -> dict[str, object]:
    """Read prowl config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("prowl.yaml", "prowl.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "prowl.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    """Parse YAML config."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        msg = f"Invalid config file {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"Invalid config file {path}: expected a mapping at top level"
        raise ConfigError(msg)
    return _flatten_prowl_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    """Parse TOML config."""
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid config file {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_prowl_section(data)


def _flatten_prowl_section(data: dict[str, object]) -> dict[str, object]:
    """Extract prowl.* keys into top-level config."""
    result: dict[str, object] = {}
    prowl = data.get("prowl")
    if isinstance(prowl, dict):
        for k, v in prowl.items():
            result[k] = v
    for k, v in data.items():
        if k != "prowl" and k in _KNOWN_KEYS:
            result[k] = v
    return result


def _normalize_excluded(value: object) -> frozenset[str]:
    if isinstance(value, str):
        return frozenset(part.strip() for part in value.split(",") if part.strip())
    if isinstance(value, (list, tuple, set, frozenset)):
        return frozenset(str(part) for part in value)
    msg = f"excluded_dirs must be a list of directory names, got {type(value).__name__}"
    raise ConfigError(msg)
