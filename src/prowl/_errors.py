"""Prowl error hierarchy.

All prowl-specific errors inherit from ProwlError for easy catching.
"""

from pathlib import Path


class ProwlError(Exception):
    """Base error for all prowl operations."""


class ConfigError(ProwlError):
    """Invalid or missing configuration."""


class RouteConflictError(ConfigError):
    """A page declares its route through two mutually exclusive mechanisms.

    Attributes:
        path: The offending page file.
        mechanisms: Names of the conflicting mechanisms, in source order.

    """

    def __init__(self, path: Path, mechanisms: tuple[str, ...]) -> None:
        self.path = path
        self.mechanisms = mechanisms
        joined = " and ".join(mechanisms)
        super().__init__(
            f"Error in {path}: cannot use both {joined}. "
            "Declare the route override with exactly one of them."
        )


class PagesNotFoundError(ProwlError):
    """The pages root directory does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Pages directory not found: {path}")


class DescriptorError(ProwlError):
    """A descriptor block in a page file could not be parsed."""
