"""Manifest loading and per-package checks."""

from cargo_workspace_lints.parser.loader import ManifestLoader
from cargo_workspace_lints.parser.validator import PackageValidator

__all__ = [
    "ManifestLoader",
    "PackageValidator",
]
