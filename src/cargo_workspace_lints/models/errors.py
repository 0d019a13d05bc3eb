"""Error types for a workspace check.

Infrastructure failures (I/O, ``cargo metadata``, TOML parsing) abort the run
as soon as they happen. Packages that fail the lint check are collected and
raised together as a single :class:`FailingPackagesError`.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel

from cargo_workspace_lints.models.outcome import FailureReason


class ErrorKind(StrEnum):
    IO = "io"
    METADATA = "metadata"
    PARSE = "parse"
    FAILING_PACKAGES = "failing_packages"


class PackageValidationError(BaseModel):
    """A workspace member that failed the check."""

    package_id: str
    package_name: str
    manifest_path: Path
    reason: FailureReason

    def __str__(self) -> str:
        return f"Package {self.package_id}:\n     {self.reason}\n"


class WorkspaceValidationError(Exception):
    """Base class for every way a workspace check can fail."""

    kind: ErrorKind


class ManifestIOError(WorkspaceValidationError):
    """A ``Cargo.toml`` could not be read from disk as UTF-8 text."""

    kind = ErrorKind.IO

    def __init__(self, path: Path, cause: OSError | UnicodeDecodeError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Disk I/O Error reading `Cargo.toml` files:\n    {path}: {cause}\n")


class MetadataRetrievalError(WorkspaceValidationError):
    """``cargo metadata`` could not be run or its output was unusable."""

    kind = ErrorKind.METADATA

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Error reading Cargo manifest data:\n    {detail}\n")


class ManifestParseError(WorkspaceValidationError):
    """A ``Cargo.toml`` is not well-formed TOML."""

    kind = ErrorKind.PARSE

    def __init__(self, filename: str, detail: str) -> None:
        self.filename = filename
        self.detail = detail
        super().__init__(f"Error parsing `Cargo.toml` files as TOML:\n    {filename}: {detail}\n")


class FailingPackagesError(WorkspaceValidationError):
    """All manifests were read, but some packages failed the check."""

    kind = ErrorKind.FAILING_PACKAGES

    def __init__(self, failures: list[PackageValidationError]) -> None:
        self.failures = failures
        lines = ["Failing packages:"]
        lines.extend(f"* {failure}" for failure in failures)
        super().__init__("\n".join(lines))
