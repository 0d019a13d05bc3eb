"""Pydantic domain models for cargo-workspace-lints."""

from cargo_workspace_lints.models.errors import (
    ErrorKind,
    FailingPackagesError,
    ManifestIOError,
    ManifestParseError,
    MetadataRetrievalError,
    PackageValidationError,
    WorkspaceValidationError,
)
from cargo_workspace_lints.models.outcome import FailureKind, FailureReason, ValidationOutcome
from cargo_workspace_lints.models.workspace import Package, WorkspaceMetadata

__all__ = [
    "ErrorKind",
    "FailingPackagesError",
    "FailureKind",
    "FailureReason",
    "ManifestIOError",
    "ManifestParseError",
    "MetadataRetrievalError",
    "Package",
    "PackageValidationError",
    "ValidationOutcome",
    "WorkspaceMetadata",
    "WorkspaceValidationError",
]
