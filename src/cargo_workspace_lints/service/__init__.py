"""Workspace discovery, orchestration and reporting."""

from cargo_workspace_lints.service.metadata import CargoMetadataCommand, MetadataSource
from cargo_workspace_lints.service.reporter import Reporter
from cargo_workspace_lints.service.workspace import WorkspaceValidator, validate_workspace

__all__ = [
    "CargoMetadataCommand",
    "MetadataSource",
    "Reporter",
    "WorkspaceValidator",
    "validate_workspace",
]
