"""Workspace shape as reported by ``cargo metadata``."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class Package(BaseModel):
    """A package from the dependency graph.

    Only the fields the check needs are kept; the rest of the
    ``cargo metadata`` package object is ignored.
    """

    id: str
    name: str
    manifest_path: Path

    model_config = {"frozen": True}


class WorkspaceMetadata(BaseModel):
    """Packages in the graph plus the ids that belong to the workspace."""

    packages: list[Package] = []
    workspace_members: list[str] = []

    def members(self) -> list[Package]:
        """Workspace member packages, in metadata order."""
        member_ids = set(self.workspace_members)
        return [pkg for pkg in self.packages if pkg.id in member_ids]
