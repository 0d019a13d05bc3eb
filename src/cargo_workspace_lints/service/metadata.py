"""Workspace discovery through ``cargo metadata``."""

from __future__ import annotations

import json
import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import ValidationError

from cargo_workspace_lints.models.errors import MetadataRetrievalError
from cargo_workspace_lints.models.workspace import WorkspaceMetadata
from cargo_workspace_lints.settings import Settings

logger = logging.getLogger("cargo_workspace_lints.metadata")


class MetadataSource(ABC):
    """Provides the package graph and the workspace member ids."""

    @abstractmethod
    def fetch(self) -> WorkspaceMetadata:
        """Return workspace metadata.

        Implementations report failures as :class:`MetadataRetrievalError`;
        :class:`WorkspaceValidator` wraps anything else it receives.
        """


class CargoMetadataCommand(MetadataSource):
    """Runs ``cargo metadata --format-version 1`` and parses its JSON output."""

    def __init__(
        self,
        manifest_path: Path | None = None,
        cargo_path: Path | str | None = None,
        filter_platform: str | None = None,
        verbose: bool = False,
        no_deps: bool = True,
        settings: Settings | None = None,
    ) -> None:
        if cargo_path is None:
            cargo_path = (settings or Settings()).cargo_executable
        self.manifest_path = manifest_path
        self.cargo_path = str(cargo_path)
        self.filter_platform = filter_platform
        self.verbose = verbose
        self.no_deps = no_deps

    def command(self) -> list[str]:
        """The argv that :meth:`fetch` will run."""
        cmd = [self.cargo_path, "metadata", "--format-version", "1"]
        if self.no_deps:
            cmd.append("--no-deps")
        if self.manifest_path is not None:
            cmd.extend(["--manifest-path", str(self.manifest_path)])
        if self.filter_platform is not None:
            cmd.extend(["--filter-platform", self.filter_platform])
        return cmd

    def fetch(self) -> WorkspaceMetadata:
        cmd = self.command()
        logger.debug("running %s", " ".join(cmd))
        try:
            # In verbose mode cargo's own diagnostics go straight to our stderr.
            proc = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=None if self.verbose else subprocess.PIPE,
                check=False,
            )
        except OSError as exc:
            raise MetadataRetrievalError(f"failed to start `{self.cargo_path}`: {exc}") from exc

        if proc.returncode != 0:
            detail = f"`{' '.join(cmd)}` exited with status {proc.returncode}"
            if proc.stderr:
                detail += "\n" + proc.stderr.decode("utf-8", errors="replace").rstrip()
            raise MetadataRetrievalError(detail)

        # Cargo writes UTF-8 whatever the locale says.
        try:
            stdout = proc.stdout.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MetadataRetrievalError(f"cargo metadata output is not UTF-8: {exc}") from exc
        try:
            payload = json.loads(stdout)
        except json.JSONDecodeError as exc:
            raise MetadataRetrievalError(f"invalid JSON from cargo metadata: {exc}") from exc
        return parse_metadata(payload)


def parse_metadata(payload: object) -> WorkspaceMetadata:
    """Validate a decoded ``cargo metadata`` document."""
    try:
        metadata = WorkspaceMetadata.model_validate(payload)
    except ValidationError as exc:
        raise MetadataRetrievalError(f"unexpected cargo metadata format: {exc}") from exc
    logger.debug(
        "metadata lists %d packages, %d workspace members",
        len(metadata.packages), len(metadata.workspace_members),
    )
    return metadata
