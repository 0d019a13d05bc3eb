"""Workspace-level check: run the package check on every member and aggregate."""

from __future__ import annotations

import logging

from cargo_workspace_lints.models.errors import (
    FailingPackagesError,
    MetadataRetrievalError,
    PackageValidationError,
    WorkspaceValidationError,
)
from cargo_workspace_lints.models.outcome import ValidationOutcome
from cargo_workspace_lints.models.workspace import Package
from cargo_workspace_lints.parser.loader import ManifestLoader
from cargo_workspace_lints.parser.validator import PackageValidator
from cargo_workspace_lints.service.metadata import MetadataSource
from cargo_workspace_lints.service.reporter import Reporter

logger = logging.getLogger("cargo_workspace_lints.workspace")


class WorkspaceValidator:
    """Checks that every workspace member has ``lints.workspace = true``.

    Manifest I/O and parse errors abort the run on the first bad manifest.
    Lint failures never do: every member is checked and all failures are
    reported together.
    """

    def __init__(
        self,
        loader: ManifestLoader | None = None,
        validator: PackageValidator | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self._loader = loader or ManifestLoader()
        self._validator = validator or PackageValidator()
        self._reporter = reporter or Reporter()

    def _check_members(self, source: MetadataSource) -> list[tuple[Package, ValidationOutcome]]:
        try:
            metadata = source.fetch()
        except WorkspaceValidationError:
            raise
        except Exception as exc:
            raise MetadataRetrievalError(f"{type(exc).__name__}: {exc}") from exc
        members = metadata.members()
        logger.debug(
            "checking %d workspace members (%d packages skipped)",
            len(members), len(metadata.packages) - len(members),
        )
        results: list[tuple[Package, ValidationOutcome]] = []
        for package in members:
            manifest = self._loader.load(package.manifest_path)
            outcome = self._validator.validate(package, manifest)
            logger.debug("%s: %s", package.id, "pass" if outcome.passed else outcome.reason)
            self._reporter.package(package, outcome)
            results.append((package, outcome))
        return results

    def check_workspace(self, source: MetadataSource) -> list[ValidationOutcome]:
        """Return the outcome of every member package, in metadata order."""
        return [outcome for _, outcome in self._check_members(source)]

    def validate_workspace(self, source: MetadataSource) -> None:
        """Raise a :class:`WorkspaceValidationError` unless every member passes."""
        failures = [
            PackageValidationError(
                package_id=package.id,
                package_name=package.name,
                manifest_path=package.manifest_path,
                reason=outcome.reason,
            )
            for package, outcome in self._check_members(source)
            if outcome.reason is not None
        ]
        if failures:
            logger.info("%d workspace members failed the check", len(failures))
            raise FailingPackagesError(failures)
        self._reporter.all_pass()


def validate_workspace(source: MetadataSource, verbose: bool = False) -> None:
    """Check *source*'s workspace with the default loader and validator."""
    WorkspaceValidator(reporter=Reporter(enabled=verbose)).validate_workspace(source)
