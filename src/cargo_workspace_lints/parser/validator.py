"""Per-package check: ``lints.workspace`` must be exactly ``true``."""

from __future__ import annotations

from typing import Any

from cargo_workspace_lints.models.outcome import FailureReason, ValidationOutcome
from cargo_workspace_lints.models.workspace import Package

LINTS_WORKSPACE_PATH = ("lints", "workspace")

MISSING = object()


def lookup(tree: dict[str, Any], path: tuple[str, ...]) -> Any:
    """Follow *path* through nested tables.

    Returns the sentinel ``MISSING`` if any step is absent or is not a table.
    """
    node: Any = tree
    for key in path:
        if not isinstance(node, dict) or key not in node:
            return MISSING
        node = node[key]
    return node


class PackageValidator:
    """Classifies a single package from its parsed manifest."""

    def validate(self, package: Package, manifest: dict[str, Any]) -> ValidationOutcome:
        value = lookup(manifest, LINTS_WORKSPACE_PATH)
        if value is MISSING:
            return ValidationOutcome(package_id=package.id, reason=FailureReason.missing())
        # Identity check: ``1 == True`` in Python, but an integer is a wrong value.
        if value is True:
            return ValidationOutcome(package_id=package.id)
        return ValidationOutcome(package_id=package.id, reason=FailureReason.wrong_value(value))
