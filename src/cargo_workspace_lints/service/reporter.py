"""Verbose per-package diagnostics."""

from __future__ import annotations

import sys
from typing import TextIO

from cargo_workspace_lints.models.outcome import FailureKind, ValidationOutcome, format_toml_value
from cargo_workspace_lints.models.workspace import Package


class Reporter:
    """Writes one PASS/FAIL line per package to *stream* (stderr by default).

    A disabled reporter writes nothing.  Reporting never changes an outcome.
    """

    def __init__(self, enabled: bool = False, stream: TextIO | None = None) -> None:
        self.enabled = enabled
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def package(self, package: Package, outcome: ValidationOutcome) -> None:
        if self.enabled:
            print(format_outcome(package, outcome), file=self.stream)

    def all_pass(self) -> None:
        if self.enabled:
            print("All packages pass!", file=self.stream)


def format_outcome(package: Package, outcome: ValidationOutcome) -> str:
    """Diagnostic line for one package."""
    label = f"Package {package.name} ({package.manifest_path})"
    reason = outcome.reason
    if reason is None:
        return f"PASS: {label}"
    if reason.kind is FailureKind.MISSING:
        return f"FAIL: {label} missing `lints.workspace` field"
    return f"FAIL: {label} has `lints.workspace = {format_toml_value(reason.found)}`"
