"""TOML manifest loader."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from cargo_workspace_lints.models.errors import ManifestIOError, ManifestParseError

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

_MAX_DOCUMENT_SIZE = 5_000_000  # 5M characters


class ManifestLoader:
    """Reads ``Cargo.toml`` files into plain ``dict`` trees.

    Values are whatever :mod:`tomllib` produces: ``bool``, ``str``, ``int``,
    ``float``, date/time objects, ``dict`` and ``list``.
    """

    @staticmethod
    def _check_size(content: str, filename: str) -> None:
        if len(content) > _MAX_DOCUMENT_SIZE:
            raise ManifestParseError(
                filename,
                f"document exceeds maximum size "
                f"({len(content):,} chars > {_MAX_DOCUMENT_SIZE:,} limit)",
            )

    def load(self, path: Path) -> dict[str, Any]:
        """Load a manifest file from disk."""
        try:
            with path.open("r", encoding="utf-8") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ManifestIOError(path, exc) from exc
        return self.load_string(content, filename=str(path))

    def load_string(self, content: str, filename: str = "<string>") -> dict[str, Any]:
        """Parse manifest text."""
        self._check_size(content, filename)
        try:
            return tomllib.loads(content)
        except tomllib.TOMLDecodeError as exc:
            raise ManifestParseError(filename, str(exc)) from exc
