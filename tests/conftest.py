"""Shared test fixtures for cargo-workspace-lints."""

from __future__ import annotations

from pathlib import Path

import pytest

from cargo_workspace_lints.models.errors import MetadataRetrievalError
from cargo_workspace_lints.models.workspace import Package, WorkspaceMetadata
from cargo_workspace_lints.parser.loader import ManifestLoader
from cargo_workspace_lints.parser.validator import PackageValidator
from cargo_workspace_lints.service.metadata import MetadataSource

FIXTURES_DIR = Path(__file__).parent / "fixtures"
PASSING_WORKSPACE = FIXTURES_DIR / "passing-workspace"
FAILING_WORKSPACE = FIXTURES_DIR / "failing-workspace"
MIXED_WORKSPACE = FIXTURES_DIR / "mixed-workspace"


PASSING_MANIFEST = """\
[package]
name = "good"
version = "0.1.0"
edition = "2021"

[lints]
workspace = true
"""

NO_LINTS_MANIFEST = """\
[package]
name = "no-lints"
version = "0.1.0"
edition = "2021"

[dependencies]
serde = "1"
"""

LINTS_WITHOUT_WORKSPACE_MANIFEST = """\
[package]
name = "own-lints"
version = "0.1.0"
edition = "2021"

[lints.rust]
unsafe_code = "forbid"
"""

WORKSPACE_FALSE_MANIFEST = """\
[package]
name = "opted-out"
version = "0.1.0"
edition = "2021"

[lints]
workspace = false
"""


class FakeMetadataSource(MetadataSource):
    """Canned metadata in place of running ``cargo metadata``."""

    def __init__(self, metadata: WorkspaceMetadata | None = None, error: str | None = None) -> None:
        self.metadata = metadata or WorkspaceMetadata()
        self.error = error
        self.calls = 0

    def fetch(self) -> WorkspaceMetadata:
        self.calls += 1
        if self.error is not None:
            raise MetadataRetrievalError(self.error)
        return self.metadata


def package_id(path: Path, name: str) -> str:
    """Package id in the format recent cargo versions use for path packages."""
    return f"path+file://{path}#{name}@0.1.0"


def make_workspace(
    root: Path,
    manifests: dict[str, str],
    external: dict[str, str] | None = None,
) -> WorkspaceMetadata:
    """Write one ``<name>/Cargo.toml`` per entry and describe them as metadata.

    Packages from *manifests* are workspace members; packages from *external*
    are part of the graph but not of the workspace.
    """
    packages: list[Package] = []
    members: list[str] = []
    for group, is_member in ((manifests, True), (external or {}, False)):
        for name, content in group.items():
            crate_dir = root / name
            crate_dir.mkdir(parents=True, exist_ok=True)
            manifest_path = crate_dir / "Cargo.toml"
            manifest_path.write_text(content, encoding="utf-8")
            pkg = Package(id=package_id(crate_dir, name), name=name, manifest_path=manifest_path)
            packages.append(pkg)
            if is_member:
                members.append(pkg.id)
    return WorkspaceMetadata(packages=packages, workspace_members=members)


@pytest.fixture
def loader() -> ManifestLoader:
    return ManifestLoader()


@pytest.fixture
def validator() -> PackageValidator:
    return PackageValidator()


@pytest.fixture
def package(tmp_path: Path) -> Package:
    return Package(
        id=package_id(tmp_path / "test-crate", "test-crate"),
        name="test-crate",
        manifest_path=tmp_path / "test-crate" / "Cargo.toml",
    )
