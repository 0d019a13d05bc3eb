"""``cargo workspace-lints`` entry point.

Installed as the ``cargo-workspace-lints`` executable, so cargo runs it for
``cargo workspace-lints`` and passes the subcommand name as the first
argument::

    cargo workspace-lints                       # workspace in the current directory
    cargo workspace-lints path/to/Cargo.toml -v # per-package PASS/FAIL lines
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cargo_workspace_lints import __version__
from cargo_workspace_lints.models.errors import WorkspaceValidationError
from cargo_workspace_lints.service.metadata import CargoMetadataCommand
from cargo_workspace_lints.service.workspace import validate_workspace
from cargo_workspace_lints.settings import Settings

logger = logging.getLogger("cargo_workspace_lints.cli")

_DESCRIPTION = "Check that all packages in a cargo workspace have `lints.workspace = true` set."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cargo", description=_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s workspace-lints {__version__}")
    commands = parser.add_subparsers(dest="command", required=True)

    lints = commands.add_parser("workspace-lints", help=_DESCRIPTION, description=_DESCRIPTION)
    lints.add_argument(
        "manifest_path", nargs="?", type=Path,
        help="Path to the workspace Cargo.toml (or its directory). "
             "Defaults to the current working directory.",
    )
    lints.add_argument(
        "--cargo-path", type=Path,
        help="The cargo executable to run. Defaults to $CARGO, then `cargo` on $PATH.",
    )
    lints.add_argument(
        "--filter-platform", metavar="TRIPLE",
        help="Only consider dependencies for the given target triple.",
    )
    lints.add_argument("-v", "--verbose", action="store_true", help="Print a line for every package.")
    return parser


def build_metadata_command(args: argparse.Namespace, settings: Settings) -> CargoMetadataCommand:
    manifest_path = args.manifest_path
    if manifest_path is not None and manifest_path.is_dir():
        manifest_path = manifest_path / "Cargo.toml"
    return CargoMetadataCommand(
        manifest_path=manifest_path,
        cargo_path=args.cargo_path,
        filter_platform=args.filter_platform,
        verbose=args.verbose,
        settings=settings,
    )


def main(argv: list[str] | None = None) -> int:
    """Run the check; returns the process exit code."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    source = build_metadata_command(args, settings)
    try:
        validate_workspace(source, verbose=args.verbose)
    except WorkspaceValidationError as exc:
        logger.debug("workspace check failed (%s)", exc.kind)
        report = str(exc)
        if not report.endswith("\n"):
            report += "\n"
        sys.stderr.write(f"Failed to validate:\n{report}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
