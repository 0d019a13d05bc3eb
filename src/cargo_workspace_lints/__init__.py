"""Check that every package in a Cargo workspace sets ``lints.workspace = true``."""

__version__ = "0.1.0"
