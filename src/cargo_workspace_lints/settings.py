"""Settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the ``cargo workspace-lints`` command.

    Values are read from environment variables and from a ``.env`` file
    in the working directory.  Command-line flags take precedence.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    # Cargo exports CARGO when it runs a subcommand binary.
    cargo: str | None = None

    @property
    def cargo_executable(self) -> str:
        """The cargo binary to run, falling back to a ``$PATH`` lookup."""
        return self.cargo or "cargo"
