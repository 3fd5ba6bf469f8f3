"""Configuration management with Pydantic and XDG base directory support."""

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from zkcat.utils.crypto import load_or_create_ed25519_key, public_key_hex


def get_xdg_config_home() -> Path:
    """Get XDG_CONFIG_HOME directory, defaulting to ~/.config."""
    xdg_config = os.getenv("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    """zkcat configuration settings.

    Precedence: CLI flag > environment variable > .env file > defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="ZKCAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    config_dir: Path | None = Field(
        default=None,
        description="Override config directory (defaults to XDG_CONFIG_HOME/zkcat)",
    )

    signing_key_path: Path | None = Field(
        default=None,
        description="Location of the Ed25519 key used to seal receipts",
    )

    trusted_public_keys: list[str] = Field(
        default_factory=list,
        description="Hex-encoded Ed25519 public keys whose receipts are accepted",
    )

    proof_suffix: str = Field(
        default=".proof",
        min_length=1,
        description="Suffix appended to the document path to name its proof artifact",
    )

    prove_timeout_seconds: float | None = Field(
        default=None,
        gt=0.0,
        description="Abandon proof generation after this many seconds (unset = wait forever)",
    )

    log_level: LogLevel = Field(
        default="WARNING",
        description="Root log level used by the CLI",
    )

    def get_config_dir(self) -> Path:
        """Get the config directory, creating if necessary."""
        if self.config_dir:
            config_dir = self.config_dir
        else:
            config_dir = get_xdg_config_home() / "zkcat"

        config_dir.mkdir(parents=True, exist_ok=True)
        return config_dir

    def get_signing_key_path(self) -> Path:
        """Return the path of the receipt signing key."""
        if self.signing_key_path is not None:
            return self.signing_key_path
        return self.get_config_dir() / "receipt-signing.key"

    def get_signing_key(self) -> bytes:
        """Return the raw Ed25519 private key used to seal receipts."""
        return load_or_create_ed25519_key(self.get_signing_key_path())

    def get_trusted_public_keys(self) -> set[str]:
        """Return every public key a receipt may be sealed with.

        The local signing key is always trusted so that proofs made on this
        machine verify here without extra configuration.
        """
        trusted = {key.strip().lower() for key in self.trusted_public_keys if key.strip()}
        trusted.add(public_key_hex(self.get_signing_key()))
        return trusted

    def get_proof_path(self, document: Path) -> Path:
        """Return the artifact path derived from ``document``."""
        return document.with_name(document.name + self.proof_suffix)


# Global settings instance (CLI entry point only; services take settings explicitly)
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
