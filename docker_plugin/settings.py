"""Plugin settings read from ``PLUGIN_*`` environment variables."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .command.builder import DOCKER_EXE
from .core.models import BuildConfig

logger = logging.getLogger(__name__)

CsvList = Annotated[list[str], NoDecode]


class SettingsError(ValueError):
    """Raised when plugin settings cannot be loaded from the environment."""


def parse_csv_list(raw: str) -> list[str]:
    """Parse a comma-separated list, dropping blank items.

    Args:
        raw: Raw comma-separated value

    Returns:
        List of stripped items
    """
    if not raw.strip():
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


class PluginSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PLUGIN_", case_sensitive=False)

    repo: str = ""
    temp_tag: str = ""
    dockerfile: str = "Dockerfile"
    context: str = "."
    secrets_from_env: CsvList = []
    secrets_from_file: CsvList = []
    platform: str = ""
    ssh_key_path: str = ""

    squash: bool = False
    compress: bool = False
    pull_image: bool = False
    no_cache: bool = False
    quiet: bool = False
    cache_from: CsvList = []
    build_args: CsvList = []
    build_args_from_env: CsvList = []
    add_host: CsvList = []
    network: str = ""
    target: str = ""
    custom_labels: CsvList = []

    proxy_build_args: bool = True
    docker_exe: str = DOCKER_EXE

    @field_validator(
        "secrets_from_env",
        "secrets_from_file",
        "cache_from",
        "build_args",
        "build_args_from_env",
        "add_host",
        "custom_labels",
        mode="before",
    )
    @classmethod
    def _split_csv(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_csv_list(value)
        return value

    def to_build_config(self) -> BuildConfig:
        """Map plugin settings onto a build configuration."""
        fields: dict[str, Any] = {
            "name": self.repo,
            "dockerfile": self.dockerfile,
            "context": self.context,
            "secret_envs": self.secrets_from_env,
            "secret_files": self.secrets_from_file,
            "platform": self.platform,
            "ssh_key_path": self.ssh_key_path,
            "squash": self.squash,
            "compress": self.compress,
            "pull": self.pull_image,
            "no_cache": self.no_cache,
            "quiet": self.quiet,
            "cache_from": self.cache_from,
            "build_args": self.build_args,
            "build_args_from_env": self.build_args_from_env,
            "add_host": self.add_host,
            "network": self.network,
            "target": self.target,
            "labels": self.custom_labels,
        }
        # An empty tag falls back to a generated one
        if self.temp_tag:
            fields["temp_tag"] = self.temp_tag
        return BuildConfig(**fields)


def load_settings() -> PluginSettings:
    """Load settings from the environment, wrapping validation failures."""
    try:
        settings = PluginSettings()
    except ValidationError as e:
        raise SettingsError(f"Invalid plugin settings: {e}") from e

    logger.debug(f"Loaded settings for image: {settings.repo or '<unnamed>'}")
    return settings
