"""Domain models for docker build configuration."""

from __future__ import annotations

import secrets
import string
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

_TAG_ALPHABET = string.ascii_lowercase + string.digits
_TAG_LENGTH = 16


def new_temp_tag() -> str:
    """Generate a random lowercase tag used while the image is being built."""
    return "".join(secrets.choice(_TAG_ALPHABET) for _ in range(_TAG_LENGTH))


class SecretSpec(NamedTuple):
    """A parsed ``id=value`` secret entry."""

    id: str
    value: str


class BuildConfig(BaseModel):
    """Everything needed to assemble a single ``docker build`` invocation."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Target image reference")
    temp_tag: str = Field(
        default_factory=new_temp_tag, description="Transient tag applied during build"
    )
    dockerfile: str = Field(default="Dockerfile", description="Dockerfile path")
    context: str = Field(default=".", description="Build context path")
    secret_envs: list[str] = Field(
        default_factory=list, description="Secrets as id=ENV_VAR_NAME"
    )
    secret_files: list[str] = Field(
        default_factory=list, description="Secrets as id=/path/to/file"
    )
    platform: str = Field(default="", description="Target platform")
    ssh_key_path: str = Field(default="", description="SSH key as name=/path/to/key")

    squash: bool = False
    compress: bool = False
    pull: bool = False
    no_cache: bool = False
    quiet: bool = False
    cache_from: list[str] = Field(default_factory=list)
    build_args: list[str] = Field(
        default_factory=list, description="Build arguments as KEY=VALUE"
    )
    build_args_from_env: list[str] = Field(
        default_factory=list,
        description="Environment variable names passed through as build arguments",
    )
    add_host: list[str] = Field(default_factory=list, description="Entries as host:ip")
    network: str = ""
    target: str = Field(default="", description="Multi-stage build target")
    labels: list[str] = Field(default_factory=list)
