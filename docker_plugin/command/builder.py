"""Assembly of the ``docker build`` argument list."""

from __future__ import annotations

import logging

from ..core.models import BuildConfig
from .secrets import secret_args

logger = logging.getLogger(__name__)

DOCKER_EXE = "/usr/local/bin/docker"


def _repeated(flag: str, values: list[str]) -> list[str]:
    tokens: list[str] = []
    for value in values:
        tokens.extend([flag, value])
    return tokens


def _extra_args(cfg: BuildConfig) -> list[str]:
    args: list[str] = []
    if cfg.squash:
        args.append("--squash")
    if cfg.compress:
        args.append("--compress")
    if cfg.pull:
        args.append("--pull=true")
    if cfg.no_cache:
        args.append("--no-cache")
    args += _repeated("--cache-from", cfg.cache_from)
    args += _repeated("--build-arg", cfg.build_args)
    args += _repeated("--add-host", cfg.add_host)
    if cfg.network:
        args += ["--network", cfg.network]
    if cfg.target:
        args += ["--target", cfg.target]
    if cfg.quiet:
        args.append("--quiet")
    args += _repeated("--label", cfg.labels)
    return args


def command_build(cfg: BuildConfig, executable: str = DOCKER_EXE) -> list[str]:
    """Build the command line for ``docker build``.

    Malformed secret entries are dropped rather than reported. Secret and
    ssh flags carry their value in the same token, while every other flag
    is followed by its value as a separate token.

    Args:
        cfg: Build configuration
        executable: Path of the docker binary

    Returns:
        Ordered list of tokens, starting with the executable
    """
    args = [
        executable,
        "build",
        "--rm=true",
        "-f",
        cfg.dockerfile,
        "-t",
        cfg.temp_tag,
        cfg.context,
    ]
    args += _extra_args(cfg)
    args += secret_args(cfg.secret_envs, "env")
    args += secret_args(cfg.secret_files, "src")
    if cfg.platform:
        args += ["--platform", cfg.platform]
    if cfg.ssh_key_path:
        args.append(f"--ssh {cfg.ssh_key_path}")

    logger.debug(f"Built command with {len(args)} token(s)")
    return args
