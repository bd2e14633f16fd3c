"""Proxy variable resolution and build-arg injection from the environment."""

from __future__ import annotations

import logging
import os
from typing import Mapping

from ..core.models import BuildConfig

logger = logging.getLogger(__name__)

PROXY_KEYS = ("http_proxy", "https_proxy", "no_proxy")
VENDOR_PREFIX = "HARNESS_"


def get_proxy_value(key: str, environ: Mapping[str, str] | None = None) -> str:
    """Resolve a proxy variable, trying ``key``, ``KEY`` then ``HARNESS_KEY``.

    The first non-empty value wins. The mapping is read on every call.

    Args:
        key: Lowercase proxy variable name (e.g. "http_proxy")
        environ: Variables to read from (default: the process environment)

    Returns:
        Resolved value, or an empty string when none is set
    """
    env = os.environ if environ is None else environ
    upper = key.upper()
    for candidate in (key, upper, f"{VENDOR_PREFIX}{upper}"):
        value = env.get(candidate, "")
        if value:
            return value
    return ""


def has_proxy_build_arg(build_args: list[str], key: str) -> bool:
    """Return True when a build arg for ``key`` (either case) is already set."""
    upper = key.upper()
    return any(arg.startswith(key) or arg.startswith(upper) for arg in build_args)


def add_proxy_build_args(
    cfg: BuildConfig, environ: Mapping[str, str] | None = None
) -> BuildConfig:
    """Forward resolved proxy settings into the build as build arguments.

    Each proxy found is added in both lowercase and uppercase form, unless
    the configuration already carries a build arg for it.
    """
    build_args = list(cfg.build_args)
    for key in PROXY_KEYS:
        value = get_proxy_value(key, environ)
        if not value or has_proxy_build_arg(build_args, key):
            continue
        build_args.append(f"{key}={value}")
        build_args.append(f"{key.upper()}={value}")
        logger.debug(f"Added proxy build arg: {key}")

    return cfg.model_copy(update={"build_args": build_args})


def add_env_build_args(
    cfg: BuildConfig, environ: Mapping[str, str] | None = None
) -> BuildConfig:
    """Pass the variables named in ``build_args_from_env`` as build arguments."""
    env = os.environ if environ is None else environ
    build_args = list(cfg.build_args)
    for name in cfg.build_args_from_env:
        value = env.get(name, "")
        if not value:
            logger.debug(f"Build arg variable not set, skipping: {name}")
            continue
        if any(arg.split("=", 1)[0] == name for arg in build_args):
            continue
        build_args.append(f"{name}={value}")

    return cfg.model_copy(update={"build_args": build_args})
