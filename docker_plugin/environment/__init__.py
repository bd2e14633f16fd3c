from .proxy import (
    PROXY_KEYS,
    add_env_build_args,
    add_proxy_build_args,
    get_proxy_value,
    has_proxy_build_arg,
)

__all__ = [
    "PROXY_KEYS",
    "add_env_build_args",
    "add_proxy_build_args",
    "get_proxy_value",
    "has_proxy_build_arg",
]
