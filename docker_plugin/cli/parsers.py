"""CLI argument parsers and validators."""

from __future__ import annotations

import typer

from ..environment.proxy import PROXY_KEYS

OUTPUT_FORMATS = ("text", "json")


def parse_output_format(value: str) -> str:
    """Validate the --format option."""
    fmt = value.strip().lower()
    if fmt not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"Must be one of {', '.join(OUTPUT_FORMATS)}, got: {value!r}"
        )
    return fmt


def parse_proxy_key(value: str) -> str:
    """Normalize a proxy variable name to its lowercase form."""
    key = value.strip().lower()
    if key not in PROXY_KEYS:
        raise typer.BadParameter(
            f"Unknown proxy variable {value!r}, expected one of: {', '.join(PROXY_KEYS)}"
        )
    return key
