"""Main CLI application."""

from __future__ import annotations

import json
import logging

import typer
from typing_extensions import Annotated

from ..command.builder import command_build
from ..environment import proxy
from ..settings import SettingsError, load_settings
from .parsers import parse_output_format, parse_proxy_key

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="docker-plugin",
    help="Translate CI plugin settings into a docker build command.",
)

VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose logging.",
    ),
]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


@app.command()
def command(
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            help="Output format: text (space separated) or json (array of tokens).",
            callback=parse_output_format,
            metavar="FORMAT",
        ),
    ] = "text",
    proxy_build_args: Annotated[
        bool,
        typer.Option(
            "--proxy-build-args/--no-proxy-build-args",
            help="Forward proxy variables as build arguments (default: PLUGIN_PROXY_BUILD_ARGS).",
        ),
    ] = True,
    verbose: VerboseOption = False,
) -> None:
    """Print the docker build command for the current PLUGIN_* settings."""
    _configure_logging(verbose)

    try:
        settings = load_settings()
    except SettingsError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    cfg = settings.to_build_config()
    cfg = proxy.add_env_build_args(cfg)
    if proxy_build_args and settings.proxy_build_args:
        cfg = proxy.add_proxy_build_args(cfg)
    else:
        logger.debug("Proxy build args disabled")

    tokens = command_build(cfg, executable=settings.docker_exe)

    if output_format == "json":
        typer.echo(json.dumps(tokens))
    else:
        typer.echo(" ".join(tokens))


@app.command(name="proxy")
def proxy_value(
    key: Annotated[
        str,
        typer.Argument(
            help="Proxy variable: http_proxy, https_proxy or no_proxy.",
            callback=parse_proxy_key,
        ),
    ],
    verbose: VerboseOption = False,
) -> None:
    """Print the resolved value of a proxy variable."""
    _configure_logging(verbose)

    value = proxy.get_proxy_value(key)
    if not value:
        logger.debug(f"No value set for {key}")
    typer.echo(value)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
