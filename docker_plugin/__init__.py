"""docker-plugin - CI plugin that turns build settings into a docker command.

Builds the ``docker build`` argument list from declarative configuration and
resolves proxy variables from the environment. Nothing is executed here.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
