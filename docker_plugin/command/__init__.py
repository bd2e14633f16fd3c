from .builder import DOCKER_EXE, command_build
from .secrets import parse_secret

__all__ = ["DOCKER_EXE", "command_build", "parse_secret"]
