"""Parsing of ``id=value`` secret entries."""

from __future__ import annotations

import logging

from ..core.models import SecretSpec

logger = logging.getLogger(__name__)


def parse_secret(entry: str) -> SecretSpec | None:
    """Split a secret entry on the first ``=``.

    Args:
        entry: Raw entry such as ``foo_secret=FOO_SECRET_ENV_VAR``

    Returns:
        The parsed secret, or None when the id or the value is empty
    """
    secret_id, sep, value = entry.partition("=")
    if not sep or not secret_id or not value:
        logger.debug(f"Skipping malformed secret entry: {entry!r}")
        return None
    return SecretSpec(secret_id, value)


def secret_args(entries: list[str], source: str) -> list[str]:
    """Render the ``--secret`` tokens for every valid entry, in input order.

    ``source`` is the buildkit secret source key, ``env`` or ``src``.
    """
    tokens: list[str] = []
    for entry in entries:
        secret = parse_secret(entry)
        if secret is None:
            continue
        tokens.append(f"--secret id={secret.id},{source}={secret.value}")
    return tokens
