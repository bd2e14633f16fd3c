import os

import pytest

from docker_plugin.environment.proxy import PROXY_KEYS


@pytest.fixture
def clean_env(monkeypatch):
    """Remove PLUGIN_* and proxy variables so settings start from defaults."""
    for name in list(os.environ):
        if name.upper().startswith("PLUGIN_"):
            monkeypatch.delenv(name, raising=False)
    for key in PROXY_KEYS:
        for name in (key, key.upper(), f"HARNESS_{key.upper()}"):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch
