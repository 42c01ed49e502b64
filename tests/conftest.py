"""Shared fixtures for the navigator tests."""

import pytest

from map_navigator.config import reset_config

CREDENTIAL_VARS = (
    "ANTHROPIC_API_KEY",
    "ANTHROPIC_BASE_URL",
    "ANTHROPIC_MODEL",
    "AMAP_MAPS_API_KEY",
    "BAIDU_MAPS_API_KEY",
    "XFYUN_APPID",
    "XFYUN_API_KEY",
    "XFYUN_API_SECRET",
    "NAVIGATOR_PARALLEL_RESOLUTION",
    "NAVIGATOR_HTTP_TIMEOUT_SECONDS",
)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep a developer's .env and exported credentials out of the tests."""
    monkeypatch.chdir(tmp_path)
    for name in CREDENTIAL_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
