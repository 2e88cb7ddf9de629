"""Pytest configuration for socialvideo tests."""

import pytest

from socialvideo.config.loader import clear_config_cache


def pytest_addoption(parser):
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests against real provider APIs (requires network)",
    )


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--run-integration"):
        skip = pytest.mark.skip(reason="needs --run-integration flag")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user/project config files and env vars out of every test."""
    root = tmp_path / "socialvideo-root"
    monkeypatch.setenv("SOCIALVIDEO_ROOT", str(root))
    monkeypatch.delenv("SOCIALVIDEO_VIMEO_API_BASE", raising=False)
    monkeypatch.delenv("SOCIALVIDEO_METADATA_TIMEOUT", raising=False)
    monkeypatch.chdir(tmp_path)
    clear_config_cache()
    yield root
    clear_config_cache()
