"""Pytest configuration for tests.

Puts src/ on the path and keeps the environment and logging isolated.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add src/ to Python path so imports work without installing
src_root = Path(__file__).parent.parent / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """No GitHub settings leak in from the machine running the tests"""
    for name in ("GITHUB_USER", "GITHUB_HOST", "GHEXT_NOOP"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GHEXT_CONFIG", str(tmp_path / "no-such-config.yml"))
    yield


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to streams from earlier tests"""
    yield
    logger = logging.getLogger("ghext")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
