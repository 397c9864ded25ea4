import logging

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep the user's home directory and CIDR_* variables out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("CIDR_MASK", raising=False)
    monkeypatch.delenv("CIDR_WITHIN", raising=False)
    yield home
    logger = logging.getLogger("cidrcalc")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
