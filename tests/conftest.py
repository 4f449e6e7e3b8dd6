import logging

import pytest

from smash.config import get_settings
from smash.logging import clear_context


@pytest.fixture(autouse=True)
def test_env(monkeypatch):
    for key in ("SMASH_PROMPT", "SMASH_MAX_PARAMS", "SMASH_MAX_PARAM_LENGTH"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("APP_ENV", "dev")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    clear_context()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
