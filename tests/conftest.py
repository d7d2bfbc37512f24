from __future__ import annotations

import os

import pytest

from wayfinder.constants import ENV_PREFIX, PROJECT_DIR_ENV_VAR, SUBDIR_ENV_VAR_SUFFIX


@pytest.fixture(autouse=True)
def _clear_discovery_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own PROJECT_DIR / *_SUBDIR / WAYFINDER_* out of the tests."""
    monkeypatch.delenv(PROJECT_DIR_ENV_VAR, raising=False)
    for key in list(os.environ.keys()):
        if key.endswith(SUBDIR_ENV_VAR_SUFFIX) or key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
