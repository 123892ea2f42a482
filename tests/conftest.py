from __future__ import annotations

import pytest

from scientist.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    # Keep recorders created with default paths out of the working tree.
    monkeypatch.setenv("SCIENTIST_RESULTS_DIR", str(tmp_path / "results"))
    monkeypatch.delenv("SCIENTIST_TOGGLES_PATH", raising=False)
    get_settings.cache_clear()  # type: ignore[attr-defined]
    yield
    get_settings.cache_clear()  # type: ignore[attr-defined]
