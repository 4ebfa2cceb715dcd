import os

import pytest

PYQT_OPT_IN_ENV_VAR = "PYQT_TESTS"


def pytest_runtest_setup(item):
    if item.get_closest_marker("pyqt_required") and not os.getenv(PYQT_OPT_IN_ENV_VAR):
        pytest.skip(f"{PYQT_OPT_IN_ENV_VAR} not set; skipping PyQt-dependent test")


@pytest.fixture(autouse=True)
def _no_inherited_session_overrides(monkeypatch):
    """Keep the developer's own desktop flags out of tests that read the live environment."""
    for name in ("XDG_CURRENT_DESKTOP", "GDMSESSION", "VICINAE_DISABLE_HUD", "USE_LAYER_SHELL", "APPDIR", "NODE_BIN"):
        monkeypatch.delenv(name, raising=False)
