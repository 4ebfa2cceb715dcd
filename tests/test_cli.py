import io
import json
import logging

import pytest

from vicinae_session import cli
from vicinae_session.logging_utils import LOGGER_NAME
from vicinae_session.version import __version__


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("VICINAE_SESSION_CONFIG", str(tmp_path / "missing.json"))
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers = list(logger.handlers)
    saved_propagate = logger.propagate
    yield
    logger.handlers = saved_handlers
    logger.propagate = saved_propagate


def _run(argv, env):
    out = io.StringIO()
    code = cli.main(argv, env=env, platform_name=lambda: "wayland", stdout=out)
    return code, out.getvalue()


def test_default_output_is_summary_line():
    code, output = _run([], {"XDG_CURRENT_DESKTOP": "GNOME"})
    assert code == 0
    assert output.strip() == f"Vicinae {__version__} (GNOME/Wayland)"


def test_report_lists_facts():
    code, output = _run(["--report"], {"XDG_CURRENT_DESKTOP": "sway", "NODE_BIN": "/opt/node"})
    assert code == 0
    assert "session: wlroots/Wayland" in output
    assert "node binary: /opt/node" in output
    assert "appimage dir: <unset>" in output


def test_env_prints_sanitized_environment():
    env = {"LD_PRELOAD": "evil.so", "TERM": "xterm", "PATH": "/nix/store/bin"}
    code, output = _run(["--env"], env)
    lines = output.splitlines()
    assert code == 0
    assert "TERM=xterm" in lines
    assert not any(line.startswith("LD_PRELOAD=") for line in lines)
    path_line = next(line for line in lines if line.startswith("PATH="))
    assert "/nix/store/bin" not in path_line


def test_json_output():
    code, output = _run(["--json", "--env"], {"XDG_CURRENT_DESKTOP": "KDE", "QT_PLUGIN_PATH": "/q"})
    payload = json.loads(output)
    assert code == 0
    assert payload["description"] == "KDE/Wayland"
    assert payload["stripped_keys"] == ["QT_PLUGIN_PATH"]
    assert "QT_PLUGIN_PATH" not in payload["launch_env"]


def test_debug_flag_sets_level():
    code, _ = _run(["--debug"], {})
    assert code == 0
    assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG


def test_empty_appdir_is_shown_as_empty_string():
    code, output = _run(["--json"], {"APPDIR": ""})
    assert code == 0
    assert json.loads(output)["app_image_dir"] == ""
    _, text = _run(["--report"], {"APPDIR": ""})
    assert 'appimage dir: ""' in text
