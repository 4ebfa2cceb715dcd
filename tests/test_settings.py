import json
from pathlib import Path

import pytest

from vicinae_session.settings import DiagnosticsSettings, default_settings_path, load_settings


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert load_settings(tmp_path / "session.json") == DiagnosticsSettings()


def test_invalid_json_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "session.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(path) == DiagnosticsSettings()


def test_non_object_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "session.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert load_settings(path) == DiagnosticsSettings()


def test_reads_and_coerces_values(tmp_path: Path) -> None:
    path = tmp_path / "session.json"
    path.write_text(
        json.dumps({"debug": "yes", "log_to_file": True, "logs_to_keep": "3", "log_dir": str(tmp_path / "logs")}),
        encoding="utf-8",
    )
    settings = load_settings(path)
    assert settings.debug is True
    assert settings.log_to_file is True
    assert settings.logs_to_keep == 3
    assert settings.log_dir == tmp_path / "logs"


@pytest.mark.parametrize("raw, expected", [(0, 1), (-4, 1), (99, 20), ("bogus", 5), (None, 5), (True, 5)])
def test_log_retention_is_clamped(tmp_path: Path, raw, expected) -> None:
    path = tmp_path / "session.json"
    path.write_text(json.dumps({"logs_to_keep": raw}), encoding="utf-8")
    assert load_settings(path).logs_to_keep == expected


def test_default_path_prefers_override() -> None:
    assert default_settings_path({"VICINAE_SESSION_CONFIG": "/etc/vicinae.json"}) == Path("/etc/vicinae.json")
    assert default_settings_path({"XDG_CONFIG_HOME": "/cfg"}) == Path("/cfg/vicinae/session.json")


def test_unreadable_path_returns_defaults(tmp_path: Path) -> None:
    assert load_settings(tmp_path) == DiagnosticsSettings()
