from pathlib import Path

from vicinae_session.runtime_locations import (
    PathOverride,
    app_image_dir,
    is_app_image,
    lookup,
    node_binary_override,
    resolve,
)


def test_unset_variable_resolves_to_none():
    assert resolve("APPDIR", {}) is None
    assert app_image_dir({}) is None
    assert node_binary_override({}) is None
    assert is_app_image({}) is False


def test_empty_variable_is_still_present():
    assert resolve("APPDIR", {"APPDIR": ""}) is not None
    assert is_app_image({"APPDIR": ""}) is True


def test_values_are_wrapped_verbatim():
    env = {"APPDIR": "/tmp/.mount_vicinae", "NODE_BIN": "~/bin/node"}
    assert app_image_dir(env) == Path("/tmp/.mount_vicinae")
    assert node_binary_override(env) == Path("~/bin/node")
    assert is_app_image(env)


def test_live_environment(monkeypatch):
    monkeypatch.delenv("APPDIR", raising=False)
    assert app_image_dir() is None
    monkeypatch.setenv("APPDIR", "/opt/vicinae")
    assert app_image_dir() == Path("/opt/vicinae")


def test_lookup_keeps_raw_text():
    assert lookup("APPDIR", {}) is None
    override = lookup("APPDIR", {"APPDIR": ""})
    assert override == PathOverride("")
    assert str(override) == ""
    assert override.path == Path("")
