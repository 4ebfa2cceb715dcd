"""Command line diagnostics for the current desktop session."""
from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import Mapping, Optional, TextIO

from vicinae_session.launch_env import sanitize
from vicinae_session.logging_utils import configure_logger
from vicinae_session.report import SessionReport, collect_report
from vicinae_session.runtime_locations import PathOverride
from vicinae_session.session import PlatformNameOracle
from vicinae_session.settings import load_settings


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="vicinae-session",
        description="Inspect the desktop session and the environment handed to launched apps",
    )
    parser.add_argument("--report", action="store_true", help="Print every resolved session fact")
    parser.add_argument("--json", action="store_true", help="Emit the report as JSON")
    parser.add_argument("--env", action="store_true", help="Print the sanitized launch environment")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", type=Path, help="Path to session.json")
    return parser.parse_args(argv)


def _format_report(report: SessionReport) -> str:
    def _optional(value: Optional[PathOverride]) -> str:
        if value is None:
            return "<unset>"
        return value.raw or '""'

    lines = [
        f"version: {report.version}",
        f"session: {report.description}",
        f"desktop: {report.desktop or '<unset>'} ({report.family.value})",
        f"gnome: {report.gnome}",
        f"wlroots: {report.wlroots}",
        f"hud disabled: {report.hud_disabled}",
        f"layer shell: {report.layer_shell_enabled}",
        f"appimage dir: {_optional(report.app_image_dir)}",
        f"node binary: {_optional(report.node_binary)}",
        f"stripped on launch: {', '.join(report.stripped_keys) or 'none'}",
        "icon search paths:",
    ]
    lines.extend(f"  {path}" for path in report.icon_search_paths)
    return "\n".join(lines)


def main(
    argv: Optional[list[str]] = None,
    *,
    env: Optional[Mapping[str, str]] = None,
    platform_name: Optional[PlatformNameOracle] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    out = stdout or sys.stdout

    def write(text: str) -> None:
        print(text, file=out)

    settings = load_settings(args.config)
    if args.debug:
        settings = replace(settings, debug=True)
    try:
        logger = configure_logger(settings)
    except OSError as exc:
        print(f"error: unable to set up logging: {exc}", file=sys.stderr)
        return 1

    report = collect_report(env, platform_name=platform_name)
    logger.debug("Collected session report: %s", report.description)

    if args.json:
        payload = report.to_dict()
        if args.env:
            payload["launch_env"] = sanitize(env)
        write(json.dumps(payload, indent=2, sort_keys=True))
        return 0

    if args.report:
        write(_format_report(report))
    else:
        write(f"Vicinae {report.version} ({report.description})")
    if args.env:
        for key, value in sorted(sanitize(env).items()):
            write(f"{key}={value}")
    return 0
