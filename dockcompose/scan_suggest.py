"""Suggest running the image scanner after a successful build."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import TextIO

__all__ = [
    "SCAN_SUGGEST_MSG",
    "cli_config_dir",
    "scan_already_invoked",
    "scan_available",
    "display_scan_suggest_msg",
]

SCAN_SUGGEST_MSG = (
    "Use 'docker scan' to run Snyk tests against images to find "
    "vulnerabilities and learn how to fix them"
)

_SCAN_PLUGIN = "docker-scan"

_SYSTEM_PLUGIN_DIRS = [
    "/usr/local/lib/docker/cli-plugins",
    "/usr/local/libexec/docker/cli-plugins",
    "/usr/lib/docker/cli-plugins",
    "/usr/libexec/docker/cli-plugins",
]


def cli_config_dir() -> Path:
    """Return the CLI configuration directory: $DOCKER_CONFIG or ~/.docker."""
    configured = os.environ.get("DOCKER_CONFIG")
    if configured:
        return Path(configured)
    return Path.home() / ".docker"


def scan_already_invoked(config_dir: str | os.PathLike[str]) -> bool:
    """Tell whether the scanner has been opted into already.

    Any unexpected problem counts as invoked, so the user is not bothered.
    """
    filename = Path(config_dir) / "scan" / "config.json"
    try:
        if filename.is_dir():
            return True
        data = filename.read_bytes()
    except FileNotFoundError:
        return False
    except OSError:
        return True
    try:
        config = json.loads(data)
    except ValueError:
        return True
    if config is None:
        return False
    if not isinstance(config, dict):
        return True
    optin = config.get("optin")
    if optin is None:
        return False
    if not isinstance(optin, bool):
        return True
    return optin


def _plugin_dirs(config_dir: Path) -> list[Path]:
    return [config_dir / "cli-plugins", *(Path(d) for d in _SYSTEM_PLUGIN_DIRS)]


def scan_available(config_dir: str | os.PathLike[str]) -> bool:
    """Tell whether a scan CLI plugin is installed."""
    names = [_SCAN_PLUGIN]
    if sys.platform == "win32":
        names = [_SCAN_PLUGIN + ".exe"]
    for directory in _plugin_dirs(Path(config_dir)):
        for name in names:
            try:
                if (directory / name).is_file():
                    return True
            except OSError:
                continue
    return False


def display_scan_suggest_msg(stream: TextIO | None = None) -> None:
    """Write the scan suggestion to ``stream`` (stderr by default) when appropriate."""
    if os.environ.get("DOCKER_SCAN_SUGGEST") == "false":
        return
    config_dir = cli_config_dir()
    if not scan_available(config_dir):
        return
    if scan_already_invoked(config_dir):
        return
    out = stream if stream is not None else sys.stderr
    out.write("\n" + SCAN_SUGGEST_MSG + "\n")