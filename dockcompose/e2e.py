"""Helpers for running the CLI end to end against a scratch configuration."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
import tempfile
import time
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Sequence

__all__ = [
    "DOCKER_EXECUTABLE_NAME",
    "CommandFailed",
    "WaitTimeout",
    "Cmd",
    "CmdResult",
    "E2eCLI",
    "new_e2e_cli",
    "run_command",
    "dir_contents",
    "find_executable",
    "copy_file",
    "stdout_contains",
    "lines",
    "http_get_with_retry",
]

DOCKER_EXECUTABLE_NAME = "docker.exe" if sys.platform == "win32" else "docker"

_EXE_SUFFIX = ".exe" if sys.platform == "win32" else ""
_PLUGIN_SEARCH_PATHS = ["../../bin", "../../../bin"]


@dataclass
class Cmd:
    """A command line and the environment to run it with."""

    command: list[str]
    env: dict[str, str] | None = None


@dataclass
class CmdResult:
    """What a finished command produced."""

    command: list[str]
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    def combined(self) -> str:
        """Return stdout followed by stderr."""
        return self.stdout + self.stderr


class CommandFailed(Exception):
    """A command that had to succeed exited with a non-zero code."""

    def __init__(self, result: CmdResult) -> None:
        self.result = result
        super().__init__(
            f"command {' '.join(result.command)!r} exited with code "
            f"{result.exit_code}:\n{result.combined()}"
        )


class WaitTimeout(Exception):
    """A polled condition did not hold before the timeout."""


def _poll(check: Callable[[], tuple[bool, str]], delay: float, timeout: float) -> None:
    deadline = time.monotonic() + timeout
    while True:
        ok, message = check()
        if ok:
            return
        if time.monotonic() >= deadline:
            raise WaitTimeout(f"timeout hit after {timeout}s: {message}")
        time.sleep(delay)


def run_command(cmd: Cmd) -> CmdResult:
    """Run ``cmd`` to completion and capture its output."""
    try:
        completed = subprocess.run(
            cmd.command,
            env=cmd.env,
            capture_output=True,
            text=True,
            errors="replace",
            check=False,
        )
    except OSError as exc:
        return CmdResult(command=list(cmd.command), exit_code=127, stderr=str(exc))
    return CmdResult(
        command=list(cmd.command),
        exit_code=completed.returncode,
        stdout=completed.stdout,
        stderr=completed.stderr,
    )


@dataclass
class E2eCLI:
    """Runs commands with a private CLI configuration directory."""

    bin_dir: str
    config_dir: str
    name: str = field(default="")

    def _log(self, text: str) -> None:
        print(f"\t[{self.name}] {text}")

    def new_cmd(self, command: str, *args: str) -> Cmd:
        """Build a command that runs with this configuration directory."""
        env = dict(os.environ)
        env["DOCKER_CONFIG"] = self.config_dir
        env["KUBECONFIG"] = "invalid"
        return Cmd(command=[command, *args], env=env)

    def metrics_socket(self) -> str:
        """Path of the socket test metrics are sent to."""
        return os.path.join(self.config_dir, "docker-cli.sock")

    def new_docker_cmd(self, *args: str) -> Cmd:
        """Build a docker command without running it."""
        return self.new_cmd(DOCKER_EXECUTABLE_NAME, *args)

    def run_docker_or_exit_error(self, *args: str) -> CmdResult:
        """Run a docker command and return its result, whatever its exit code."""
        self._log("docker " + " ".join(args))
        return run_command(self.new_docker_cmd(*args))

    def run_cmd(self, *args: str) -> CmdResult:
        """Run a command that must succeed."""
        if not args:
            raise ValueError("require at least one command in parameters")
        self._log(" ".join(args))
        result = run_command(self.new_cmd(args[0], *args[1:]))
        if result.exit_code != 0:
            raise CommandFailed(result)
        return result

    def run_docker_cmd(self, *args: str) -> CmdResult:
        """Run a docker command that must succeed."""
        result = self.run_docker_or_exit_error(*args)
        if result.exit_code != 0:
            raise CommandFailed(result)
        return result

    def wait_for_cmd_result(
        self,
        command: Cmd,
        predicate: Callable[[CmdResult], bool],
        timeout: float,
        delay: float,
    ) -> CmdResult:
        """Run ``command`` until its result satisfies ``predicate``; return that result."""
        if not timeout > delay:
            raise ValueError("timeout must be greater than delay")
        last: list[CmdResult] = []

        def check() -> tuple[bool, str]:
            self._log(" ".join(command.command))
            result = run_command(command)
            last[:] = [result]
            if not predicate(result):
                return False, f"Cmd output did not match requirement: {result.combined()!r}"
            return True, ""

        _poll(check, delay, timeout)
        return last[0]

    def wait_for_condition(
        self, predicate: Callable[[], tuple[bool, str]], timeout: float, delay: float
    ) -> None:
        """Wait until ``predicate`` returns a true first element."""

        def check() -> tuple[bool, str]:
            passed, description = predicate()
            if not passed:
                return False, f"Condition not met: {description!r}"
            return True, ""

        _poll(check, delay, timeout)

    def cleanup(self) -> None:
        """Remove the configuration directory."""
        shutil.rmtree(self.config_dir, ignore_errors=True)

    def __enter__(self) -> "E2eCLI":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cleanup()


def new_e2e_cli(bin_dir: str) -> E2eCLI:
    """Create a CLI wrapper with a fresh configuration holding the compose plugin."""
    config_dir = tempfile.mkdtemp()
    plugins = Path(config_dir) / "cli-plugins"
    plugins.mkdir(mode=0o755, parents=True, exist_ok=True)
    compose_plugin_file = "docker-compose" + _EXE_SUFFIX
    scan_plugin_file = "docker-scan" + _EXE_SUFFIX
    try:
        compose_plugin = find_executable(compose_plugin_file, _PLUGIN_SEARCH_PATHS)
    except FileNotFoundError:
        print("WARNING: docker-compose cli-plugin not found")
    else:
        copy_file(compose_plugin, str(plugins / compose_plugin_file))
        # A valid plugin binary is enough for the scan plugin.
        copy_file(compose_plugin, str(plugins / scan_plugin_file))
    return E2eCLI(bin_dir=bin_dir, config_dir=config_dir)


def dir_contents(directory: str | os.PathLike[str]) -> list[str]:
    """List ``directory`` and every path below it."""
    root = os.fspath(directory)
    found = [root]
    for current, dirs, files in os.walk(root):
        found.extend(os.path.join(current, name) for name in sorted(dirs) + sorted(files))
    return found


def find_executable(executable_name: str, paths: Iterable[str]) -> str:
    """Return the absolute path of the first ``executable_name`` found in ``paths``."""
    for directory in paths:
        candidate = os.path.abspath(os.path.join(directory, executable_name))
        if os.path.exists(candidate):
            return candidate
    raise FileNotFoundError(f"executable not found: {executable_name}")


def copy_file(source_file: str, destination_file: str) -> None:
    """Copy a file and make the copy executable (mode 0755)."""
    shutil.copyfile(source_file, destination_file)
    os.chmod(destination_file, 0o755)


def stdout_contains(expected: str) -> Callable[[CmdResult], bool]:
    """Predicate that holds when a result's stdout contains ``expected``."""
    return lambda result: expected in result.stdout


def lines(output: str) -> list[str]:
    """Split trimmed output into lines."""
    return output.strip().split("\n")


def http_get_with_retry(
    endpoint: str, expected_status: int, retry_delay: float, timeout: float
) -> str:
    """GET ``endpoint`` until it answers ``expected_status``; return the body.

    ``retry_delay`` is also the timeout of each request.
    """
    print(f"\tGET {endpoint}")
    body: list[bytes] = []

    def check() -> tuple[bool, str]:
        try:
            with urllib.request.urlopen(endpoint, timeout=retry_delay) as response:
                status, content = response.status, response.read()
        except urllib.error.HTTPError as exc:
            status, content = exc.code, exc.read()
            exc.close()
        except (urllib.error.URLError, OSError) as exc:
            return False, f"reaching {endpoint!r}: Error {exc}"
        body[:] = [content]
        if status == expected_status:
            return True, ""
        return False, f"reaching {endpoint!r}: {status} != {expected_status}"

    _poll(check, retry_delay, timeout)
    return body[0].decode("utf-8", errors="replace")