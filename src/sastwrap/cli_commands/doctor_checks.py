"""Individual health-check functions for ``sastwrap doctor``."""

from __future__ import annotations

import shutil
import subprocess
import sys
from dataclasses import dataclass

from sastwrap.config import SUPPORTED_RUNTIMES, get_config


@dataclass
class CheckResult:
    """Outcome of a single diagnostic check."""

    name: str
    status: str  # "pass", "fail", "warn"
    message: str
    fix: str = ""


INSTALL_HINTS: dict[str, str] = {
    "docker": "Install Docker: https://docs.docker.com/get-docker/",
    "podman": "Install Podman: https://podman.io/docs/installation",
}


def check_python_version() -> CheckResult:
    """Verify Python >= 3.12."""
    v = sys.version_info
    ver = f"{v.major}.{v.minor}.{v.micro}"
    if (v.major, v.minor) >= (3, 12):
        return CheckResult("Python version", "pass", f"Python {ver}")
    return CheckResult(
        "Python version", "fail", f"Python {ver} (requires >= 3.12)", fix="Install Python 3.12+"
    )


def check_runtime_binary(runtime: str) -> CheckResult:
    """Check that the container runtime CLI is on PATH."""
    found = shutil.which(runtime)
    if found:
        return CheckResult("Container runtime", "pass", f"{runtime} found at {found}")
    return CheckResult(
        "Container runtime",
        "fail",
        f"{runtime} not found in PATH",
        fix=INSTALL_HINTS.get(runtime, ""),
    )


def check_runtime_daemon(runtime: str, timeout: float = 15.0) -> CheckResult:
    """Check that the runtime can talk to its daemon/service."""
    if shutil.which(runtime) is None:
        return CheckResult(
            "Runtime daemon", "warn", f"Skipped: {runtime} is not installed"
        )
    try:
        result = subprocess.run(
            [runtime, "info"],
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        return CheckResult(
            "Runtime daemon",
            "fail",
            f"'{runtime} info' timed out after {timeout:.0f}s",
            fix=f"Check that the {runtime} daemon is running",
        )
    except OSError as e:
        return CheckResult("Runtime daemon", "fail", f"Could not run {runtime}: {e}")

    if result.returncode == 0:
        return CheckResult("Runtime daemon", "pass", f"{runtime} daemon is reachable")
    lines = result.stderr.strip().splitlines()
    detail = lines[0] if lines else f"exit code {result.returncode}"
    return CheckResult(
        "Runtime daemon",
        "fail",
        f"{runtime} daemon not reachable: {detail}",
        fix=f"Start the {runtime} service or check your user's permissions",
    )


def check_runtime_setting(runtime: str) -> CheckResult:
    """Report which runtime is configured and whether the raw value was accepted."""
    raw = str(get_config("SASTWRAP_CONTAINER_RUNTIME", default="")).strip().lower()
    if raw and raw not in SUPPORTED_RUNTIMES:
        return CheckResult(
            "Configuration",
            "warn",
            f"SASTWRAP_CONTAINER_RUNTIME={raw} is not supported; using {runtime}",
            fix=f"Set SASTWRAP_CONTAINER_RUNTIME to one of: {', '.join(SUPPORTED_RUNTIMES)}",
        )
    return CheckResult("Configuration", "pass", f"Container runtime: {runtime}")
