"""Test configuration and fixtures for sastwrap."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from sastwrap.tools.container import CommandResult

BRAKEMAN_OUTPUT = """== Brakeman Report ==

Application Path: /code
Rails Version: 6.1.4
Brakeman Version: 5.4.0

== Overview ==

Controllers: 2
Models: 3
Templates: 5
Errors: 0
Security Warnings: 2

== Warning Types ==

Cross-Site Scripting: 1
SQL Injection: 1

== Warnings ==

File: app/controllers/users_controller.rb
Line: 12
Message: Possible SQL injection
Confidence: High

File: app/views/users/show.html.erb
Line: 4
Message: Unescaped model attribute
Confidence: Medium
"""


class FakeRunner:
    """Command runner that replays canned results and records commands."""

    def __init__(self, *results: CommandResult | BaseException):
        self.results = list(results)
        self.commands: list[str] = []

    async def __call__(self, command: str) -> CommandResult:
        self.commands.append(command)
        if not self.results:
            raise AssertionError(f"Unexpected command: {command}")
        result = self.results.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result


def build_result(
    returncode: int = 0, stdout: str = "", stderr: str = "", command: str = "fake"
) -> CommandResult:
    return CommandResult(command=command, returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Keep tests away from the real ~/.sastwrap and SASTWRAP_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(workdir)
    for key in ("SASTWRAP_CONTAINER_RUNTIME", "SASTWRAP_VERBOSE", "SASTWRAP_SKIP_PULL"):
        monkeypatch.delenv(key, raising=False)
    return workdir


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def brakeman_output() -> str:
    return BRAKEMAN_OUTPUT


@pytest.fixture
def fake_runner() -> type[FakeRunner]:
    """Factory for command runners that replay canned results."""
    return FakeRunner


@pytest.fixture
def make_result():
    """Factory for canned CommandResult objects."""
    return build_result
