"""Tests for CLI commands."""

import pytest
from typer.testing import CliRunner

from sastwrap import cli
from sastwrap.cli import app
from sastwrap.tools.container import ContainerExecutor


runner = CliRunner()


def _flat(output: str) -> str:
    """Collapse rich line wrapping so assertions see whole sentences."""
    return " ".join(output.split())


@pytest.fixture
def fake_runtime(monkeypatch: pytest.MonkeyPatch, fake_runner):
    """Route every executor created by the CLI through a FakeRunner."""

    def install(*results):
        fake = fake_runner(*results)

        def factory(runtime: str = "docker"):
            return ContainerExecutor(runtime=runtime, command_runner=fake)

        monkeypatch.setattr(cli, "ContainerExecutor", factory)
        return fake

    return install


class TestCommandsRegistered:
    def test_all_commands_registered(self):
        names = {command.name or command.callback.__name__ for command in app.registered_commands}
        assert {"scan", "scanners", "tool-help", "doctor", "config", "version"} <= names

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "sastwrap" in result.output


class TestScanCommand:
    def test_scan_with_findings(self, fake_runtime, brakeman_output: str, make_result):
        fake = fake_runtime(make_result(0), make_result(3, stdout=brakeman_output))

        result = runner.invoke(app, ["scan", "-s", "Ruby", "-p", "/srv/app", "--all"])

        assert result.exit_code == 0, result.output
        assert fake.commands[0] == "docker pull presidentbeef/brakeman"
        assert fake.commands[1] == (
            "docker run --rm -v /srv/app:/code presidentbeef/brakeman --quiet"
        )
        assert "completed with findings" in _flat(result.output)
        assert "Scan completed." in result.output
        assert "Warning 1:" in result.output
        assert "Warning 2:" in result.output

    def test_files_imply_files_only(self, fake_runtime, make_result):
        fake = fake_runtime(make_result(0, stdout="ok"))

        result = runner.invoke(
            app,
            ["scan", "-s", "Python", "-p", "/srv/app", "-f", "a.py, b.py", "--skip-pull"],
        )

        assert result.exit_code == 0, result.output
        assert fake.commands == [
            "docker run --rm -v /srv/app:/code ghcr.io/pycqa/bandit/bandit a.py b.py"
        ]

    def test_skip_pull_from_config(
        self, fake_runtime, monkeypatch: pytest.MonkeyPatch, make_result
    ):
        monkeypatch.setenv("SASTWRAP_SKIP_PULL", "true")
        fake = fake_runtime(make_result(0, stdout="ok"))

        result = runner.invoke(app, ["scan", "-s", "JavaScript", "-p", "/srv/app", "--all"])

        assert result.exit_code == 0, result.output
        assert len(fake.commands) == 1

    def test_podman_runtime(self, fake_runtime, monkeypatch: pytest.MonkeyPatch, make_result):
        monkeypatch.setenv("SASTWRAP_CONTAINER_RUNTIME", "podman")
        fake = fake_runtime(make_result(0), make_result(0, stdout="ok"))

        result = runner.invoke(app, ["scan", "-s", "Ruby", "-p", "/srv/app", "--all"])

        assert result.exit_code == 0, result.output
        assert fake.commands[0] == "podman pull presidentbeef/brakeman"
        assert fake.commands[1].startswith("podman run --rm")

    def test_unknown_scanner(self, fake_runtime):
        fake = fake_runtime()

        result = runner.invoke(app, ["scan", "-s", "Cobol", "-p", "/srv/app", "--all"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert fake.commands == []

    def test_files_only_without_files(self, fake_runtime):
        fake = fake_runtime()

        result = runner.invoke(app, ["scan", "-s", "Ruby", "-p", "/srv/app", "--files-only"])

        assert result.exit_code == 1
        assert "at least one file" in _flat(result.output)
        assert fake.commands == []

    def test_missing_scope_without_prompting(self, fake_runtime):
        fake = fake_runtime()

        result = runner.invoke(app, ["scan", "-s", "Ruby", "-p", "/srv/app", "--no-input"])

        assert result.exit_code == 1
        assert "--files-only" in _flat(result.output)
        assert fake.commands == []

    def test_verbose_from_local_config(
        self, fake_runtime, make_result, isolated_config, monkeypatch: pytest.MonkeyPatch
    ):
        (isolated_config / ".sastwrap.env").write_text("SASTWRAP_VERBOSE=on\n")
        seen: list[bool] = []
        monkeypatch.setattr(cli, "set_debug_enabled", seen.append)
        fake_runtime(make_result(0, stdout="ok"))

        result = runner.invoke(
            app, ["scan", "-s", "Ruby", "-p", "/srv/app", "--all", "--skip-pull"]
        )

        assert result.exit_code == 0, result.output
        assert seen == [True]

    def test_interrupt_exits_130(self, fake_runtime):
        fake = fake_runtime(KeyboardInterrupt())

        result = runner.invoke(app, ["scan", "-s", "Ruby", "-p", "/srv/app", "--all"])

        assert result.exit_code == 130
        assert "Scan interrupted." in result.output
        assert "Scan Results" not in result.output
        assert fake.commands == ["docker pull presidentbeef/brakeman"]

    def test_pull_failure(self, fake_runtime, make_result):
        fake = fake_runtime(make_result(1, stderr="pull access denied"))

        result = runner.invoke(app, ["scan", "-s", "Ruby", "-p", "/srv/app", "--all"])

        assert result.exit_code == 1
        assert "pull access denied" in _flat(result.output)
        assert "Scan Results" not in result.output
        assert len(fake.commands) == 1

    def test_execution_failure(self, fake_runtime, make_result):
        fake_runtime(make_result(0), make_result(2, stderr="invalid option"))

        result = runner.invoke(app, ["scan", "-s", "Ruby", "-p", "/srv/app", "--all"])

        assert result.exit_code == 1
        assert "invalid option" in _flat(result.output)
        assert "Scan Results" not in result.output

    def test_stderr_diagnostics_printed(self, fake_runtime, make_result):
        fake_runtime(make_result(0, stdout="ok", stderr="rule cache is stale"))

        result = runner.invoke(
            app, ["scan", "-s", "Ruby", "-p", "/srv/app", "--all", "--skip-pull"]
        )

        assert result.exit_code == 0, result.output
        assert "Container stderr:" in result.output
        assert "rule cache is stale" in _flat(result.output)

    def test_show_help_first(self, fake_runtime, make_result):
        fake = fake_runtime(make_result(0, stdout="Usage: brakeman"), make_result(0, stdout="ok"))

        result = runner.invoke(
            app,
            ["scan", "-s", "Ruby", "-p", "/srv/app", "--all", "--skip-pull", "--show-help"],
        )

        assert result.exit_code == 0, result.output
        assert fake.commands[0] == "docker run --rm presidentbeef/brakeman --help"
        assert "Usage: brakeman" in result.output


class TestToolCommands:
    def test_scanners_table(self):
        result = runner.invoke(app, ["scanners"])

        assert result.exit_code == 0
        assert "brakeman" in result.output
        assert "bandit" in result.output
        assert "semgrep" in result.output

    def test_tool_help(self, fake_runtime, make_result):
        fake = fake_runtime(make_result(0, stdout="usage: bandit [-h]"))

        result = runner.invoke(app, ["tool-help", "Python"])

        assert result.exit_code == 0, result.output
        assert fake.commands == ["docker run --rm ghcr.io/pycqa/bandit/bandit --help"]
        assert "usage: bandit" in result.output

    def test_tool_help_unknown(self, fake_runtime):
        fake_runtime()

        result = runner.invoke(app, ["tool-help", "Go"])

        assert result.exit_code == 1
        assert "Error:" in result.output


class TestConfigCommand:
    def test_show_effective(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SASTWRAP_CONTAINER_RUNTIME", "podman")

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "SASTWRAP_CONTAINER_RUNTIME=podman" in result.output

    def test_init_creates_global_config(self, isolated_config):
        from pathlib import Path

        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 0
        assert (Path.home() / ".sastwrap" / "config.yml").exists()

    def test_unknown_action(self):
        result = runner.invoke(app, ["config", "bogus"])
        assert result.exit_code == 1
