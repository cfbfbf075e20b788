"""``sastwrap doctor``: pre-flight health check command."""

from __future__ import annotations

import typer

from .deps import cli_module
from .shared import app, console

STATUS_ICONS = {
    "pass": "[green]✓[/green]",
    "fail": "[red]✗[/red]",
    "warn": "[yellow]![/yellow]",
}


@app.command()
def doctor() -> None:
    """Check that scans can run on this machine."""
    from .doctor_checks import (
        CheckResult,
        check_python_version,
        check_runtime_binary,
        check_runtime_daemon,
        check_runtime_setting,
    )

    console.print("\n[bold]sastwrap doctor[/bold]")
    console.print("─" * 36)
    console.print()

    runtime = cli_module().get_container_runtime()
    results: list[CheckResult] = [
        check_python_version(),
        check_runtime_setting(runtime),
        check_runtime_binary(runtime),
        check_runtime_daemon(runtime),
    ]

    for r in results:
        icon = STATUS_ICONS.get(r.status, "?")
        console.print(f"  {icon} {r.message}")
        if r.fix and r.status in ("fail", "warn"):
            for line in r.fix.splitlines():
                console.print(f"    {line}")

    counts = {"pass": 0, "fail": 0, "warn": 0}
    for r in results:
        counts[r.status] = counts.get(r.status, 0) + 1

    console.print()
    console.print(
        f"  Summary: {counts['pass']} passed, {counts['warn']} warnings, {counts['fail']} failed"
    )
    console.print()

    if counts["fail"] > 0:
        raise typer.Exit(1)
