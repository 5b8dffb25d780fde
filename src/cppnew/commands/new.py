"""cppnew new - Create a new C++/CMake project from a template."""

import logging
from functools import partial
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from cppnew.core.config import build_config
from cppnew.core.materializer import MaterializeReport, materialize
from cppnew.core.renderer import render
from cppnew.core.settings import ScaffoldSettings
from cppnew.errors import UnknownTemplateError
from cppnew.git.utils import init_repository
from cppnew.templates import lookup

logger = logging.getLogger(__name__)

console = Console()


def new_cmd(
    tokens: Sequence[str],
    cwd: Optional[Path] = None,
    settings: Optional[ScaffoldSettings] = None,
) -> int:
    """Scaffold a project described by ``tokens``.

    ``tokens`` start with the command token itself, e.g.
    ``["new", "lib", "-n", "engine"]``.

    Returns:
        Process exit code
    """
    settings = settings or ScaffoldSettings()
    cwd = cwd or Path.cwd()

    try:
        config = build_config(tokens, settings)
    except UnknownTemplateError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}", soft_wrap=True)
        return 1

    resources = lookup(config.template_id)
    file_set = render(resources, config)

    target = cwd / config.project_name
    console.print(Panel.fit(
        f"[bold blue]cppnew new[/] - Creating [cyan]{escape(config.project_name)}[/] "
        f"({config.template_id.value})",
        border_style="blue"
    ))

    initializer = None
    if settings.init_git:
        initializer = partial(init_repository, timeout=settings.git_timeout_seconds)

    report = materialize(target, file_set, init_repository=initializer)
    if not report.ok:
        _print_failure(report)
        return 1

    console.print(
        f"\n[green]✓[/] Project '{escape(config.project_name)}' was successfully created! "
        f"(template: '{config.template_id.value}')",
        soft_wrap=True,
    )
    _print_next_steps(config.project_name)
    return 0


def _print_failure(report: MaterializeReport) -> None:
    """Report which artifact failed and what was left behind."""
    console.print(
        f"[red]Error:[/] {escape(report.failed_artifact)} could not be created",
        soft_wrap=True,
    )
    console.print(f"  [dim]{escape(str(report.error.cause))}[/]", soft_wrap=True)
    if report.created:
        console.print(
            f"[yellow]Partially created in {escape(str(report.root))}:[/] "
            + ", ".join(escape(a) for a in report.created),
            soft_wrap=True,
        )
        console.print("[dim]Remove the directory and run again.[/]")


def _print_next_steps(name: str) -> None:
    """Print next steps after creation."""
    console.print(f"\n  cd {escape(name)}")
    console.print("  ./build.sh")
