"""Main CLI entry point for cppnew."""

import logging
from dataclasses import replace
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from cppnew import __version__
from cppnew.commands.new import new_cmd
from cppnew.core.settings import ScaffoldSettings, load_settings
from cppnew.errors import UnknownCommandError
from cppnew.templates import get_available_templates

console = Console()


class Command(Enum):
    """Commands understood by the dispatcher."""
    NEW = "new"
    HELP = "help"


USAGE = """[bold]Usage:[/] cppnew \\[options] <command> \\[template] \\[flags...]

[bold]Commands:[/]
    new      Create a new project
    help     Show this message

[bold]Templates:[/]
{templates}

[bold]Flags:[/]
    -n, --name        Name of the project
    -s, --std         Required version of the C++ standard (default: 17)
    -c, --cmake-min   Minimal required version of CMake (default: 3.22)

[bold]Options[/] (before the command; later tokens go to the command):
    --git / --no-git  Initialize a git repository and .gitignore
    --verbose         Show debug logging
    --version         Show the version and exit
"""


def print_usage() -> None:
    templates = "\n".join(
        f"    {name:<9}{escape(description)}"
        for name, description in get_available_templates().items()
    )
    console.print(USAGE.format(templates=templates), soft_wrap=True)


def dispatch(
    tokens: Sequence[str],
    cwd: Optional[Path] = None,
    settings: Optional[ScaffoldSettings] = None,
) -> int:
    """Route the first token to a command.

    Args:
        tokens: Command-line tokens without the program name
        cwd: Directory the project is created in (defaults to cwd)
        settings: Tool settings (defaults to built-in defaults)

    Returns:
        Process exit code
    """
    if not tokens:
        print_usage()
        return 0

    try:
        command = Command(tokens[0].lower())
    except ValueError:
        console.print(f"[red]{escape(str(UnknownCommandError(tokens[0])))}[/]", soft_wrap=True)
        return 0

    if command is Command.HELP:
        print_usage()
        return 0

    return new_cmd(tokens, cwd=cwd, settings=settings)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    }
)
@click.version_option(version=__version__, prog_name="cppnew")
@click.option(
    "--git/--no-git",
    "init_git",
    default=None,
    help="Initialize a git repository with a .gitignore",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Show debug logging",
)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
def main(init_git: Optional[bool], verbose: bool, tokens: tuple):
    """cppnew - Scaffold ready-to-build C++/CMake projects.

    \b
    Quick Start:
      cppnew new -n app               Executable project
      cppnew new lib -n engine        Static library project
      cppnew new -n app -s 20 -c 3.25 C++20, CMake >= 3.25
    """
    settings = load_settings()
    if init_git is not None:
        settings = replace(settings, init_git=init_git)

    _configure_logging("DEBUG" if verbose else settings.log_level)
    raise SystemExit(dispatch(list(tokens), settings=settings))


if __name__ == "__main__":
    main()
