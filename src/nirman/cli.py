"""CLI interface for nirman - project structure creation tool."""

from __future__ import annotations

import logging
from typing import Optional

import click
from rich.markup import escape

from . import __version__
from .config import resolve_editor
from .errors import ClipboardError, NirmanError
from .prompts import HELP_TEXT, PROJECT_PROMPT
from .scaffold import create_project
from .utils import console, copy_to_clipboard, err_console

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(__version__, "-V", "--version", prog_name="nirman")
@click.option("-v", "--verbose", is_flag=True, help="Log diagnostic details.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """CLI to create project structure based on user input and AI assistance."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command("create")
@click.argument("project_name")
@click.option(
    "--editor",
    default=None,
    help="Editor command for this run (default: $EDITOR, then nano).",
)
def create_cmd(project_name: str, editor: Optional[str]) -> None:
    """Create a new project with the specified name."""
    try:
        result = create_project(project_name, resolve_editor(editor))
    except KeyboardInterrupt:
        err_console.print("\nInterrupted.", style="yellow")
        raise SystemExit(130)
    except (NirmanError, OSError) as e:
        err_console.print(
            f"[bold]An error occurred:[/bold] {escape(str(e))}", style="red"
        )
        raise SystemExit(1)

    if result.failed:
        err_console.print(
            f"Project {escape(project_name)} created with "
            f"{len(result.failed)} failed file(s):",
            style="bold red",
        )
        for item in result.failed:
            err_console.print(f"  - {escape(item.path or '<empty path>')}", style="red")
        raise SystemExit(1)

    console.print(
        f"Project [blue]{escape(project_name)}[/blue] created successfully!",
        style="bold green",
    )


@cli.command("prompt")
@click.option(
    "--print",
    "print_only",
    is_flag=True,
    help="Write the prompt to stdout instead of the clipboard.",
)
def prompt_cmd(print_only: bool) -> None:
    """Copy the project structure prompt to clipboard."""
    if print_only:
        click.echo(PROJECT_PROMPT)
        return
    try:
        copy_to_clipboard(PROJECT_PROMPT)
    except ClipboardError as e:
        err_console.print(
            f"Failed to copy to clipboard: {escape(str(e))}", style="red"
        )
        click.echo(PROJECT_PROMPT)
        raise SystemExit(1)
    console.print("Project structure prompt copied to clipboard!", style="green")
    console.print(
        "Paste this into an AI assistant to generate a project structure template.",
        style="yellow",
    )


@cli.command("help")
def help_cmd() -> None:
    """Display help information for Nirman."""
    console.print(HELP_TEXT, style="cyan", markup=False, highlight=False)


def main() -> None:
    cli(prog_name="nirman")
