"""Activate single files or whole directories under the root."""

import sys

import click

from ..console import console
from ..factory import CliOptions
from ..factory import create_loader
from ..factory import glob_predicate
from ..factory import handle_errors
from ..utils.error_format import escape_markup


@click.command(name="activate")
@click.argument("file_path")
@click.option("--glob", "pattern", help="Only activate when the file name matches this pattern")
@click.pass_obj
@handle_errors
def activate_cmd(options: CliOptions, file_path: str, pattern: str | None):
    """Activate FILE_PATH (relative to the root)."""
    loader = create_loader(options)
    if not loader.activate(file_path, glob_predicate(pattern)):
        console.print(f"[red]Not a file:[/red] {escape_markup(loader.root / file_path)}", soft_wrap=True)
        sys.exit(1)
    console.print(f"[green]OK[/green] {escape_markup(loader.root / file_path)}", soft_wrap=True)


@click.command(name="activate-all")
@click.argument("directory")
@click.option("--glob", "pattern", help="Only activate files whose name matches this pattern")
@click.pass_obj
@handle_errors
def activate_all_cmd(options: CliOptions, directory: str, pattern: str | None):
    """Activate every source file below DIRECTORY (relative to the root).

    Exits with status 1 if a leaf that is not a regular file was met.
    """
    loader = create_loader(options)
    report = loader.activate_all_report(directory, glob_predicate(pattern))

    for path in report.activated:
        console.print(f"[green]activated[/green] {escape_markup(path)}", soft_wrap=True)
    for path in report.failures:
        console.print(f"[red]failed[/red] {escape_markup(path)}", soft_wrap=True)

    console.print(
        f"[bold]{len(report.activated)} activated, {len(report.declined)} skipped, "
        f"{len(report.failures)} failed[/bold]"
    )
    if not report.success:
        sys.exit(1)
