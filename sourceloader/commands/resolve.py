"""Resolve logical names to source files."""

import sys

import click

from ..console import console
from ..factory import CliOptions
from ..factory import create_loader
from ..factory import handle_errors
from ..utils.error_format import escape_markup


@click.command(name="resolve")
@click.argument("names", nargs=-1, required=True)
@click.pass_obj
@handle_errors
def resolve_cmd(options: CliOptions, names: tuple[str, ...]):
    """Resolve NAMES and activate every matching source file.

    Names use the configured namespace separator (default "."), e.g.
    app.models.User. Exits with status 1 when nothing resolved.
    """
    loader = create_loader(options)
    total = 0
    for name in names:
        paths = loader.resolve(name)
        if not paths:
            console.print(f"[yellow]{escape_markup(name)}[/yellow] [dim]not found[/dim]")
            continue
        total += len(paths)
        for path in paths:
            console.print(f"[cyan]{escape_markup(name)}[/cyan] {escape_markup(path)}", soft_wrap=True)

    verb = "Resolved" if not options.dry_run else "Would activate"
    console.print(f"[bold]{verb} {total} file(s)[/bold]")
    if total == 0:
        sys.exit(1)
