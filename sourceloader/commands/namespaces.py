"""List namespace declarations."""

import click

from ..console import console
from ..factory import CliOptions
from ..factory import create_loader
from ..factory import handle_errors
from ..utils.error_format import escape_markup


@click.command(name="namespaces")
@click.argument("file_name")
@click.pass_obj
@handle_errors
def namespaces_cmd(options: CliOptions, file_name: str):
    """Print namespaces declared in every file named FILE_NAME, in discovery order."""
    loader = create_loader(options)
    namespaces = loader.namespaces_of(file_name)
    if not namespaces:
        console.print(f"[dim]No namespace declarations found in files named {escape_markup(file_name)}[/dim]")
        return
    for namespace in namespaces:
        console.print(namespace, markup=False, highlight=False, soft_wrap=True)
