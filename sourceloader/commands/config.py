"""Show the effective loader configuration."""

import click
from rich.table import Table

from ..console import console
from ..factory import CliOptions
from ..factory import create_config
from ..factory import handle_errors
from ..utils.error_format import escape_markup


@click.command(name="config")
@click.pass_obj
@handle_errors
def config_cmd(options: CliOptions):
    """Show the configuration after merging settings files and options."""
    config = create_config(options)

    table = Table(title="Loader Configuration")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", overflow="fold")

    table.add_row("root", escape_markup(config.root.absolute()))
    table.add_row("fallback_paths", escape_markup(", ".join(config.fallback_paths) or "(none)"))
    table.add_row("extension", escape_markup(config.extension))
    table.add_row("namespace_separator", escape_markup(config.namespace_separator))
    table.add_row("ignored_names", escape_markup(", ".join(config.ignored_names)))
    table.add_row("namespace_pattern", escape_markup(config.namespace_pattern))

    console.print(table)
