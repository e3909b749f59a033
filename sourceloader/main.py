"""sourceloader CLI - resolve names to source files and activate them."""

from pathlib import Path

import click

from .commands import activate_all_cmd
from .commands import activate_cmd
from .commands import config_cmd
from .commands import namespaces_cmd
from .commands import resolve_cmd
from .factory import CliOptions
from .logging_setup import init_json_logging
from .logging_setup import resolve_log_path


@click.group()
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory anchoring resolution (default: settings, SOURCELOADER_ROOT, or cwd)",
)
@click.option("--fallback", "fallback_paths", multiple=True, help="Fallback sub-root, repeatable, searched in order")
@click.option("--ext", "extension", help="Source file extension (default: py)")
@click.option("--separator", "namespace_separator", help="Namespace separator in names (default: .)")
@click.option("--dry-run", is_flag=True, help="Report what would be activated without executing files")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Write JSONL logs to this file")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level for --log-file (default: SOURCELOADER_LOG_LEVEL or INFO)",
)
@click.version_option(package_name="sourceloader")
@click.pass_context
def cli(
    ctx: click.Context,
    root: Path | None,
    fallback_paths: tuple[str, ...],
    extension: str | None,
    namespace_separator: str | None,
    dry_run: bool,
    log_file: str | None,
    log_level: str | None,
):
    """Resolve logical names to source files under a root and activate them."""
    if log_path := resolve_log_path(log_file):
        init_json_logging(log_path, log_level)

    ctx.obj = CliOptions(
        root=root,
        fallback_paths=fallback_paths,
        extension=extension,
        namespace_separator=namespace_separator,
        dry_run=dry_run,
    )


cli.add_command(resolve_cmd)
cli.add_command(activate_cmd)
cli.add_command(activate_all_cmd)
cli.add_command(namespaces_cmd)
cli.add_command(config_cmd)


def main():
    """Entry point for the sourceloader command."""
    cli()


if __name__ == "__main__":
    main()
