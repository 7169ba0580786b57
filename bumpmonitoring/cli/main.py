"""
Main CLI entry point for bumpmonitoring.
"""

# Third-party imports
import typer

# Local imports
from bumpmonitoring import __version__
from bumpmonitoring.environment import get_env_config, is_debug_enabled
from bumpmonitoring.sync import SyncConfig, SyncError, Syncer
from bumpmonitoring.utils.rich_console import get_console_logger, print_table


logger = get_console_logger()


app = typer.Typer(
    help="bumpmonitoring - copy monitoring mixins (jsonnet/libsonnet) from a source tree into a destination tree.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"bumpmonitoring version: {__version__}")
        raise typer.Exit()


@app.command()
def sync(
    src: str = typer.Option("", "-src", "--src", envvar="BUMPMONITORING_SRC", help="Src dir of monitoring"),
    dst: str = typer.Option("", "-dst", "--dst", envvar="BUMPMONITORING_DST", help="Dst dir of monitoring"),
    dry_run: bool = typer.Option(False, "--dry-run", help="List the files that would be copied without copying them"),
    version: bool = typer.Option(
        False, "--version", callback=version_callback, is_eager=True, help="Show the bumpmonitoring version"
    ),
):
    """Copy the dashboard and alerting mixins from SRC into DST.

    Optional configs are looked up under DST, required configs under SRC, and
    every matching file is copied from SRC to DST, overwriting existing files.
    """
    get_env_config()
    config = SyncConfig(source_root=src, destination_root=dst)
    syncer = Syncer(config)

    try:
        if dry_run:
            paths = syncer.collect_all()
        else:
            paths = syncer.sync_all()
    except SyncError as error:
        logger.error(str(error), exc_info=is_debug_enabled())
        raise typer.Exit(1)

    logger.info(f"Processed optional configs under {config.destination_root}: {', '.join(config.optional_paths)}")
    logger.info(f"Processed required configs under {config.source_root}: {', '.join(config.required_paths)}")

    title = "Files to be copied (dry run)" if dry_run else "Copied files"
    print_table(["#", "Relative path"], [[index, path] for index, path in enumerate(paths, 1)], title=title)

    if dry_run:
        logger.info(f"Dry run: {len(paths)} file(s) would be copied")
    else:
        logger.success(f"Copied {len(paths)} file(s) from {config.source_root} to {config.destination_root}")


if __name__ == "__main__":
    app()
